"""Runtime context for CLI commands.

Initialized once in the main callback and available to all commands via
ctx.obj, so commands share the global flags and load rules only when needed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import typer

from catalogr.schemas.rules import TitleRules

logger = logging.getLogger(__name__)


@dataclass
class RuntimeContext:
    """Typed runtime context available to all commands via ctx.obj.

    Example:
        @app.command()
        def my_command(ctx: typer.Context) -> None:
            runtime = get_runtime_context(ctx)
            title = transform_title(raw, runtime.rules)
    """

    rules_file: Path | None = None
    strict_paths: bool = False
    verbose: bool = False

    _rules: TitleRules | None = field(default=None, repr=False)

    @property
    def rules(self) -> TitleRules:
        """Get active title rules (lazy-loaded).

        Raises:
            ConfigurationError: If the rules file cannot be loaded
        """
        if self._rules is None:
            from catalogr.config import get_title_rules, load_title_rules

            if self.rules_file is not None:
                self._rules = load_title_rules(self.rules_file)
            else:
                self._rules = get_title_rules()
        return self._rules


def get_runtime_context(ctx: typer.Context) -> RuntimeContext:
    """Get the runtime context, creating a default one if the callback did not run."""
    if isinstance(ctx.obj, RuntimeContext):
        return ctx.obj
    logger.debug("No runtime context on ctx.obj, using defaults")
    ctx.obj = RuntimeContext()
    return ctx.obj
