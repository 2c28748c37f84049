"""
Title rule loading.

Rules come from the built-in tables unless a YAML or JSON rules file is
given, either explicitly or through CATALOGR_RULES_FILE.

Example rules.yaml:

    _version: "1.0.0"
    _comment: "Tokens are removed in order, case-sensitive"
    noise_tokens:
      - YIFY
      - BluRay
    blacklist:
      - English
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from catalogr.env_settings import get_env_settings
from catalogr.exceptions import ConfigurationError
from catalogr.schemas.rules import DEFAULT_TITLE_RULES, TitleRules, validate_title_rules

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def _read_rules_file(path: Path) -> Any:
    """Parse a rules file as YAML or JSON depending on its suffix."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def load_title_rules(path: Path | str) -> TitleRules:
    """
    Load and validate title rules from a YAML or JSON file.

    Args:
        path: Path to rules file (.yaml/.yml parsed as YAML, anything else as JSON)

    Returns:
        Validated TitleRules

    Raises:
        ConfigurationError: If the file is missing, unparsable, or invalid
    """
    rules_path = Path(path)
    if not rules_path.is_file():
        raise ConfigurationError(f"Rules file not found: {rules_path}", config_file=rules_path)

    try:
        data = _read_rules_file(rules_path)
    except (OSError, yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Could not parse rules file {rules_path}: {e}", config_file=rules_path
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Rules file {rules_path} must contain a mapping, got {type(data).__name__}",
            config_file=rules_path,
        )

    try:
        rules = validate_title_rules(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise ConfigurationError(
            f"Invalid rules file {rules_path}: {first['msg']}",
            config_file=rules_path,
            field=field,
            details={"errors": [err["msg"] for err in e.errors()]},
        ) from e

    logger.debug(
        "Loaded %d noise tokens and %d blacklist entries from %s",
        len(rules.noise_tokens),
        len(rules.blacklist),
        rules_path,
    )
    return rules


@lru_cache(maxsize=1)
def get_title_rules() -> TitleRules:
    """
    Get the active title rules (cached).

    Uses CATALOGR_RULES_FILE when set, otherwise the built-in defaults.
    """
    rules_file = get_env_settings().rules_file
    if rules_file is None:
        return DEFAULT_TITLE_RULES
    return load_title_rules(rules_file)


def clear_rules_cache() -> None:
    """Clear the cached title rules (and the env settings they depend on)."""
    get_title_rules.cache_clear()
    get_env_settings.cache_clear()
