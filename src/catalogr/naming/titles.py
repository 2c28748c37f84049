"""
Display-title cleanup for imported media files.

Release names carry encoder, source and quality tags in no fixed order
("The.Movie.2010.BluRay.x264-YIFY.mkv"), so each known tag is stripped on its
own instead of parsing the name structurally. Pipeline, in order:

1. Strip the file extension
2. Tabs -> spaces
3. Remove every noise token (rule table, in order, all occurrences)
4. Underscores and dots -> spaces
5. Collapse doubled spaces and dashes
6. Capitalize the first character
7. Drop the title entirely if it is a blacklisted track label

The result is not idempotent: normalizing an already normalized title can
change it again (e.g. a token reassembled after an earlier removal).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from catalogr.naming.constants import COLLAPSE_PAIRS, EXTENSION_PATTERN, SEPARATOR_REPLACEMENTS

if TYPE_CHECKING:
    from catalogr.schemas.rules import TitleRules

logger = logging.getLogger(__name__)


def strip_extension(name: str) -> str:
    """Remove a trailing ".ext" (last dot-segment without "/" or "." after it)."""
    return EXTENSION_PATTERN.sub("", name)


def collapse_repeats(text: str) -> str:
    """
    Collapse doubled spaces and doubled dashes.

    Each pass replaces only the first "  " and the first "--"; passes repeat
    until one makes no change, so runs of any length end up single.
    """
    result = text
    while True:
        before = result
        for old, new in COLLAPSE_PAIRS:
            result = result.replace(old, new, 1)
        if result == before:
            return result


def capitalize_first(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def transform_title(
    title: str,
    rules: TitleRules | None = None,
    *,
    verbose: bool = False,
) -> str:
    """
    Turn a raw file name into a display title.

    Args:
        title: Raw file name or title
        rules: Noise tokens and blacklist to apply (built-in defaults if None)
        verbose: If True, log each transformation with its rule ID

    Returns:
        Cleaned title, or "" if the result is a blacklisted track label
    """
    if rules is None:
        from catalogr.schemas.rules import DEFAULT_TITLE_RULES

        rules = DEFAULT_TITLE_RULES

    result = title
    transformations: list[tuple[str, str, str]] = []  # (before, after, rule_id)

    steps: list[tuple[str, Callable[[str], str]]] = [
        ("extension", strip_extension),
        ("tabs", lambda s: s.replace("\t", " ")),
    ]
    steps += [
        (f"noise_token:{token}", lambda s, token=token: s.replace(token, ""))
        for token in rules.noise_tokens
    ]
    steps += [
        (f"separator:{old}", lambda s, old=old, new=new: s.replace(old, new))
        for old, new in SEPARATOR_REPLACEMENTS
    ]
    steps += [("collapse", collapse_repeats), ("capitalize", capitalize_first)]

    for rule_id, step in steps:
        before = result
        result = step(result)
        if verbose and before != result:
            transformations.append((before, result, rule_id))

    if result in rules.blacklist:
        logger.debug("[transform_title] %r dropped (blacklisted label %r)", title, result)
        result = ""

    if verbose:
        for step_before, step_after, rule_id in transformations:
            logger.debug("[transform_title] %r -> %r (%s)", step_before, step_after, rule_id)

    return result
