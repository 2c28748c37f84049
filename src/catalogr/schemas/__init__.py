"""Pydantic schemas for catalogr configuration files."""

from catalogr.schemas.rules import DEFAULT_TITLE_RULES, TitleRules, validate_title_rules

__all__ = [
    "DEFAULT_TITLE_RULES",
    "TitleRules",
    "validate_title_rules",
]
