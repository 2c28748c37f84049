"""Pydantic schema for title rule files (rules.yaml / rules.json)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from catalogr.naming.constants import DEFAULT_NOISE_TOKENS, DEFAULT_TITLE_BLACKLIST


class TitleRules(BaseModel):
    """
    Rule tables driving title normalization.

    Validates the file structure at load time, catching:
    - Empty tokens (which would match everywhere)
    - Wrong types
    - Unknown keys (with extra="forbid")

    Token order is significant and preserved as written. Both tables are
    tuples so a shared instance cannot be changed by its callers.
    """

    version: str = Field(default="1.0.0", alias="_version", pattern=r"^\d+\.\d+\.\d+$")

    # Release tags removed from titles, applied in order
    noise_tokens: tuple[str, ...] = DEFAULT_NOISE_TOKENS

    # Finished titles that are dropped entirely
    blacklist: tuple[str, ...] = DEFAULT_TITLE_BLACKLIST

    @field_validator("noise_tokens")
    @classmethod
    def reject_empty_tokens(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Empty tokens are not allowed."""
        for i, token in enumerate(v):
            if not token:
                raise ValueError(f"noise_tokens[{i}] is empty")
        return v

    @model_validator(mode="before")
    @classmethod
    def filter_comments(cls, data: Any) -> Any:
        """Remove top-level comment keys before validation."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if not k.startswith("_") or k == "_version"}
        return data

    model_config = {
        "extra": "forbid",  # Fail on unknown keys (catches typos)
        "populate_by_name": True,  # Allow both alias and field name
        "frozen": True,
    }


# Built-in rules, used whenever no rules are passed explicitly
DEFAULT_TITLE_RULES = TitleRules()


def validate_title_rules(data: Mapping[str, Any]) -> TitleRules:
    """
    Validate rule file data against the schema.

    Args:
        data: Raw dict loaded from a rules file

    Returns:
        Validated TitleRules instance

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return TitleRules.model_validate(data)
