"""
Catalogr exception hierarchy.

The naming transforms themselves are total and never raise. These exceptions
cover the parts that can fail: loading rule files and strict location checks.

Exception Hierarchy:
    CatalogrError (base)
    ├── ConfigurationError - Rules file issues, invalid settings
    └── ValidationError - Input precondition failures
        └── LocationOutsideRootError - Location not under the import root
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class CatalogrError(Exception):
    """Base exception for all catalogr errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """
        Initialize catalogr exception.

        Args:
            message: Human-readable error message
            details: Optional structured error details for logging/debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(CatalogrError):
    """Rules file or settings error."""

    def __init__(
        self,
        message: str,
        *,
        config_file: Path | str | None = None,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if config_file:
            details["config_file"] = str(config_file)
        if field:
            details["field"] = field
        super().__init__(message, details=details)
        self.config_file = config_file
        self.field = field


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(CatalogrError):
    """Input validation failure."""

    def __init__(
        self,
        message: str,
        *,
        errors: list[str] | None = None,
        warnings: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if errors:
            details["errors"] = errors
        if warnings:
            details["warnings"] = warnings
        super().__init__(message, details=details)
        self.errors = errors or []
        self.warnings = warnings or []


class LocationOutsideRootError(ValidationError):
    """Media location does not lie under the import root."""

    def __init__(
        self,
        message: str,
        *,
        root_path: str,
        location: str,
        **kwargs: Any,
    ) -> None:
        details = kwargs.get("details") or {}
        details["root_path"] = root_path
        details["location"] = location
        kwargs["details"] = details
        super().__init__(message, **kwargs)
        self.root_path = root_path
        self.location = location
