"""Helpers for metadata strings supplied by the extractor (dates, mimetypes)."""

from __future__ import annotations

from catalogr.naming.constants import PLAYLIST_TYPES, YEAR_PREFIX_PATTERN


def get_year(date: str) -> str:
    """
    Extract the year from an ISO-like date.

    Returns the leading four digits when the date starts with "YYYY-",
    otherwise returns the input unchanged.

    Example:
        "2010-03-23" -> "2010"
        "March 2010" -> "March 2010"
    """
    match = YEAR_PREFIX_PATTERN.match(date)
    if match:
        return match.group(1)
    return date


def get_playlist_type(mimetype: str) -> str:
    """Return "m3u" or "pls" for playlist mimetypes, "" for anything else."""
    return PLAYLIST_TYPES.get(mimetype, "")
