"""
Naming helpers for the media import pipeline.

This module provides a unified API for the import-time string transforms:
- Container path escaping and construction
- Directory segments from file locations and import roots
- Year and playlist-type extraction from metadata strings
- Display-title cleanup from release file names

All functions are pure and safe to call from any thread.
"""

from __future__ import annotations

from catalogr.naming.constants import (
    DEFAULT_NOISE_TOKENS,
    DEFAULT_TITLE_BLACKLIST,
    PLAYLIST_TYPES,
)
from catalogr.naming.metadata import get_playlist_type, get_year
from catalogr.naming.paths import (
    RootedLocation,
    build_container_chain,
    escape_slash,
    get_last_path,
    get_root_path,
    is_under_root,
)
from catalogr.naming.titles import (
    capitalize_first,
    collapse_repeats,
    strip_extension,
    transform_title,
)

__all__ = [
    # Constants
    "DEFAULT_NOISE_TOKENS",
    "DEFAULT_TITLE_BLACKLIST",
    "PLAYLIST_TYPES",
    # Paths
    "RootedLocation",
    "build_container_chain",
    "escape_slash",
    "get_last_path",
    "get_root_path",
    "is_under_root",
    # Metadata
    "get_playlist_type",
    "get_year",
    # Titles
    "capitalize_first",
    "collapse_repeats",
    "strip_extension",
    "transform_title",
]
