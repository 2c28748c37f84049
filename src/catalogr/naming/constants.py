"""
Constants used across naming modules.

Contains the rule tables and patterns used for:
- Release-tag stripping in display titles
- Subtitle/language label blacklist
- Playlist mimetype detection
- Date parsing
"""

from __future__ import annotations

import re

# =============================================================================
# Title Noise Tokens
# =============================================================================

# Release-group, codec and source tags stripped from titles.
# Order matters: each token is removed globally before the next one runs,
# and matching is case-sensitive literal substring (not whole-word).
DEFAULT_NOISE_TOKENS: tuple[str, ...] = (
    "YIFY",
    "BluRay",
    "x264",
    "BrRip",
    "HDRip",
    "AAC-JYK",
    "bitloks",
    "H264",
    "AAC-RARBG",
    "SiNNERS",
    "X264",
    "XViD-EVO",
    "psig-",
    "xvid",
    "dvdrip",
    "ac3",
    "DvDrip",
    "AC3-EVO",
    "internal",
    "XviD",
    "iNFAMOUS",
    "DVDRip",
    "XViD",
    "HD-CAM",
    "AC3-CPG",
    "HQMic",
    "BRRip",
    "Bluray",
    "500MB",
    "aXXo",
    "VPPV",
    "BOKUTOX",
    "George Lucas",
    "Eng Subs",
)

# =============================================================================
# Title Blacklist
# =============================================================================

# Leftover subtitle/audio track labels that are not real titles.
# Compared exactly (case and form) against the finished title.
DEFAULT_TITLE_BLACKLIST: tuple[str, ...] = (
    "English",
    "English-forced",
    "English-sdh",
    "Sdh",
    "Sdh-SDH",
    "Spa",
    "subs",
    "Slv",
)

# =============================================================================
# Character Replacements
# =============================================================================

# Applied after noise-token removal, in this order
SEPARATOR_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("_", " "),
    (".", " "),
)

# Collapsed one occurrence at a time until nothing changes
COLLAPSE_PAIRS: tuple[tuple[str, str], ...] = (
    ("  ", " "),
    ("--", "-"),
)

# =============================================================================
# Playlists
# =============================================================================

PLAYLIST_TYPES: dict[str, str] = {
    "audio/x-mpegurl": "m3u",
    "audio/x-scpls": "pls",
}

# =============================================================================
# Pre-compiled Patterns
# =============================================================================

# Trailing ".ext" with no further dot or slash after it
EXTENSION_PATTERN = re.compile(r"\.[^/.]+$")

# "2010-03-23" -> "2010"; ASCII digits only
YEAR_PREFIX_PATTERN = re.compile(r"^([0-9]{4})-")

# =============================================================================
# Path Delimiters
# =============================================================================

PATH_SEPARATOR = "/"
ESCAPE_CHAR = "\\"
