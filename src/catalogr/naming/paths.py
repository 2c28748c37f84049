"""
Container path construction.

Turns file locations into the virtual container hierarchy the catalog shows:
- escape_slash: Escape delimiters inside a single path segment
- build_container_chain: Join segments into one escaped container path
- get_last_path: Immediate parent directory name of a location
- get_root_path: Directory segments between the import root and a file
- RootedLocation: Location paired with its root, checked on construction
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from catalogr.exceptions import LocationOutsideRootError
from catalogr.naming.constants import ESCAPE_CHAR, PATH_SEPARATOR

logger = logging.getLogger(__name__)


def escape_slash(name: str) -> str:
    """
    Escape path delimiters in a single segment.

    Backslashes are doubled first, then each forward slash gets a backslash
    prefix. Reversing the order would double-escape the slash escapes.

    Example:
        "AC/DC" -> "AC\\/DC"
    """
    name = name.replace(ESCAPE_CHAR, ESCAPE_CHAR * 2)
    name = name.replace(PATH_SEPARATOR, ESCAPE_CHAR + PATH_SEPARATOR)
    return name


def build_container_chain(segments: Iterable[str]) -> str:
    """
    Build an escaped container path from ordered segments.

    Every segment is escaped and prefixed with "/". No segments gives "".

    Example:
        ["Video", "Directories", "a/b"] -> "/Video/Directories/a\\/b"
    """
    return "".join(PATH_SEPARATOR + escape_slash(segment) for segment in segments)


def get_last_path(location: str) -> str:
    """Return the name of the directory directly containing ``location``, or ""."""
    parts = location.split(PATH_SEPARATOR)
    if len(parts) > 1 and parts[-2]:
        return parts[-2]
    return ""


def _root_parent(root_path: str) -> str:
    """Drop the last component of the root path ("/a/b/c" -> "/a/b")."""
    cut = root_path.rfind(PATH_SEPARATOR)
    return root_path[:cut] if cut >= 0 else ""


def is_under_root(root_path: str, location: str) -> bool:
    """
    Check whether ``location`` lies under the parent directory of ``root_path``.

    An empty root path accepts every location, since extraction then only
    looks at the location itself.
    """
    if not root_path:
        return True
    base = _root_parent(root_path)
    if not base:
        return True
    return location.startswith(base + PATH_SEPARATOR)


def get_root_path(root_path: str, location: str, *, strict: bool = False) -> list[str]:
    """
    Derive container segments for a file from its location and import root.

    With a root path, the root is cut back to its parent directory and the
    directories between that prefix and the file become the segments, left
    unescaped (build_container_chain escapes them). Without a root path the
    immediate parent directory name is used as the single, escaped segment.

    Args:
        root_path: Import root ("" when the file was added on its own)
        location: Absolute, "/"-separated location of the media file
        strict: Raise instead of warning when location is not under the root

    Returns:
        Directory segments, outermost first

    Raises:
        LocationOutsideRootError: If strict and the location is outside the root
    """
    if not root_path:
        last = get_last_path(location)
        return [escape_slash(last)] if last else []

    if not is_under_root(root_path, location):
        message = f"Location {location!r} is not under root {root_path!r}"
        if strict:
            raise LocationOutsideRootError(message, root_path=root_path, location=location)
        logger.warning("%s; segments will not be meaningful", message)

    base = _root_parent(root_path)
    end = location.rfind(PATH_SEPARATOR)
    directory = location[len(base) : end] if end >= 0 else ""
    if directory.startswith(PATH_SEPARATOR):
        directory = directory[1:]

    segments = directory.split(PATH_SEPARATOR)
    logger.debug("[paths] %r under %r -> %r", location, root_path, segments)
    return segments


@dataclass(frozen=True)
class RootedLocation:
    """
    A media location paired with the import root it was found under.

    Construction fails with LocationOutsideRootError when the location is not
    under the root, so every instance yields meaningful segments.
    """

    root_path: str
    location: str

    def __post_init__(self) -> None:
        if not is_under_root(self.root_path, self.location):
            raise LocationOutsideRootError(
                f"Location {self.location!r} is not under root {self.root_path!r}",
                root_path=self.root_path,
                location=self.location,
            )

    @property
    def segments(self) -> list[str]:
        """Directory segments between root and file."""
        return get_root_path(self.root_path, self.location, strict=True)

    @property
    def container_chain(self) -> str:
        """Escaped container path for the segments."""
        return build_container_chain(self.segments)
