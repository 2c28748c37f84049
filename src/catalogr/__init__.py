"""catalogr - Title and container-path helpers for media catalog imports."""

from catalogr.naming import (
    RootedLocation,
    build_container_chain,
    escape_slash,
    get_last_path,
    get_playlist_type,
    get_root_path,
    get_year,
    transform_title,
)
from catalogr.exceptions import (
    CatalogrError,
    ConfigurationError,
    LocationOutsideRootError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Exceptions
    "CatalogrError",
    "ConfigurationError",
    "ValidationError",
    "LocationOutsideRootError",
    # Naming
    "RootedLocation",
    "build_container_chain",
    "escape_slash",
    "get_last_path",
    "get_playlist_type",
    "get_root_path",
    "get_year",
    "transform_title",
]
