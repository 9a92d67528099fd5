"""Utilities for accessing the installed gclone version."""

from __future__ import annotations

from functools import lru_cache
from importlib import resources


_PACKAGE_NAME = "gclone"
_VERSION_FILENAME = "VERSION"

PROGRAM_NAME = "gclone"
PROJECT_URL = "https://github.com/jftuga/gclone"


@lru_cache(maxsize=1)
def get_version() -> str:
    """Return the current gclone version string."""
    try:
        version_file = resources.files(_PACKAGE_NAME).joinpath(_VERSION_FILENAME)
        return version_file.read_text(encoding="utf-8").strip()
    except (FileNotFoundError, ModuleNotFoundError):
        return "unknown"


def version_banner() -> str:
    """Program name, version and project URL as printed by ``gclone -v``."""
    return f"{PROGRAM_NAME} v{get_version()}\n{PROJECT_URL}"


__all__ = ["PROGRAM_NAME", "PROJECT_URL", "get_version", "version_banner", "__version__"]

__version__ = get_version()
