"""
Last-modified timestamps for rename suffixes.

``os.stat`` already hides the POSIX/Windows difference in how modification
times are read, so one implementation serves both host families. The
``ModifiedTimeSource`` protocol is what the reconciler depends on.
"""
from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Optional, Protocol

SUFFIX_FORMAT = "%Y%m%d.%H%M%S"


class ModifiedTimeSource(Protocol):
    """Reports when a filesystem entry was last modified, in local time."""

    def modified_at(self, path: Path) -> datetime:
        ...


class StatModifiedTime:
    # The entry itself is renamed, so a symlink reports its own mtime.
    def modified_at(self, path: Path) -> datetime:
        stat_result = os.stat(path, follow_symlinks=False)
        return datetime.fromtimestamp(stat_result.st_mtime)


def timestamp_suffix(path: Path, source: Optional[ModifiedTimeSource] = None) -> str:
    """Format the last-modified time of ``path`` as ``YYYYMMDD.HHMMSS``."""
    when = (source or StatModifiedTime()).modified_at(path)
    return when.strftime(SUFFIX_FORMAT)


def renamed_path(path: Path, source: Optional[ModifiedTimeSource] = None) -> Path:
    return path.with_name(f"{path.name}--{timestamp_suffix(path, source)}")
