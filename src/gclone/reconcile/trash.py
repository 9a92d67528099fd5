"""
Optional trash/recycle support.

The trash utility is a plain executable found on ``PATH``. When it is absent
the reconciler falls back to permanent deletion.
"""
from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..logger import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class TrashAvailable:
    """A trash executable resolved on ``PATH``."""

    executable: str

    def discard(self, path: Path) -> None:
        """Move ``path`` to the trash; raises ``CalledProcessError`` on failure."""
        subprocess.run([self.executable, str(path)], check=True)
        log.info("moved_to_trash", path=str(path), executable=self.executable)


@dataclass(frozen=True)
class TrashUnavailable:
    """No trash executable could be found."""


TrashCapability = Union[TrashAvailable, TrashUnavailable]


def probe_trash(command: str = "trash") -> TrashCapability:
    resolved = shutil.which(command)
    if resolved is None:
        log.debug("trash_unavailable", command=command)
        return TrashUnavailable()
    log.debug("trash_available", executable=resolved)
    return TrashAvailable(executable=resolved)
