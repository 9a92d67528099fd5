"""
Working directory checks.

gclone must be run from ``<container>/<owner>/``; the owner is whatever the
current directory is called.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .logger import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class Identity:
    """Owner namespace derived from the working directory."""

    owner: str
    container: str


class EnvironmentMismatchError(ValueError):
    """Raised when the working directory's parent is not the container."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(
            f'parent directory must be named "{expected}", not "{actual}"'
        )
        self.expected = expected
        self.actual = actual


def validate_environment(container: str, cwd: Optional[Path] = None) -> Identity:
    """Return the identity for ``cwd`` or raise ``EnvironmentMismatchError``."""
    current_dir = (cwd or Path.cwd()).absolute()
    current = current_dir.name
    parent = current_dir.parent.name

    if parent != container:
        log.debug("environment_mismatch", cwd=str(current_dir), expected=container, actual=parent)
        raise EnvironmentMismatchError(expected=container, actual=parent)

    log.debug("environment_validated", owner=current, container=container)
    return Identity(owner=current, container=container)
