"""
Resolution of a clone destination that already exists locally.

The user is asked to remove the directory (trash when available, otherwise
permanent deletion). If they refuse, a timestamped rename is offered instead.
Refusing both leaves the directory untouched and the clone is skipped.
"""
from __future__ import annotations

import shutil
import subprocess
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

import typer

from .prompts import confirm
from .timestamps import ModifiedTimeSource, renamed_path
from .trash import TrashAvailable, TrashCapability, probe_trash
from ..logger import get_logger

log = get_logger(__name__)


class ReconcileOutcome(str, Enum):
    NOT_PRESENT = "not_present"
    REMOVED = "removed"
    RENAMED = "renamed"
    DECLINED = "declined"

    @property
    def allows_clone(self) -> bool:
        return self is not ReconcileOutcome.DECLINED


class ReconcileError(RuntimeError):
    """Raised when an accepted removal or rename could not be carried out."""


def _exists(path: Path) -> bool:
    return path.exists() or path.is_symlink()


class DirectoryReconciler:
    """Interactive remove-or-rename for an existing clone destination."""

    def __init__(
        self,
        trash: Optional[TrashCapability] = None,
        trash_command: str = "trash",
        time_source: Optional[ModifiedTimeSource] = None,
        confirm_func: Callable[[str], bool] = confirm,
        echo: Callable[[str], None] = typer.echo,
    ) -> None:
        self._trash = trash
        self.trash_command = trash_command
        self.time_source = time_source
        self.confirm = confirm_func
        self.echo = echo

    @property
    def trash(self) -> TrashCapability:
        if self._trash is None:
            self._trash = probe_trash(self.trash_command)
        return self._trash

    def reconcile(self, path: Path) -> ReconcileOutcome:
        if not _exists(path):
            log.debug("destination_absent", path=str(path))
            return ReconcileOutcome.NOT_PRESENT

        trash = self.trash
        if isinstance(trash, TrashAvailable):
            question = f'Move "{path}" to trash?'
        else:
            question = f'Permanently delete "{path}"?'

        if self.confirm(question):
            self._remove(path, trash)
            return ReconcileOutcome.REMOVED

        target = renamed_path(path, self.time_source)
        if self.confirm(f'Rename "{path}" to "{target}"?'):
            self._rename(path, target)
            return ReconcileOutcome.RENAMED

        log.info("reconcile_declined", path=str(path))
        self.echo(f'Skipped "{path}"; leaving it in place.')
        return ReconcileOutcome.DECLINED

    def _remove(self, path: Path, trash: TrashCapability) -> None:
        if isinstance(trash, TrashAvailable):
            try:
                trash.discard(path)
            except (OSError, subprocess.CalledProcessError) as exc:
                raise ReconcileError(f'could not move "{path}" to trash: {exc}') from exc
            self.echo(f'Moved "{path}" to trash.')
            return

        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
        except OSError as exc:
            raise ReconcileError(f'could not delete "{path}": {exc}') from exc
        log.info("directory_deleted", path=str(path))
        self.echo(f'Permanently deleted "{path}".')

    def _rename(self, path: Path, target: Path) -> None:
        if _exists(target):
            raise ReconcileError(f'cannot rename "{path}": "{target}" already exists')
        try:
            path.rename(target)
        except OSError as exc:
            raise ReconcileError(f'could not rename "{path}" to "{target}": {exc}') from exc
        log.info("directory_renamed", path=str(path), target=str(target))
        self.echo(f'Renamed "{path}" to "{target}".')
