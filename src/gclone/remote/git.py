"""
Thin wrapper around the ``git`` executable.
"""
from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Dict

from ..logger import get_logger

log = get_logger(__name__)


class GitExecutableError(RuntimeError):
    """Raised when the configured git executable cannot be started."""

    def __init__(self, message: str, exit_code: int) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class GitClient:
    """Runs the two git commands gclone needs."""

    def __init__(self, executable: str = "git") -> None:
        self.executable = executable

    @staticmethod
    def _probe_env() -> Dict[str, str]:
        env = dict(os.environ)
        env["GIT_TERMINAL_PROMPT"] = "0"
        return env

    def ls_remote(self, url: str) -> bool:
        """Return True when ``git ls-remote`` can list references at ``url``."""
        try:
            completed = subprocess.run(
                [self.executable, "ls-remote", url],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                env=self._probe_env(),
            )
        except OSError as exc:
            log.debug("ls_remote_unavailable", url=url, error=str(exc))
            return False
        log.debug("ls_remote_finished", url=url, returncode=completed.returncode)
        return completed.returncode == 0

    def clone(self, url: str, destination: Path) -> int:
        """
        Run ``git clone url destination``.

        The destination is always passed so git never derives a different
        directory name (``foo.git`` -> ``foo``) from the URL. Output is left
        attached to the terminal so git can report progress and ask for
        credentials. The return code is passed through untouched.
        """
        log.info("clone_started", url=url, destination=str(destination))
        try:
            completed = subprocess.run([self.executable, "clone", url, str(destination)])
        except FileNotFoundError as exc:
            raise GitExecutableError(
                f"git executable not found: {self.executable}", exit_code=127
            ) from exc
        except OSError as exc:
            raise GitExecutableError(
                f"cannot run git executable {self.executable}: {exc}", exit_code=126
            ) from exc
        log.info("clone_finished", url=url, returncode=completed.returncode)
        return completed.returncode
