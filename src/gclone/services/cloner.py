"""
Clone workflow orchestration.

Chains the existence check, reconciliation of the local destination and the
delegated ``git clone``. Environment validation and argument handling happen
in the CLI before this service is reached.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from ..environment import Identity
from ..logger import get_logger
from ..reconcile import DirectoryReconciler, ReconcileOutcome
from ..remote import GitClient, RepositoryExistenceChecker, repository_url
from ..settings import AppSettings

log = get_logger(__name__)


@dataclass(frozen=True)
class CloneTarget:
    owner: str
    repo_name: str
    remote_url: str
    local_path: Path

    @classmethod
    def build(cls, settings: AppSettings, identity: Identity, repo_name: str) -> "CloneTarget":
        return cls(
            owner=identity.owner,
            repo_name=repo_name,
            remote_url=repository_url(settings, identity.owner, repo_name),
            local_path=Path(repo_name),
        )


class CloneStatus(str, Enum):
    NOT_FOUND = "not_found"
    DECLINED = "declined"
    CLONED = "cloned"


@dataclass
class CloneResult:
    target: CloneTarget
    status: CloneStatus
    outcome: Optional[ReconcileOutcome] = None
    exit_code: int = 0


class CloneService:
    """Runs one clone request from existence check to ``git clone``."""

    def __init__(
        self,
        settings: AppSettings,
        git: Optional[GitClient] = None,
        checker: Optional[RepositoryExistenceChecker] = None,
        reconciler: Optional[DirectoryReconciler] = None,
    ) -> None:
        self.settings = settings
        self.git = git or GitClient(settings.git_executable)
        self.checker = checker or RepositoryExistenceChecker(settings, git=self.git)
        self.reconciler = reconciler or DirectoryReconciler(trash_command=settings.trash_command)

    def run(self, identity: Identity, repo_name: str) -> CloneResult:
        """Execute the workflow; each step stops the run when it fails."""
        target = CloneTarget.build(self.settings, identity, repo_name)
        log.info("clone_requested", owner=target.owner, repo=target.repo_name, url=target.remote_url)

        if not self.checker.exists(target.owner, target.repo_name):
            log.warning("repository_not_found", url=target.remote_url)
            return CloneResult(target=target, status=CloneStatus.NOT_FOUND, exit_code=1)

        outcome = self.reconciler.reconcile(target.local_path)
        log.info("destination_reconciled", path=str(target.local_path), outcome=outcome.value)
        if not outcome.allows_clone:
            return CloneResult(target=target, status=CloneStatus.DECLINED, outcome=outcome)

        exit_code = self.git.clone(target.remote_url, target.local_path)
        return CloneResult(
            target=target,
            status=CloneStatus.CLONED,
            outcome=outcome,
            exit_code=exit_code,
        )
