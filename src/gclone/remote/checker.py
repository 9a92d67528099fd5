"""
Remote repository existence checks.

The hosting API is asked first since it answers quickly. It can be rate
limited or blocked though, so a ``git ls-remote`` probe against the clone URL
is used as a fallback. Only the combined boolean is reported.
"""
from __future__ import annotations

from typing import Optional

import requests

from .git import GitClient
from ..logger import get_logger
from ..settings import AppSettings

log = get_logger(__name__)

API_ACCEPT_HEADER = "application/vnd.github+json"


def repository_url(settings: AppSettings, owner: str, repo_name: str) -> str:
    return f"{settings.host_url}/{owner}/{repo_name}"


class RepositoryExistenceChecker:
    """Decides whether ``owner/repo_name`` exists on the remote host."""

    def __init__(self, settings: AppSettings, git: Optional[GitClient] = None) -> None:
        self.settings = settings
        self.git = git or GitClient(settings.git_executable)

    def metadata_url(self, owner: str, repo_name: str) -> str:
        return f"{self.settings.api_root}/repos/{owner}/{repo_name}"

    def _api_confirms(self, owner: str, repo_name: str) -> bool:
        url = self.metadata_url(owner, repo_name)
        try:
            response = requests.get(
                url,
                headers={"Accept": API_ACCEPT_HEADER},
                timeout=self.settings.request_timeout,
            )
        except requests.RequestException as exc:
            log.debug("api_probe_failed", url=url, error=str(exc))
            return False
        log.debug("api_probe_finished", url=url, status=response.status_code)
        return response.status_code == 200

    def exists(self, owner: str, repo_name: str) -> bool:
        if self._api_confirms(owner, repo_name):
            return True
        clone_url = repository_url(self.settings, owner, repo_name)
        found = self.git.ls_remote(clone_url)
        log.info("existence_checked", owner=owner, repo=repo_name, found=found, via="ls-remote")
        return found
