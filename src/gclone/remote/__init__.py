"""
Remote host access: existence probes and the git command wrapper.
"""
from .checker import RepositoryExistenceChecker, repository_url
from .git import GitClient, GitExecutableError

__all__ = ["GitClient", "GitExecutableError", "RepositoryExistenceChecker", "repository_url"]
