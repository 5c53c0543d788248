# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

"""Git operations for stud."""

from pathlib import Path
from typing import Any, Dict, List, Optional
from git import Repo, InvalidGitRepositoryError, NoSuchPathError, GitCommandError

from .store import ConfigStore

PROJECT_CONFIG_FILE_NAME = "stud.toml"


class GitError(Exception):
    """Raised when a git operation fails."""
    pass


class GitRepository:
    """Git working copy wrapper."""

    def __init__(self, repo_path: str, store: Optional[ConfigStore] = None):
        """Initialize with path to git repository."""
        self.repo_path = Path(repo_path)
        try:
            self.repo = Repo(str(self.repo_path), search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise GitError(f"Not in a git repository: {repo_path}") from e
        self.store = store or ConfigStore()

    @classmethod
    def discover(cls, path: str = ".", store: Optional[ConfigStore] = None) -> Optional["GitRepository"]:
        """Return a repository for path, or None outside a git working copy."""
        try:
            return cls(path, store=store)
        except GitError:
            return None

    def get_all_remote_branches(self, remote: str = "origin") -> List[str]:
        """
        Get all branch names known for a remote, without the remote prefix.

        Raises:
            GitError: If the remote does not exist
        """
        try:
            remote_obj = self.repo.remote(remote)
            return [ref.remote_head for ref in remote_obj.refs if ref.remote_head != 'HEAD']
        except (ValueError, GitCommandError) as e:
            raise GitError(f"Failed to list branches of remote '{remote}': {e}") from e

    def get_project_config_path(self) -> Path:
        """Project settings live inside the git directory so they are never committed."""
        return Path(self.repo.git_dir) / PROJECT_CONFIG_FILE_NAME

    def read_project_config(self) -> Dict[str, Any]:
        """Read the project config, or an empty dict when there is none."""
        path = self.get_project_config_path()
        if not self.store.exists(path):
            return {}
        return self.store.read(path)

    def write_project_config(self, config: Dict[str, Any]) -> None:
        self.store.write(self.get_project_config_path(), config)
