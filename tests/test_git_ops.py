# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

"""Tests for Git operations."""

import pytest

from stud_cli.git_ops import GitRepository, GitError, PROJECT_CONFIG_FILE_NAME
from stud_cli.validator import ConfigValidator


class TestRemoteBranches:
    """Tests for remote branch listing."""

    def test_lists_origin_branches_without_prefix(self, git_repo_with_origin):
        repo_path, _ = git_repo_with_origin

        branches = GitRepository(str(repo_path)).get_all_remote_branches('origin')

        assert sorted(branches) == ['develop', 'feature/test', 'main']

    def test_missing_remote_raises_git_error(self, tmp_git_repo):
        repo_path, _ = tmp_git_repo

        with pytest.raises(GitError):
            GitRepository(str(repo_path)).get_all_remote_branches('origin')

    def test_base_branch_detected_from_real_repository(self, git_repo_with_origin, logger, translator):
        repo_path, _ = git_repo_with_origin
        validator = ConfigValidator(logger, translator, GitRepository(str(repo_path)))

        assert validator.auto_detect_key('baseBranch') == 'develop'

    def test_base_branch_not_detected_without_remote(self, tmp_git_repo, logger, translator):
        repo_path, _ = tmp_git_repo
        validator = ConfigValidator(logger, translator, GitRepository(str(repo_path)))

        assert validator.auto_detect_key('baseBranch') is None


class TestDiscover:
    """Tests for locating the working copy."""

    def test_outside_repository_returns_none(self, tmp_path):
        plain_dir = tmp_path / "plain"
        plain_dir.mkdir()

        assert GitRepository.discover(str(plain_dir)) is None

    def test_constructor_outside_repository_raises(self, tmp_path):
        with pytest.raises(GitError):
            GitRepository(str(tmp_path / "missing"))

    def test_subdirectory_finds_enclosing_repository(self, tmp_git_repo):
        repo_path, _ = tmp_git_repo
        sub = repo_path / "src" / "pkg"
        sub.mkdir(parents=True)

        repo = GitRepository.discover(str(sub))

        assert repo is not None
        assert repo.get_project_config_path().resolve() == (repo_path / ".git" / PROJECT_CONFIG_FILE_NAME).resolve()


class TestProjectConfig:
    """Tests for the per-project config file."""

    def test_read_without_file_is_empty(self, tmp_git_repo):
        repo_path, _ = tmp_git_repo

        assert GitRepository(str(repo_path)).read_project_config() == {}

    def test_write_then_read(self, tmp_git_repo):
        repo_path, _ = tmp_git_repo
        repo = GitRepository(str(repo_path))

        repo.write_project_config({'projectKey': 'PROJ', 'baseBranch': 'develop', 'transitionId': 31})

        assert repo.read_project_config() == {'projectKey': 'PROJ', 'baseBranch': 'develop', 'transitionId': 31}
        assert (repo_path / ".git" / PROJECT_CONFIG_FILE_NAME).exists()
