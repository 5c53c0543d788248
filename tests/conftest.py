# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

"""Shared pytest fixtures."""

import pytest
from unittest.mock import Mock

from stud_cli.logger import Logger
from stud_cli.store import ConfigStore
from stud_cli.translation import TranslationService
from helpers.git_helpers import init_git_repo, add_origin


@pytest.fixture
def tmp_git_repo(tmp_path):
    """
    Create a temporary git repository.

    Returns:
        Tuple of (repo_path, Repo object)
    """
    repo_path = tmp_path / "test_repo"
    repo_path.mkdir()

    repo = init_git_repo(repo_path)

    yield repo_path, repo


@pytest.fixture
def git_repo_with_origin(tmp_git_repo, tmp_path):
    """
    Temporary repository whose origin has 'main', 'develop' and a feature branch.

    Returns:
        Tuple of (repo_path, Repo object)
    """
    repo_path, repo = tmp_git_repo
    add_origin(repo, tmp_path / "origin.git", ["main", "develop", "feature/test"])
    return repo_path, repo


@pytest.fixture
def logger():
    """Logger double; assertions are made on its method calls."""
    return Mock(spec=Logger)


@pytest.fixture
def translator():
    """Translator double echoing the key and its parameters."""
    mock = Mock(spec=TranslationService)

    def trans(key, params=None):
        if not params:
            return key
        return key + " " + " ".join(f"{k}={v}" for k, v in sorted(params.items()))

    mock.trans.side_effect = trans
    return mock


@pytest.fixture
def store():
    return ConfigStore()


@pytest.fixture
def config_file(tmp_path):
    """Path for a global config file (not created)."""
    return tmp_path / "home" / ".config" / "stud" / "config.toml"
