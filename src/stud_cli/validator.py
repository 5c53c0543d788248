# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

"""Checks that a command has the configuration it needs."""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from .git_ops import GitRepository
from .logger import Logger
from .models import ValidationResult
from .translation import TranslationService

logger = logging.getLogger(__name__)

# Global and project keys each command needs before it can run
COMMAND_REQUIREMENTS: Dict[str, Dict[str, Sequence[str]]] = {
    'items:list': {
        'required_global': ('JIRA_URL', 'JIRA_EMAIL', 'JIRA_API_TOKEN'),
        'required_project': (),
    },
    'items:start': {
        'required_global': ('JIRA_URL', 'JIRA_EMAIL', 'JIRA_API_TOKEN'),
        'required_project': ('baseBranch',),
    },
    'submit': {
        'required_global': ('GITHUB_TOKEN',),
        'required_project': ('baseBranch',),
    },
}

# Checked in this order against the branches of origin
BASE_BRANCH_CANDIDATES = ('develop', 'main', 'master')


def find_missing_keys(required_keys: Iterable[str], config: Optional[Mapping[str, Any]]) -> List[str]:
    """
    Return the required keys that are absent, None or blank in config.

    Order follows required_keys; duplicates are reported once.
    """
    config = config or {}
    missing = []
    for key in required_keys:
        value = config.get(key)
        if (value is None or str(value).strip() == '') and key not in missing:
            missing.append(key)
    return missing


class ConfigValidator:
    """Validates command requirements and fills gaps by detection or prompting."""

    def __init__(
        self,
        logger: Logger,
        translator: TranslationService,
        git_repository: Optional[GitRepository] = None
    ):
        self.logger = logger
        self.translator = translator
        self.git_repository = git_repository

    def validate_command_requirements(
        self,
        command: str,
        global_config: Mapping[str, Any],
        project_config: Optional[Mapping[str, Any]]
    ) -> ValidationResult:
        """
        Find the keys command needs that are missing from either config.

        Unknown commands have no requirements. A None project_config (outside
        a git repository) is treated as empty.
        """
        requirements = COMMAND_REQUIREMENTS.get(command, {})

        return ValidationResult(
            missing_global_keys=find_missing_keys(requirements.get('required_global', ()), global_config),
            missing_project_keys=find_missing_keys(requirements.get('required_project', ()), project_config),
        )

    def prompt_for_missing_keys(self, missing_keys: Iterable[str], scope: str) -> Dict[str, str]:
        """
        Obtain values for missing keys, auto-detecting where possible.

        Keys left unanswered (or answered with whitespace) are not included in
        the result, so callers must validate again afterwards.

        Args:
            missing_keys: Keys to obtain values for
            scope: 'global' or 'project', selects the prompt wording

        Returns:
            Mapping of key to the detected or entered value
        """
        values: Dict[str, str] = {}

        for key in missing_keys:
            detected = self.auto_detect_key(key)
            if detected is not None:
                self.logger.note(
                    Logger.VERBOSITY_NORMAL,
                    self.translator.trans('config.auto_detected', {'key': key, 'value': detected})
                )
                values[key] = detected
                continue

            prompt_key = 'config.missing_global_key' if scope == 'global' else 'config.missing_project_key'
            answer = self.logger.ask(self.translator.trans(prompt_key, {'key': key}))
            if answer is not None and answer.strip() != '':
                values[key] = answer.strip()

        return values

    def auto_detect_key(self, key: str) -> Optional[str]:
        """Infer a value for key from repository state, or None."""
        if key == 'baseBranch':
            return self._auto_detect_base_branch()
        return None

    def _auto_detect_base_branch(self) -> Optional[str]:
        if self.git_repository is None:
            return None

        try:
            remote_branches = self.git_repository.get_all_remote_branches('origin')
        except Exception as e:
            logger.debug("Base branch detection failed: %s", e)
            return None

        for candidate in BASE_BRANCH_CANDIDATES:
            if candidate in remote_branches:
                return candidate
        return None
