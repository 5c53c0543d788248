# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

"""Migration 202501150000001: provider-specific git tokens.

Changes:
- GIT_TOKEN + GIT_PROVIDER replaced by GITHUB_TOKEN or GITLAB_TOKEN

This migration:
- Moves GIT_TOKEN to the key matching GIT_PROVIDER, unless that key
  already holds a token
- Removes GIT_TOKEN and GIT_PROVIDER
- Leaves a token without a recognised provider alone; the user has to
  run init-config to say which provider it belongs to
"""

from typing import Any, Dict

from ...logger import Logger
from ..base import Migration, MigrationScope

TOKEN_KEYS = {
    'github': 'GITHUB_TOKEN',
    'gitlab': 'GITLAB_TOKEN',
}


def _is_blank(value: Any) -> bool:
    return value is None or str(value).strip() == ''


class GitTokenFormat(Migration):
    id = '202501150000001'
    description = 'Migrate Git token configuration from GIT_TOKEN/GIT_PROVIDER to GITHUB_TOKEN/GITLAB_TOKEN format'
    scope = MigrationScope.GLOBAL
    is_prerequisite = False

    def up(self, config: Dict[str, Any]) -> Dict[str, Any]:
        old_token = config.get('GIT_TOKEN')
        if not isinstance(old_token, str) or _is_blank(old_token):
            return config

        provider = config.get('GIT_PROVIDER')
        if not isinstance(provider, str) or provider not in TOKEN_KEYS:
            self.context.logger.warning(
                Logger.VERBOSITY_VERBOSE,
                self.context.translator.trans('migration.git_token_format.skipped')
            )
            return config

        new_key = TOKEN_KEYS[provider]
        if _is_blank(config.get(new_key)):
            config[new_key] = old_token.strip()
            self.context.logger.text(
                Logger.VERBOSITY_VERBOSE,
                self.context.translator.trans('migration.git_token_format.migrated', {'key': new_key})
            )

        del config['GIT_TOKEN']
        del config['GIT_PROVIDER']
        return config

    def down(self, config: Dict[str, Any]) -> Dict[str, Any]:
        # Best effort: the original provider is inferred from which token exists
        if 'GIT_TOKEN' in config:
            return config

        for provider, key in TOKEN_KEYS.items():
            if key in config:
                config['GIT_TOKEN'] = config.pop(key)
                config['GIT_PROVIDER'] = provider
                break

        return config
