# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

"""Redaction of secret configuration values for display."""

from typing import Any, Dict, Mapping

REDACTED_PLACEHOLDER = '*** REDACTED ***'

KNOWN_SECRET_KEYS = ('JIRA_API_TOKEN', 'GITHUB_TOKEN', 'GITLAB_TOKEN')

# Case-insensitive substrings that mark unknown keys as secret
SECRET_KEY_PATTERNS = ('TOKEN', 'PASSWORD', 'SECRET')


def is_secret_key(key: str) -> bool:
    if key in KNOWN_SECRET_KEYS:
        return True
    key_upper = key.upper()
    return any(pattern in key_upper for pattern in SECRET_KEY_PATTERNS)


def _should_redact_value(key: str, value: str) -> bool:
    # URLs carrying a query string may embed credentials
    return 'URL' in key.upper() and '?' in value


def redact(config: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of config with secret values replaced.

    Only top-level keys are inspected; nested tables are passed through.
    """
    result = {}
    for key, value in config.items():
        if is_secret_key(key) or (isinstance(value, str) and _should_redact_value(key, value)):
            result[key] = REDACTED_PLACEHOLDER
        else:
            result[key] = value
    return result
