# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

"""Config migration system.

This package manages configuration file migrations between releases.
Individual migrations live in global_migrations/ and project_migrations/
(e.g., m202501150000001_git_token_format.py). The MigrationExecutor is
defined in executor.py and the MigrationRegistry in registry.py.
"""

from .base import Migration, MigrationContext, MigrationScope
from .executor import (
    MIGRATION_VERSION_KEY,
    MigrationError,
    MigrationExecutor,
    PrerequisiteMigrationError,
)
from .registry import MigrationRegistry

__all__ = [
    'Migration',
    'MigrationContext',
    'MigrationScope',
    'MigrationError',
    'MigrationExecutor',
    'MigrationRegistry',
    'PrerequisiteMigrationError',
    'MIGRATION_VERSION_KEY',
]
