# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

"""Applies configuration migrations and persists the result."""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Sequence, Union

from ..logger import Logger
from ..store import ConfigStore, normalize_document
from ..translation import TranslationService
from .base import Migration

logger = logging.getLogger(__name__)

MIGRATION_VERSION_KEY = "migration_version"


class MigrationError(Exception):
    """Raised when a migration fails."""
    pass


class PrerequisiteMigrationError(MigrationError):
    """Raised when a migration marked as prerequisite fails; the batch is aborted."""

    def __init__(self, migration: Migration, cause: BaseException):
        self.migration_id = migration.id
        self.description = migration.description
        super().__init__(f"Prerequisite migration {migration.id} failed: {cause}")


class MigrationExecutor:
    """Runs an ordered list of migrations against one configuration document."""

    def __init__(self, logger: Logger, store: ConfigStore, translator: TranslationService):
        self.logger = logger
        self.store = store
        self.translator = translator

    def _error_message(self, migration_id: str, error: str) -> str:
        fallback = f"Migration {migration_id} failed: {error}"
        try:
            translated = self.translator.trans('migration.error', {'id': migration_id, 'error': error})
        except Exception:
            return fallback
        if translated == 'migration.error':
            return fallback
        return translated

    def execute_migrations(
        self,
        migrations: Sequence[Migration],
        config: Dict[str, Any],
        target_path: Union[str, Path]
    ) -> Dict[str, Any]:
        """
        Apply migrations in the given order and write the result to target_path.

        Each migration works on its own copy of the document, so a failing
        migration leaves no trace. A failing prerequisite migration aborts
        the run before anything is written; any other failure is reported
        and skipped.

        Args:
            migrations: Migrations to apply, already sorted by id
            config: Current configuration document
            target_path: File the migrated document is written to

        Returns:
            The migrated configuration (``config`` itself when there is
            nothing to apply)

        Raises:
            PrerequisiteMigrationError: If a prerequisite migration fails
            OSError: If the document cannot be written
        """
        migrations = list(migrations)
        if not migrations:
            return config

        migrated = config
        for migration in migrations:
            self.logger.text(
                Logger.VERBOSITY_NORMAL,
                self.translator.trans('migration.running', {
                    'id': migration.id,
                    'description': migration.description,
                })
            )

            try:
                result = migration.up(copy.deepcopy(migrated))
                if not isinstance(result, dict):
                    raise MigrationError(f"up() returned {type(result).__name__}, expected a mapping")
            except Exception as e:
                message = self._error_message(migration.id, str(e))
                logger.debug("Migration %s raised", migration.id, exc_info=True)

                if migration.is_prerequisite:
                    self.logger.error(Logger.VERBOSITY_NORMAL, message)
                    raise PrerequisiteMigrationError(migration, e) from e

                self.logger.warning(Logger.VERBOSITY_NORMAL, message)
                continue

            migrated = result
            migrated[MIGRATION_VERSION_KEY] = migration.id
            self.logger.text(
                Logger.VERBOSITY_VERBOSE,
                self.translator.trans('migration.version_updated', {'version': migration.id})
            )

        # Returned document must match what ends up on disk
        migrated = normalize_document(migrated)
        self.store.write(target_path, migrated)
        return migrated
