# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

"""Discovery of available migrations."""

import importlib
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .base import Migration, MigrationContext, MigrationScope

logger = logging.getLogger(__name__)


class MigrationRegistry:
    """
    Finds migration modules and works out which ones still have to run.

    Migration modules live in the ``global_migrations`` and
    ``project_migrations`` packages and are named ``m<id>_<slug>.py``.
    """

    GLOBAL_PACKAGE = f"{__package__}.global_migrations"
    PROJECT_PACKAGE = f"{__package__}.project_migrations"

    def __init__(
        self,
        context: Optional[MigrationContext] = None,
        global_package: Optional[str] = None,
        project_package: Optional[str] = None
    ):
        self.context = context or MigrationContext()
        self.global_package = global_package or self.GLOBAL_PACKAGE
        self.project_package = project_package or self.PROJECT_PACKAGE

    def discover_global_migrations(self) -> List[Migration]:
        return self._discover_migrations(self.global_package, MigrationScope.GLOBAL)

    def discover_project_migrations(self) -> List[Migration]:
        return self._discover_migrations(self.project_package, MigrationScope.PROJECT)

    def _discover_migrations(self, package_name: str, expected_scope: MigrationScope) -> List[Migration]:
        """Import every migration module in a package and instantiate its migrations."""
        try:
            package = importlib.import_module(package_name)
        except ImportError:
            return []

        migrations = []
        package_dir = Path(package.__file__).parent

        for file in sorted(package_dir.glob("m*.py")):
            module_name = f"{package_name}.{file.stem}"
            try:
                module = importlib.import_module(module_name)
            except Exception:
                logger.debug("Skipping migration module %s", module_name, exc_info=True)
                continue

            for obj in vars(module).values():
                if not (isinstance(obj, type) and issubclass(obj, Migration)):
                    continue
                # Only classes defined in this module, not imported bases
                if obj.__module__ != module.__name__ or getattr(obj, '__abstractmethods__', None):
                    continue

                try:
                    migration = obj(self.context)
                except Exception:
                    logger.debug("Skipping migration class %s.%s", module_name, obj.__name__, exc_info=True)
                    continue
                if migration.scope != expected_scope:
                    logger.debug("Skipping %r: expected %s scope", migration, expected_scope.value)
                    continue
                migrations.append(migration)

        return self.sort_migrations(migrations)

    @staticmethod
    def sort_migrations(migrations: Iterable[Migration]) -> List[Migration]:
        return sorted(migrations, key=lambda m: m.id)

    def get_pending_migrations(self, available: Iterable[Migration], current_version: Optional[str]) -> List[Migration]:
        """
        Get the migrations newer than current_version, sorted by id.

        A version of "0" (or empty) means no migration has run yet.
        """
        current = str(current_version or '0')
        if current == '0':
            return self.sort_migrations(available)

        return self.sort_migrations(m for m in available if m.id > current)

    @staticmethod
    def get_latest_migration_id(migrations: Iterable[Migration]) -> Optional[str]:
        ids = [m.id for m in migrations]
        return max(ids) if ids else None
