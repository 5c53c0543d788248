import sys
from pathlib import Path
from typing import Any, Dict, List, NamedTuple
import click

from ..config import load_global_config, get_migration_version
from ..git_ops import GitRepository
from ..logger import Logger
from ..migrations import (
    Migration,
    MigrationContext,
    MigrationExecutor,
    MigrationRegistry,
    MigrationScope,
    PrerequisiteMigrationError,
)


class MigrationPlan(NamedTuple):
    scope: MigrationScope
    pending: List[Migration]
    config: Dict[str, Any]
    path: Path


def _build_plans(registry: MigrationRegistry, store, global_config, global_path, repo) -> List[MigrationPlan]:
    """Pending migrations for the global config and, inside a git repo, the project config."""
    plans = [MigrationPlan(
        MigrationScope.GLOBAL,
        registry.get_pending_migrations(
            registry.discover_global_migrations(), get_migration_version(global_config)
        ),
        global_config,
        Path(global_path),
    )]

    if repo is not None:
        project_path = repo.get_project_config_path()
        if store.exists(project_path):
            project_config = store.read(project_path)
            plans.append(MigrationPlan(
                MigrationScope.PROJECT,
                registry.get_pending_migrations(
                    registry.discover_project_migrations(), get_migration_version(project_config)
                ),
                project_config,
                project_path,
            ))

    return plans


@click.command('update-config', context_settings={'help_option_names': ['-h', '--help']})
@click.option(
    '--dry-run',
    is_flag=True,
    help='Show pending migrations without applying them'
)
@click.option('-y', '--assume-yes', is_flag=True, help='Assume "yes" for confirmation prompts')
@click.pass_context
def update_config(ctx, dry_run: bool, assume_yes: bool):
    """Migrate configuration files to the latest format.

    Applies pending migrations to the global configuration and, when run
    inside a git repository, to the project configuration.
    """
    logger: Logger = ctx.obj['logger']
    translator = ctx.obj['translator']
    store = ctx.obj['store']
    config_path = ctx.obj['config_path']

    try:
        global_config = load_global_config(config_path, store)
    except (FileNotFoundError, ValueError) as e:
        logger.error(Logger.VERBOSITY_NORMAL, str(e))
        sys.exit(1)

    registry = MigrationRegistry(MigrationContext(logger, translator))
    executor = MigrationExecutor(logger, store, translator)
    repo = GitRepository.discover('.', store=store)

    try:
        plans = _build_plans(registry, store, global_config, config_path, repo)
    except ValueError as e:
        logger.error(Logger.VERBOSITY_NORMAL, str(e))
        sys.exit(1)

    for plan in plans:
        if not plan.pending:
            logger.text(
                Logger.VERBOSITY_VERBOSE,
                translator.trans('migration.none_pending', {'scope': plan.scope.value})
            )
            continue
        logger.section(
            Logger.VERBOSITY_NORMAL,
            translator.trans('migration.pending', {'count': len(plan.pending), 'scope': plan.scope.value})
        )
        logger.text(
            Logger.VERBOSITY_NORMAL,
            [f"  • {m.id}: {m.description}" for m in plan.pending]
        )

    if not any(plan.pending for plan in plans):
        logger.success(Logger.VERBOSITY_NORMAL, "Configuration is already up to date!")
        return

    if dry_run:
        logger.text(Logger.VERBOSITY_NORMAL, "Dry-run mode: No changes made")
        return

    # Get flags from context (for global -y flag) and merge with local parameter
    auto = ctx.obj.get('auto', False)
    assume_yes_effective = assume_yes or ctx.obj.get('assume_yes', False)

    if not (auto or assume_yes_effective):
        if not click.confirm("Apply pending migrations?", default=True):
            logger.warning(Logger.VERBOSITY_NORMAL, "Upgrade cancelled")
            return

    for plan in plans:
        if not plan.pending:
            continue
        try:
            executor.execute_migrations(plan.pending, plan.config, plan.path)
        except PrerequisiteMigrationError as e:
            logger.error(Logger.VERBOSITY_NORMAL, [translator.trans('migration.prerequisite_failed'), str(e)])
            sys.exit(1)
        except OSError as e:
            logger.error(Logger.VERBOSITY_NORMAL, f"Could not write {plan.path}: {e}")
            sys.exit(1)

        logger.success(Logger.VERBOSITY_NORMAL, translator.trans('migration.saved', {'path': str(plan.path)}))
