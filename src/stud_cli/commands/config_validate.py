# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

import sys
from typing import Dict
import click

from ..config import load_global_config
from ..git_ops import GitRepository
from ..logger import Logger
from ..migrations import MigrationContext, MigrationRegistry, MIGRATION_VERSION_KEY
from ..validator import ConfigValidator


def _detect_only(validator: ConfigValidator, keys) -> Dict[str, str]:
    """Non-interactive variant of prompt_for_missing_keys."""
    values = {}
    for key in keys:
        detected = validator.auto_detect_key(key)
        if detected is not None:
            values[key] = detected
    return values


def _stamp_latest_version(config: Dict, migrations) -> None:
    """A file created here already has the current format."""
    latest_id = MigrationRegistry.get_latest_migration_id(migrations)
    if latest_id is not None:
        config[MIGRATION_VERSION_KEY] = latest_id


@click.command('config-validate', context_settings={'help_option_names': ['-h', '--help']})
@click.argument('command_name')
@click.pass_context
def config_validate(ctx, command_name: str):
    """Check that COMMAND_NAME has the configuration it needs.

    Missing values are auto-detected where possible, otherwise asked for,
    and saved to the global or project configuration.
    """
    logger: Logger = ctx.obj['logger']
    translator = ctx.obj['translator']
    store = ctx.obj['store']
    config_path = ctx.obj['config_path']
    auto = ctx.obj.get('auto', False)

    global_exists = store.exists(config_path)
    try:
        global_config = load_global_config(config_path, store)
    except FileNotFoundError:
        global_config = {}
    except ValueError as e:
        logger.error(Logger.VERBOSITY_NORMAL, str(e))
        sys.exit(1)

    repo = GitRepository.discover('.', store=store)
    project_config = None
    project_exists = False
    if repo is not None:
        project_exists = store.exists(repo.get_project_config_path())
        try:
            project_config = repo.read_project_config()
        except ValueError as e:
            logger.error(Logger.VERBOSITY_NORMAL, str(e))
            sys.exit(1)

    validator = ConfigValidator(logger, translator, repo)
    registry = MigrationRegistry(MigrationContext(logger, translator))
    result = validator.validate_command_requirements(command_name, global_config, project_config)

    if result.can_proceed:
        logger.success(Logger.VERBOSITY_NORMAL, translator.trans('config.valid', {'command': command_name}))
        return

    logger.text(Logger.VERBOSITY_NORMAL, translator.trans('config.missing_keys', {'command': command_name}))
    logger.text(
        Logger.VERBOSITY_NORMAL,
        [f"  • {key} (global)" for key in result.missing_global_keys]
        + [f"  • {key} (project)" for key in result.missing_project_keys]
    )

    try:
        if result.missing_global_keys:
            if auto:
                values = _detect_only(validator, result.missing_global_keys)
            else:
                values = validator.prompt_for_missing_keys(result.missing_global_keys, 'global')
            if values:
                global_config.update(values)
                if not global_exists:
                    _stamp_latest_version(global_config, registry.discover_global_migrations())
                store.write(config_path, global_config)

        if result.missing_project_keys:
            if repo is None:
                logger.warning(Logger.VERBOSITY_NORMAL, translator.trans('config.no_project'))
            else:
                if auto:
                    values = _detect_only(validator, result.missing_project_keys)
                else:
                    values = validator.prompt_for_missing_keys(result.missing_project_keys, 'project')
                if values:
                    project_config.update(values)
                    if not project_exists:
                        _stamp_latest_version(project_config, registry.discover_project_migrations())
                    repo.write_project_config(project_config)
    except OSError as e:
        logger.error(Logger.VERBOSITY_NORMAL, f"Could not save configuration: {e}")
        sys.exit(1)

    result = validator.validate_command_requirements(command_name, global_config, project_config)
    if not result.can_proceed:
        missing = list(result.missing_global_keys) + list(result.missing_project_keys)
        logger.error(Logger.VERBOSITY_NORMAL, translator.trans('config.still_missing', {'keys': ', '.join(missing)}))
        sys.exit(1)

    logger.success(Logger.VERBOSITY_NORMAL, translator.trans('config.valid', {'command': command_name}))
