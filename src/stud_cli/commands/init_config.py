import sys
import click

from ..config import INIT_KEYS
from ..logger import Logger
from ..migrations import MigrationContext, MigrationRegistry, MIGRATION_VERSION_KEY
from ..translation import SUPPORTED_LOCALES

PROMPT_MESSAGES = {
    'LANGUAGE': 'config.init.language',
    'JIRA_URL': 'config.init.jira_url',
    'JIRA_EMAIL': 'config.init.jira_email',
    'JIRA_API_TOKEN': 'config.init.jira_api_token',
    'GITHUB_TOKEN': 'config.init.github_token',
}


@click.command('init-config', context_settings={'help_option_names': ['-h', '--help']})
@click.option('-y', '--assume-yes', is_flag=True, help='Assume "yes" for confirmation prompts')
@click.pass_context
def init_config(ctx, assume_yes: bool):
    """Create the global configuration file."""
    logger: Logger = ctx.obj['logger']
    translator = ctx.obj['translator']
    store = ctx.obj['store']
    config_path = ctx.obj['config_path']
    auto = ctx.obj.get('auto', False)
    assume_yes_effective = assume_yes or ctx.obj.get('assume_yes', False)

    existing = {}
    if store.exists(config_path):
        if not assume_yes_effective:
            if auto or not click.confirm(translator.trans('config.init.exists', {'path': str(config_path)})):
                logger.warning(Logger.VERBOSITY_NORMAL, translator.trans('config.init.cancelled'))
                return
        try:
            existing = store.read(config_path)
        except ValueError:
            existing = {}

    # Only the keys asked for here carry over; the rest of an old file is dropped
    config = {key: existing[key] for key in INIT_KEYS if key in existing}
    if not auto:
        for key in INIT_KEYS:
            answer = logger.ask(
                translator.trans(PROMPT_MESSAGES[key], {'locales': ', '.join(SUPPORTED_LOCALES)}),
                default=str(existing[key]) if existing.get(key) is not None else None
            )
            if answer is not None:
                config[key] = answer.strip()

    # Empty answers are not written
    config = {k: v for k, v in config.items() if v not in (None, '')}

    # A fresh config already has the current format
    registry = MigrationRegistry(MigrationContext(logger, translator))
    latest_id = registry.get_latest_migration_id(registry.discover_global_migrations())
    if latest_id is not None:
        config[MIGRATION_VERSION_KEY] = latest_id

    try:
        store.write(config_path, config)
    except OSError as e:
        logger.error(Logger.VERBOSITY_NORMAL, f"Could not write {config_path}: {e}")
        sys.exit(1)

    logger.success(Logger.VERBOSITY_NORMAL, translator.trans('config.init.success', {'path': str(config_path)}))
