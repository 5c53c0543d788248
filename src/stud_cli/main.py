# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

"""Main CLI for stud."""

import logging
from typing import Optional
import click
from rich.console import Console

from .config import get_global_config_path
from .logger import Logger
from .store import ConfigStore
from .translation import TranslationService, DEFAULT_LOCALE
from .commands.init_config import init_config
from .commands.update_config import update_config
from .commands.config_validate import config_validate
from .commands.config_show import config_show

console = Console()


def _detect_locale(store: ConfigStore, config_path) -> str:
    """Use LANGUAGE from the global config when it can be read."""
    try:
        if store.exists(config_path):
            language = store.read(config_path).get('LANGUAGE')
            if isinstance(language, str) and language.strip():
                return language.strip()
    except (OSError, ValueError):
        pass
    return DEFAULT_LOCALE


@click.group(context_settings={'help_option_names': ['-h', '--help']})
@click.option(
    '--config',
    '-c',
    type=click.Path(dir_okay=False),
    help='Path to the global configuration file'
)
@click.option(
    '--auto',
    is_flag=True,
    help='Run in non-interactive mode (skip prompts)'
)
@click.option(
    '-y', '--assume-yes',
    is_flag=True,
    help='Assume "yes" for all confirmation prompts'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase output verbosity (repeatable)'
)
@click.option(
    '--lang',
    help='Language for messages (default: LANGUAGE from config, else en)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Show detailed debug output'
)
@click.pass_context
def cli(ctx, config: Optional[str], auto: bool, assume_yes: bool, verbose: int, lang: Optional[str], debug: bool):
    """Jira and git workflow helper."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')
        verbose = Logger.VERBOSITY_DEBUG

    store = ConfigStore()
    config_path = get_global_config_path(config)

    ctx.ensure_object(dict)
    ctx.obj['auto'] = auto
    ctx.obj['assume_yes'] = assume_yes
    ctx.obj['debug'] = debug
    ctx.obj['store'] = store
    ctx.obj['config_path'] = config_path
    ctx.obj['logger'] = Logger(console, verbosity=min(verbose, Logger.VERBOSITY_DEBUG))
    ctx.obj['translator'] = TranslationService(lang or _detect_locale(store, config_path))


# Register commands
cli.add_command(init_config)
cli.add_command(update_config)
cli.add_command(config_validate)
cli.add_command(config_show)


def main():
    # GitPython logs every failed git call; keep that out of normal output
    logging.getLogger('git').setLevel(logging.WARNING)

    cli(obj={})


if __name__ == "__main__":
    main()
