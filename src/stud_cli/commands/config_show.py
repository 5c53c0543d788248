# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

import sys
import click

from ..config import load_global_config
from ..git_ops import GitRepository
from ..logger import Logger
from ..redaction import redact


def _rows(config):
    return [(key, value) for key, value in sorted(redact(config).items())]


@click.command('config-show', context_settings={'help_option_names': ['-h', '--help']})
@click.pass_context
def config_show(ctx):
    """Show the global and project configuration with secrets redacted."""
    logger: Logger = ctx.obj['logger']
    translator = ctx.obj['translator']
    store = ctx.obj['store']
    config_path = ctx.obj['config_path']

    try:
        global_config = load_global_config(config_path, store)
    except FileNotFoundError:
        logger.error(Logger.VERBOSITY_NORMAL, translator.trans('config.not_found', {'path': str(config_path)}))
        sys.exit(1)
    except ValueError as e:
        logger.error(Logger.VERBOSITY_NORMAL, str(e))
        sys.exit(1)

    logger.table(
        Logger.VERBOSITY_NORMAL,
        ["Key", "Value"],
        _rows(global_config),
        title=translator.trans('config.show.global_title', {'path': str(config_path)})
    )

    repo = GitRepository.discover('.', store=store)
    project_config = {}
    if repo is not None:
        try:
            project_config = repo.read_project_config()
        except ValueError as e:
            logger.warning(Logger.VERBOSITY_NORMAL, str(e))

    if not project_config:
        logger.text(Logger.VERBOSITY_NORMAL, translator.trans('config.show.no_project_config'))
        return

    logger.table(
        Logger.VERBOSITY_NORMAL,
        ["Key", "Value"],
        _rows(project_config),
        title=translator.trans('config.show.project_title', {'path': str(repo.get_project_config_path())})
    )
