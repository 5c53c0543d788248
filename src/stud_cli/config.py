"""Configuration file locations and loading for stud."""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .store import ConfigStore

CONFIG_DIR_NAME = ".config/stud"
CONFIG_FILE_NAME = "config.toml"
CONFIG_ENV_VAR = "STUD_CONFIG"

# Keys asked for by init-config, in prompt order
INIT_KEYS = ('LANGUAGE', 'JIRA_URL', 'JIRA_EMAIL', 'JIRA_API_TOKEN', 'GITHUB_TOKEN')


def get_global_config_path(config_path: Optional[Union[str, Path]] = None) -> Path:
    """
    Resolve the global config file path.

    Precedence: explicit path, then the STUD_CONFIG environment variable,
    then ~/.config/stud/config.toml.
    """
    if config_path:
        return Path(config_path).expanduser()

    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_global_config(config_path: Union[str, Path], store: Optional[ConfigStore] = None) -> Dict[str, Any]:
    """Load the global configuration.

    Raises:
        FileNotFoundError: If no configuration file exists at config_path
    """
    store = store or ConfigStore()
    path = Path(config_path)
    if not store.exists(path):
        raise FileNotFoundError(
            f"No configuration file found at {path}. Create one using: stud init-config"
        )
    return store.read(path)


def get_migration_version(config: Dict[str, Any]) -> str:
    """Id of the last migration applied to config, "0" when none has run."""
    version = config.get('migration_version')
    if version is None or str(version).strip() == '':
        return '0'
    return str(version)
