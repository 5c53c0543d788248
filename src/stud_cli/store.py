# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

"""Persistence of configuration documents as TOML files."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Union

import tomli
import tomlkit

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def normalize_document(value: Any) -> Any:
    """
    Remove None values recursively.

    TOML has no null, so this is the form a document takes once written.
    """
    if isinstance(value, dict):
        return {k: normalize_document(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [normalize_document(v) for v in value if v is not None]
    return value


class ConfigStore:
    """Reads and writes configuration documents."""

    def exists(self, path: PathLike) -> bool:
        return Path(path).is_file()

    def read(self, path: PathLike) -> Dict[str, Any]:
        """
        Parse a TOML document into a plain dictionary.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid TOML
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, 'rb') as f:
            try:
                return tomli.load(f)
            except tomli.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

    def write(self, path: PathLike, document: Dict[str, Any]) -> None:
        """
        Write a document to disk, replacing any existing content.

        The content is written to a temporary file next to the target and
        then moved over it, so readers never observe a partial file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        content = tomlkit.dumps(normalize_document(dict(document)))

        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(content)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

        logger.debug("Wrote %d keys to %s", len(document), path)
