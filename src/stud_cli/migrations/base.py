# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

"""Building blocks for configuration migrations."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional

from ..logger import Logger
from ..translation import TranslationService


class MigrationScope(str, Enum):
    """Which configuration document a migration applies to."""
    GLOBAL = "global"
    PROJECT = "project"


class MigrationContext:
    """Collaborators handed to every migration."""

    def __init__(self, logger: Optional[Logger] = None, translator: Optional[TranslationService] = None):
        self.logger = logger or Logger()
        self.translator = translator or TranslationService()


class Migration(ABC):
    """
    A single, versioned change to a configuration document.

    Subclasses set the class attributes and implement up() and down().
    ``id`` is a zero-padded timestamp (YYYYMMDDHHMMSS + 3-digit sequence),
    so plain string comparison orders migrations chronologically.
    """

    id: str = ""
    description: str = ""
    scope: MigrationScope = MigrationScope.GLOBAL
    is_prerequisite: bool = False

    def __init__(self, context: Optional[MigrationContext] = None):
        self.context = context or MigrationContext()

    @abstractmethod
    def up(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Transform the config from the old format to the new one."""

    @abstractmethod
    def down(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Transform the config back to the old format."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id} ({self.scope.value})>"
