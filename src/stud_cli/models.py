"""Data models for stud."""

from typing import Tuple
from pydantic import BaseModel, ConfigDict


class ValidationResult(BaseModel):
    """Outcome of checking a command's required configuration keys."""
    model_config = ConfigDict(frozen=True)

    missing_global_keys: Tuple[str, ...] = ()
    missing_project_keys: Tuple[str, ...] = ()

    @property
    def can_proceed(self) -> bool:
        """True when no required key is missing in either scope."""
        return not self.missing_global_keys and not self.missing_project_keys

    def has_missing_keys(self) -> bool:
        return not self.can_proceed
