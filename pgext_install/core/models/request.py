"""
Install request — the validated, canonical form of the command line.

Built once by the request resolver and never mutated afterwards.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LATEST = "latest"


class InstallRequest(BaseModel):
    """What the operator asked for."""

    model_config = ConfigDict(frozen=True)

    target_major_version: Literal[17, 18]
    release_spec: str = Field(default=LATEST, min_length=1)
    pkglibdir_override: Path | None = None
    sharedir_override: Path | None = None

    @field_validator("release_spec")
    @classmethod
    def _strip_release_spec(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("release version must not be empty")
        return value

    @field_validator("pkglibdir_override", "sharedir_override", mode="before")
    @classmethod
    def _reject_empty_path(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            raise ValueError("directory override must not be empty")
        return value

    @property
    def wants_latest(self) -> bool:
        """Whether the release must be looked up remotely."""
        return self.release_spec == LATEST
