"""
Environment models — what the host looks like and where files go.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator


class ResolvedEnvironment(BaseModel):
    """Host facts gathered by the environment probe."""

    model_config = ConfigDict(frozen=True)

    architecture: Literal["x86_64", "aarch64"]
    config_tool_path: str           # pg_config, as found (name or absolute path)
    reported_version: int           # major version pg_config reports


class ConfirmationRequest(BaseModel):
    """A question only the operator may answer.

    Returned by the probe instead of prompting, so the orchestrator
    decides how (and whether) to ask.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    prompt: str = "Continue anyway?"
    default: bool = False


class InstallationTargets(BaseModel):
    """The two directories extension files are installed into.

    Neither directory has to exist yet.
    """

    model_config = ConfigDict(frozen=True)

    library_dir: Path
    extension_dir: Path

    @field_validator("library_dir", "extension_dir", mode="before")
    @classmethod
    def _non_empty(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("installation directory must not be empty")
        return value
