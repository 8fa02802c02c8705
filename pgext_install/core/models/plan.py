"""
Installation plan and result models.

The plan is computed after extraction and consumed immediately by the
file placement step. The result is what the CLI renders.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

from pgext_install.core.models.environment import (
    InstallationTargets,
    ResolvedEnvironment,
)
from pgext_install.core.models.release import ArtifactDescriptor, ResolvedRelease
from pgext_install.core.models.request import InstallRequest


class FileCategory(StrEnum):
    """What kind of extension file a path is."""

    LIBRARY = "library"
    CONTROL = "control"
    SQL = "sql"


class PlannedFile(BaseModel):
    """One copy operation."""

    model_config = ConfigDict(frozen=True)

    source: Path
    destination_dir: Path
    category: FileCategory

    @property
    def destination(self) -> Path:
        return self.destination_dir / self.source.name


class InstallationPlan(BaseModel):
    """Ordered copy operations plus whether they need sudo."""

    model_config = ConfigDict(frozen=True)

    requires_privilege_escalation: bool
    files_to_copy: tuple[PlannedFile, ...] = ()

    def files_for(self, category: FileCategory) -> list[PlannedFile]:
        """Planned files of a single category, in plan order."""
        return [f for f in self.files_to_copy if f.category == category]


class InstallResult(BaseModel):
    """Outcome of a completed install run."""

    model_config = ConfigDict(frozen=True)

    request: InstallRequest
    environment: ResolvedEnvironment
    targets: InstallationTargets
    release: ResolvedRelease
    artifact: ArtifactDescriptor
    plan: InstallationPlan
    installed: tuple[Path, ...] = ()
    warnings: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly summary."""
        return {
            "postgres_version": self.request.target_major_version,
            "version": self.release.tag,
            "architecture": self.environment.architecture,
            "pg_config": self.environment.config_tool_path,
            "library_dir": str(self.targets.library_dir),
            "extension_dir": str(self.targets.extension_dir),
            "artifact": self.artifact.file_name,
            "download_url": self.artifact.download_url,
            "sudo": self.plan.requires_privilege_escalation,
            "installed": [str(p) for p in self.installed],
            "warnings": list(self.warnings),
        }
