"""
L4 Execution — plan and perform the copy into the target directories.

Escalation is decided once for the whole copy: if either target is not
writable (or does not exist yet) every mkdir and cp runs under sudo.
A failure stops the copy. Files already copied stay in place.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pgext_install.core.errors import ExtractionFailedError, InstallationFailedError
from pgext_install.core.models.environment import InstallationTargets
from pgext_install.core.models.plan import FileCategory, InstallationPlan, PlannedFile
from pgext_install.core.services.ext_install.domain.file_search import find_files
from pgext_install.core.services.ext_install.execution.subprocess_runner import (
    run_command,
)

logger = logging.getLogger(__name__)


def is_writable_dir(path: Path) -> bool:
    """True if ``path`` is an existing directory this process can write to."""
    return path.is_dir() and os.access(path, os.W_OK)


def requires_privilege_escalation(targets: InstallationTargets) -> bool:
    """Whether placing files into ``targets`` needs sudo."""
    return not (
        is_writable_dir(targets.library_dir) and is_writable_dir(targets.extension_dir)
    )


def _destination(category: FileCategory, targets: InstallationTargets) -> Path:
    if category is FileCategory.LIBRARY:
        return targets.library_dir
    return targets.extension_dir


def build_installation_plan(root: Path, targets: InstallationTargets) -> InstallationPlan:
    """Find the extension files under ``root`` and pair them with targets.

    Plan order: library, control, sql.

    Raises:
        ExtractionFailedError: No shared library or no control file in
            the unpacked artifact.
    """
    planned: list[PlannedFile] = []
    for category in (FileCategory.LIBRARY, FileCategory.CONTROL, FileCategory.SQL):
        for source in find_files(root, category):
            planned.append(PlannedFile(
                source=source,
                destination_dir=_destination(category, targets),
                category=category,
            ))

    for required in (FileCategory.LIBRARY, FileCategory.CONTROL):
        if not any(p.category == required for p in planned):
            raise ExtractionFailedError(
                f"Artifact contains no {required.value} file (*{_suffix(required)})"
            )

    return InstallationPlan(
        requires_privilege_escalation=requires_privilege_escalation(targets),
        files_to_copy=tuple(planned),
    )


def _suffix(category: FileCategory) -> str:
    return {
        FileCategory.LIBRARY: ".so",
        FileCategory.CONTROL: ".control",
        FileCategory.SQL: ".sql",
    }[category]


def place_files(plan: InstallationPlan, targets: InstallationTargets) -> list[Path]:
    """Create both target directories and copy every planned file.

    Existing files of the same name are overwritten, so re-running an
    install reproduces the same end state.

    Returns:
        Installed destination paths, in plan order.

    Raises:
        InstallationFailedError: A mkdir or cp failed.
    """
    sudo = plan.requires_privilege_escalation
    if sudo:
        logger.info("Root privileges required for installation")

    for directory in (targets.library_dir, targets.extension_dir):
        result = run_command(["mkdir", "-p", str(directory)], needs_sudo=sudo, timeout=None)
        if not result.ok:
            raise InstallationFailedError(f"Cannot create {directory}: {result.error}")

    installed: list[Path] = []
    for item in plan.files_to_copy:
        result = run_command(
            ["cp", str(item.source), str(item.destination_dir) + "/"],
            needs_sudo=sudo,
            timeout=None,
        )
        if not result.ok:
            raise InstallationFailedError(
                f"Cannot copy {item.source.name} to {item.destination_dir}: {result.error}"
            )
        logger.info("Installed %s", item.destination)
        installed.append(item.destination)

    return installed
