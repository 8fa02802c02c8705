"""
L5 Orchestration — the install pipeline.

    probe environment → (confirm) → resolve directories
        → resolve release → name artifact → download → extract
        → plan → place files

Strictly sequential. The first failure ends the run; nothing is
retried and nothing already copied is rolled back. The work directory
is removed on every exit path.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pgext_install.core.config.loader import InstallerSettings
from pgext_install.core.context import RunContext, open_run_context
from pgext_install.core.errors import UserAbortedError
from pgext_install.core.models.environment import ConfirmationRequest
from pgext_install.core.models.plan import InstallResult
from pgext_install.core.models.request import InstallRequest
from pgext_install.core.services.ext_install.detection.directories import (
    resolve_directories,
)
from pgext_install.core.services.ext_install.detection.environment import (
    probe_environment,
)
from pgext_install.core.services.ext_install.domain.artifact_naming import (
    build_artifact_descriptor,
)
from pgext_install.core.services.ext_install.execution.download import (
    download_artifact,
    extract_artifact,
)
from pgext_install.core.services.ext_install.execution.file_placement import (
    build_installation_plan,
    place_files,
)
from pgext_install.core.services.ext_install.resolver.release_resolution import (
    resolve_release,
)

logger = logging.getLogger(__name__)

Confirm = Callable[[ConfirmationRequest], bool]
StepReporter = Callable[[str], None]


def _decline(request: ConfirmationRequest) -> bool:
    return False


def install_extension(
    request: InstallRequest,
    settings: InstallerSettings,
    *,
    confirm: Confirm = _decline,
    on_step: StepReporter | None = None,
    on_warning: StepReporter | None = None,
) -> InstallResult:
    """Run the whole install for one request.

    Args:
        request: Validated install request.
        settings: Installer settings.
        confirm: Asks the operator a ConfirmationRequest; True continues.
            Defaults to declining, so a non-interactive caller aborts
            on a version mismatch.
        on_step: Receives a one-line description as each step starts.
        on_warning: Receives each advisory as it is raised.

    Raises:
        InstallError: Any failing step (see ``pgext_install.core.errors``).
    """
    with open_run_context(on_warning=on_warning) as ctx:
        return _run_pipeline(request, settings, ctx, confirm, on_step or _quiet)


def _quiet(message: str) -> None:
    logger.debug("%s", message)


def _run_pipeline(
    request: InstallRequest,
    settings: InstallerSettings,
    ctx: RunContext,
    confirm: Confirm,
    step: StepReporter,
) -> InstallResult:
    env, confirmation = probe_environment(request, settings, ctx)
    if confirmation is not None and not confirm(confirmation):
        raise UserAbortedError("Aborted: PostgreSQL version mismatch not confirmed")

    targets = resolve_directories(request, env, ctx)
    step(f"PostgreSQL version: {request.target_major_version}")
    step(f"Library directory: {targets.library_dir}")
    step(f"Extension directory: {targets.extension_dir}")

    if request.wants_latest:
        step("Fetching latest release...")
    release = resolve_release(request, settings)
    step(f"Installing version: {release.tag}")

    artifact = build_artifact_descriptor(
        release, request.target_major_version, env.architecture, settings,
    )

    step(f"Downloading {artifact.file_name}...")
    archive = download_artifact(artifact, ctx.work_dir, settings)

    step("Extracting...")
    extract_artifact(archive, ctx.work_dir)

    step("Installing extension files...")
    plan = build_installation_plan(ctx.work_dir, targets)
    if plan.requires_privilege_escalation:
        ctx.warn("Root privileges required for installation")
    installed = place_files(plan, targets)

    logger.info("Installed %d files for %s %s", len(installed), settings.extension_name, release.tag)
    return InstallResult(
        request=request,
        environment=env,
        targets=targets,
        release=release,
        artifact=artifact,
        plan=plan,
        installed=tuple(installed),
        warnings=tuple(ctx.warnings),
    )
