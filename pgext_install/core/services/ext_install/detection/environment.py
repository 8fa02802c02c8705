"""
L3 Detection — host prerequisites, architecture and pg_config.

Read-only probes: PATH lookups, ``platform.machine()`` and
``pg_config --version``. The probe never prompts; a version mismatch
comes back as a ConfirmationRequest for the caller to put to the
operator.
"""

from __future__ import annotations

import logging
import os
import platform
import re
import shutil
from collections.abc import Iterable
from pathlib import Path

from pgext_install.core.config.loader import InstallerSettings
from pgext_install.core.context import RunContext
from pgext_install.core.errors import (
    ConfigToolError,
    ConfigToolNotFoundError,
    MissingDependencyError,
    UnsupportedArchitectureError,
)
from pgext_install.core.models.environment import (
    ConfirmationRequest,
    ResolvedEnvironment,
)
from pgext_install.core.models.request import InstallRequest
from pgext_install.core.services.ext_install.data.constants import (
    ARCH_MAP,
    CONFIG_TOOL_FALLBACKS,
)
from pgext_install.core.services.ext_install.execution.subprocess_runner import (
    run_command,
)

logger = logging.getLogger(__name__)

_FIRST_INT = re.compile(r"\d+")


def check_prerequisites(commands: Iterable[str]) -> None:
    """Fail on the first command that is not on PATH."""
    for cmd in commands:
        if shutil.which(cmd) is None:
            raise MissingDependencyError(cmd)
        logger.debug("Found prerequisite: %s", cmd)


def detect_architecture(machine: str | None = None) -> str:
    """Map the host CPU architecture onto an artifact architecture.

    Args:
        machine: Raw machine string (default: ``platform.machine()``).

    Raises:
        UnsupportedArchitectureError: No artifact exists for this CPU.
    """
    raw = platform.machine() if machine is None else machine
    arch = ARCH_MAP.get(raw)
    if arch is None:
        raise UnsupportedArchitectureError(raw)
    return arch


def locate_config_tool(major: int, tool: str = "pg_config") -> str:
    """Find pg_config for the requested major version.

    Search order: ``tool`` on PATH, then the Debian and RHEL per-version
    locations.

    Raises:
        ConfigToolNotFoundError: None of the candidates is executable.
    """
    if shutil.which(tool):
        return tool

    for template in CONFIG_TOOL_FALLBACKS:
        candidate = Path(template.format(major=major))
        if candidate.is_file() and os.access(candidate, os.X_OK):
            return str(candidate)

    raise ConfigToolNotFoundError(
        f"{tool} not found. Is PostgreSQL {major} installed?"
    )


def query_config_tool(tool: str, flag: str) -> str:
    """Run ``tool flag`` and return its trimmed stdout.

    Raises:
        ConfigToolError: The command failed or printed nothing.
    """
    result = run_command([tool, flag], timeout=30)
    if not result.ok:
        raise ConfigToolError(f"{tool} {flag} failed: {result.error}")
    output = result.stdout.strip()
    if not output:
        raise ConfigToolError(f"{tool} {flag} returned no output")
    return output


def parse_major_version(output: str) -> int:
    """First integer in ``pg_config --version`` output.

    ``PostgreSQL 17.2 (Debian 17.2-1.pgdg120+1)`` → 17
    """
    m = _FIRST_INT.search(output)
    if m is None:
        raise ConfigToolError(f"Cannot parse PostgreSQL version from: {output!r}")
    return int(m.group(0))


def query_reported_version(tool: str) -> int:
    """Major version pg_config reports for its installation."""
    return parse_major_version(query_config_tool(tool, "--version"))


def probe_environment(
    request: InstallRequest,
    settings: InstallerSettings,
    ctx: RunContext,
) -> tuple[ResolvedEnvironment, ConfirmationRequest | None]:
    """Gather host facts for the install.

    Returns:
        The resolved environment, plus a ConfirmationRequest when
        pg_config reports a different major version than requested.
    """
    check_prerequisites(settings.required_commands)

    arch = detect_architecture()
    tool = locate_config_tool(request.target_major_version, settings.config_tool)
    reported = query_reported_version(tool)
    logger.info("Using %s (PostgreSQL %d) on %s", tool, reported, arch)

    env = ResolvedEnvironment(
        architecture=arch,
        config_tool_path=tool,
        reported_version=reported,
    )

    confirmation = None
    if reported != request.target_major_version:
        message = (
            f"{settings.config_tool} reports PostgreSQL {reported} "
            f"but you requested {request.target_major_version}"
        )
        ctx.warn(message)
        confirmation = ConfirmationRequest(message=message)

    return env, confirmation
