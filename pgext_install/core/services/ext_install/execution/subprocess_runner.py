"""
L4 Execution — Core subprocess runner.

The single place where ``subprocess.run`` is called by the installer.
Probes, downloads, extraction and file placement all go through here,
so sudo handling and logging live in one spot.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command."""

    ok: bool
    returncode: int | None = None
    stdout: str = ""
    stderr: str = ""
    error: str = ""
    elapsed_ms: int = 0


def sudo_prefix(needs_sudo: bool) -> list[str]:
    """Command prefix for an escalated call, empty when already root."""
    if needs_sudo and os.geteuid() != 0:
        return ["sudo"]
    return []


def run_command(
    cmd: list[str],
    *,
    needs_sudo: bool = False,
    timeout: float | None = 120,
) -> CommandResult:
    """Run a command and capture its output.

    Sudo is invoked without ``-S``: when a password is needed, sudo
    prompts on the controlling terminal, not on the captured streams.

    Args:
        cmd: Command list for ``subprocess.run()``.
        needs_sudo: Whether the command requires root.
        timeout: Seconds before the command is killed.

    Returns:
        A CommandResult. Never raises for a failing or missing command.
    """
    full_cmd = sudo_prefix(needs_sudo) + cmd
    logger.debug("Running: %s", " ".join(full_cmd))

    start = time.monotonic()
    try:
        result = subprocess.run(
            full_cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        return CommandResult(ok=False, error=f"Command timed out ({timeout}s)")
    except OSError as e:
        return CommandResult(ok=False, error=str(e))

    elapsed_ms = int((time.monotonic() - start) * 1000)
    stdout = result.stdout or ""
    stderr = (result.stderr or "").strip()

    if result.returncode == 0:
        return CommandResult(
            ok=True, returncode=0, stdout=stdout, stderr=stderr, elapsed_ms=elapsed_ms,
        )

    logger.debug("Command exited %d: %s", result.returncode, stderr[-500:])
    return CommandResult(
        ok=False,
        returncode=result.returncode,
        stdout=stdout,
        stderr=stderr[-2000:],
        error=stderr.splitlines()[-1] if stderr else f"Command failed (exit {result.returncode})",
        elapsed_ms=elapsed_ms,
    )
