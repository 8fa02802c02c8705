"""
Installer errors — one exception per fatal pipeline outcome.

Every failure in the pipeline is terminal. Core services raise these;
the CLI catches ``InstallError``, prints the message and exits with
``exit_code``. Nothing retries.
"""

from __future__ import annotations


class InstallError(Exception):
    """Base exception for all installer failures."""

    exit_code: int = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UsageError(InstallError):
    """Raised when the command line is missing or has a malformed value."""

    exit_code = 2


class ConfigError(InstallError):
    """Raised when installer settings are invalid or unreadable."""


class MissingDependencyError(InstallError):
    """Raised when a required external command is not on PATH."""

    def __init__(self, command: str) -> None:
        super().__init__(f"{command} is required but not installed")
        self.command = command


class UnsupportedArchitectureError(InstallError):
    """Raised when the host CPU architecture has no published artifact."""

    def __init__(self, machine: str) -> None:
        super().__init__(f"Unsupported architecture: {machine}")
        self.machine = machine


class ConfigToolNotFoundError(InstallError):
    """Raised when pg_config cannot be located for the requested version."""


class ConfigToolError(InstallError):
    """Raised when pg_config runs but its output is unusable."""


class UserAbortedError(InstallError):
    """Raised when the operator declines to continue."""


class ReleaseLookupError(InstallError):
    """Raised when the latest release tag cannot be determined."""


class DownloadFailedError(InstallError):
    """Raised when the artifact download fails."""

    def __init__(self, url: str, reason: str = "") -> None:
        detail = f": {reason}" if reason else ""
        super().__init__(f"Failed to download from {url}{detail}")
        self.url = url


class ExtractionFailedError(InstallError):
    """Raised when the artifact is not a usable archive."""


class InstallationFailedError(InstallError):
    """Raised when creating a directory or copying a file fails."""
