"""
L2 Resolver — command line → InstallRequest.

Pure validation. Nothing here touches the network or the filesystem,
so a bad command line fails before any side effect.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from pgext_install.core.errors import UsageError
from pgext_install.core.models.request import LATEST, InstallRequest


def resolve_request(
    *,
    pg17: bool = False,
    pg18: bool = False,
    version: str | None = LATEST,
    pkglibdir: str | None = None,
    sharedir: str | None = None,
) -> InstallRequest:
    """Build the canonical install request.

    Exactly one of ``pg17`` / ``pg18`` must be set.

    Raises:
        UsageError: No selector, both selectors, or a malformed value.
    """
    if pg17 and pg18:
        raise UsageError("--pg17 and --pg18 are mutually exclusive")
    if not (pg17 or pg18):
        raise UsageError("PostgreSQL version required. Use --pg17 or --pg18")

    try:
        return InstallRequest(
            target_major_version=17 if pg17 else 18,
            release_spec=LATEST if version is None else version,
            pkglibdir_override=_as_path(pkglibdir, "--pkglibdir"),
            sharedir_override=_as_path(sharedir, "--sharedir"),
        )
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(p) for p in first["loc"]) or "request"
        raise UsageError(f"Invalid value for {field}: {first['msg']}") from e


def _as_path(value: str | None, flag: str) -> Path | None:
    if value is None:
        return None
    if not value.strip():
        raise UsageError(f"{flag} requires a directory")
    return Path(value).expanduser()
