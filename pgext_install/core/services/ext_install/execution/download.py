"""
L4 Execution — artifact download and extraction.

Both steps shell out (curl, tar), the same tools the environment probe
checks for, and both write only into the run's work directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pgext_install import __version__
from pgext_install.core.config.loader import InstallerSettings
from pgext_install.core.errors import DownloadFailedError, ExtractionFailedError
from pgext_install.core.models.release import ArtifactDescriptor
from pgext_install.core.services.ext_install.execution.subprocess_runner import (
    run_command,
)

logger = logging.getLogger(__name__)


def download_artifact(
    artifact: ArtifactDescriptor,
    dest_dir: Path,
    settings: InstallerSettings,
) -> Path:
    """Download the artifact into ``dest_dir``.

    Returns:
        Path to the downloaded archive.

    Raises:
        DownloadFailedError: Non-2xx status, network error, timeout,
            or an empty file.
    """
    dest = dest_dir / artifact.file_name
    cmd = [
        "curl", "-fsSL",
        "--max-time", str(int(settings.download_timeout)),
        "-A", f"pgext-install/{__version__}",
        "-o", str(dest),
        artifact.download_url,
    ]
    result = run_command(cmd, timeout=settings.download_timeout + 10)
    if not result.ok:
        raise DownloadFailedError(artifact.download_url, result.error)

    if not dest.is_file() or dest.stat().st_size == 0:
        raise DownloadFailedError(artifact.download_url, "empty response")

    logger.info("Downloaded %s (%d bytes)", dest.name, dest.stat().st_size)
    return dest


def extract_artifact(archive: Path, dest_dir: Path) -> Path:
    """Unpack a ``.tar.gz`` archive into ``dest_dir``.

    Raises:
        ExtractionFailedError: Corrupt or non-archive content.
    """
    result = run_command(["tar", "-xzf", str(archive), "-C", str(dest_dir)], timeout=120)
    if not result.ok:
        raise ExtractionFailedError(f"Failed to extract {archive.name}: {result.error}")

    logger.info("Extracted %s into %s", archive.name, dest_dir)
    return dest_dir
