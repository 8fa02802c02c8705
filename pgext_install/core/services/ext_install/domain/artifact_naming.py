"""
L1 Domain — artifact file name and download URL.

Pure derivation from (release, major version, architecture). The tag
loses its leading ``v`` in the file name only; the URL path keeps the
tag exactly as published.
"""

from __future__ import annotations

from pgext_install.core.config.loader import InstallerSettings
from pgext_install.core.models.release import ArtifactDescriptor, ResolvedRelease


def artifact_file_name(
    extension_name: str,
    release: ResolvedRelease,
    major: int,
    arch: str,
) -> str:
    """``pg_ecdsa_verify-1.2.4-pg17-linux-x86_64.tar.gz``"""
    return f"{extension_name}-{release.version_number}-pg{major}-linux-{arch}.tar.gz"


def build_artifact_descriptor(
    release: ResolvedRelease,
    major: int,
    arch: str,
    settings: InstallerSettings,
) -> ArtifactDescriptor:
    """Name the artifact for this release and platform."""
    file_name = artifact_file_name(settings.extension_name, release, major, arch)
    return ArtifactDescriptor(
        file_name=file_name,
        download_url=settings.download_url(release.tag, file_name),
    )
