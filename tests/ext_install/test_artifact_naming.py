"""
Tests for artifact naming — the marker is stripped from the file name
and never from the URL path segment.
"""

from __future__ import annotations

import pytest

from pgext_install.core.config.loader import InstallerSettings
from pgext_install.core.models.release import ResolvedRelease
from pgext_install.core.services.ext_install.domain.artifact_naming import (
    artifact_file_name,
    build_artifact_descriptor,
)

_BASE = "https://github.com/joelonsql/pg_ecdsa_verify/releases/download"


class TestArtifactDescriptor:
    @pytest.mark.parametrize("tag, major, arch, file_name", [
        ("v1.2.4", 17, "x86_64", "pg_ecdsa_verify-1.2.4-pg17-linux-x86_64.tar.gz"),
        ("v1.2.4", 18, "aarch64", "pg_ecdsa_verify-1.2.4-pg18-linux-aarch64.tar.gz"),
        ("1.3.0", 17, "aarch64", "pg_ecdsa_verify-1.3.0-pg17-linux-aarch64.tar.gz"),
        ("vv2", 18, "x86_64", "pg_ecdsa_verify-v2-pg18-linux-x86_64.tar.gz"),
    ])
    def test_template(self, tag: str, major: int, arch: str, file_name: str):
        desc = build_artifact_descriptor(ResolvedRelease(tag=tag), major, arch, InstallerSettings())
        assert desc.file_name == file_name
        assert desc.download_url == f"{_BASE}/{tag}/{file_name}"

    def test_url_keeps_marker(self):
        desc = build_artifact_descriptor(
            ResolvedRelease(tag="v1.2.4"), 17, "x86_64", InstallerSettings(),
        )
        assert "/download/v1.2.4/" in desc.download_url
        assert "-v1.2.4-" not in desc.file_name

    def test_custom_repository_and_extension(self):
        settings = InstallerSettings(
            extension_name="pg_other",
            repository="acme/pg_other",
            download_base="https://mirror.example.com/",
        )
        desc = build_artifact_descriptor(ResolvedRelease(tag="v0.1"), 18, "x86_64", settings)
        assert desc.file_name == "pg_other-0.1-pg18-linux-x86_64.tar.gz"
        assert desc.download_url == (
            "https://mirror.example.com/acme/pg_other/releases/download/v0.1/"
            "pg_other-0.1-pg18-linux-x86_64.tar.gz"
        )

    def test_file_name_helper(self):
        name = artifact_file_name("ext", ResolvedRelease(tag="v3"), 17, "aarch64")
        assert name == "ext-3-pg17-linux-aarch64.tar.gz"
