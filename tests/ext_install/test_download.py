"""
Tests for artifact download and extraction.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from unittest.mock import patch

import pytest

from pgext_install.core.config.loader import InstallerSettings
from pgext_install.core.errors import DownloadFailedError, ExtractionFailedError
from pgext_install.core.models.release import ArtifactDescriptor
from pgext_install.core.services.ext_install.execution import download
from pgext_install.core.services.ext_install.execution.download import (
    download_artifact,
    extract_artifact,
)
from pgext_install.core.services.ext_install.execution.subprocess_runner import (
    CommandResult,
)
from tests.ext_install.fakes import make_artifact

_URL = "https://github.com/o/p/releases/download/v1/ext-1-pg17-linux-x86_64.tar.gz"

needs_tar = pytest.mark.skipif(shutil.which("tar") is None, reason="tar not installed")


@pytest.fixture
def artifact() -> ArtifactDescriptor:
    return ArtifactDescriptor(file_name="ext-1-pg17-linux-x86_64.tar.gz", download_url=_URL)


def _curl_writing(content: bytes):
    """run_command stand-in that writes ``content`` to curl's -o target."""
    def run(cmd, **kwargs):
        out = Path(cmd[cmd.index("-o") + 1])
        out.write_bytes(content)
        return CommandResult(ok=True, returncode=0)
    return run


class TestDownloadArtifact:
    def test_success(self, tmp_path: Path, artifact: ArtifactDescriptor):
        with patch.object(download, "run_command", side_effect=_curl_writing(b"tarball")) as run:
            path = download_artifact(artifact, tmp_path, InstallerSettings(download_timeout=42))
        assert path == tmp_path / artifact.file_name
        assert path.read_bytes() == b"tarball"
        cmd = run.call_args.args[0]
        assert cmd[0] == "curl"
        assert "-fsSL" in cmd
        assert cmd[-1] == _URL
        assert cmd[cmd.index("--max-time") + 1] == "42"

    def test_http_failure_names_url(self, tmp_path: Path, artifact: ArtifactDescriptor):
        failed = CommandResult(
            ok=False, returncode=22,
            error="curl: (22) The requested URL returned error: 404",
        )
        with patch.object(download, "run_command", return_value=failed):
            with pytest.raises(DownloadFailedError) as exc:
                download_artifact(artifact, tmp_path, InstallerSettings())
        assert exc.value.url == _URL
        assert _URL in str(exc.value)
        assert "404" in str(exc.value)

    def test_zero_byte_result(self, tmp_path: Path, artifact: ArtifactDescriptor):
        with patch.object(download, "run_command", side_effect=_curl_writing(b"")):
            with pytest.raises(DownloadFailedError, match="empty"):
                download_artifact(artifact, tmp_path, InstallerSettings())

    def test_no_file_written(self, tmp_path: Path, artifact: ArtifactDescriptor):
        with patch.object(download, "run_command", return_value=CommandResult(ok=True, returncode=0)):
            with pytest.raises(DownloadFailedError):
                download_artifact(artifact, tmp_path, InstallerSettings())


@needs_tar
class TestExtractArtifact:
    def test_extracts_into_dest(self, tmp_path: Path):
        archive = make_artifact(tmp_path / "a.tar.gz")
        extract_artifact(archive, tmp_path)
        assert (tmp_path / "lib" / "pg_ecdsa_verify.so").is_file()
        assert (tmp_path / "extension" / "pg_ecdsa_verify.control").is_file()

    def test_corrupt_archive(self, tmp_path: Path):
        archive = tmp_path / "bad.tar.gz"
        archive.write_bytes(b"<html>Not Found</html>")
        with pytest.raises(ExtractionFailedError, match="bad.tar.gz"):
            extract_artifact(archive, tmp_path)
