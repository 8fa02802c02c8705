"""
Tests for target directory resolution — overrides, pg_config defaults,
and missing-directory advisories.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from pgext_install.core.context import RunContext
from pgext_install.core.errors import ConfigToolError
from pgext_install.core.models.environment import ResolvedEnvironment
from pgext_install.core.models.request import InstallRequest
from pgext_install.core.services.ext_install.detection.directories import (
    resolve_directories,
)


def _env(tool: Path | str) -> ResolvedEnvironment:
    return ResolvedEnvironment(
        architecture="x86_64", config_tool_path=str(tool), reported_version=17,
    )


class TestResolveDirectories:
    def test_defaults_from_pg_config(self, tmp_path: Path, pg_config: Path, run_ctx: RunContext):
        targets = resolve_directories(
            InstallRequest(target_major_version=17), _env(pg_config), run_ctx,
        )
        assert targets.library_dir == tmp_path / "pgsql" / "lib"
        assert targets.extension_dir == tmp_path / "pgsql" / "share" / "extension"

    def test_missing_dirs_warn_but_are_not_created(
        self, tmp_path: Path, pg_config: Path, run_ctx: RunContext,
    ):
        targets = resolve_directories(
            InstallRequest(target_major_version=17), _env(pg_config), run_ctx,
        )
        assert len(run_ctx.warnings) == 2
        assert all("will create it" in w for w in run_ctx.warnings)
        assert not targets.library_dir.exists()
        assert not targets.extension_dir.exists()

    def test_overrides_skip_pg_config(self, tmp_path: Path, run_ctx: RunContext):
        lib = tmp_path / "lib"
        ext = tmp_path / "ext"
        lib.mkdir()
        ext.mkdir()
        req = InstallRequest(
            target_major_version=18, pkglibdir_override=lib, sharedir_override=ext,
        )
        # A tool path that would fail if it were ever run
        targets = resolve_directories(req, _env(tmp_path / "no-such-pg_config"), run_ctx)
        assert targets.library_dir == lib
        assert targets.extension_dir == ext
        assert run_ctx.warnings == []

    def test_sharedir_override_used_verbatim(
        self, tmp_path: Path, pg_config: Path, run_ctx: RunContext,
    ):
        ext = tmp_path / "custom"
        req = InstallRequest(target_major_version=17, sharedir_override=ext)
        targets = resolve_directories(req, _env(pg_config), run_ctx)
        assert targets.extension_dir == ext
        assert targets.library_dir == tmp_path / "pgsql" / "lib"

    def test_pg_config_without_output(self, tmp_path: Path, run_ctx: RunContext):
        silent = tmp_path / "pg_config"
        silent.write_text("#!/bin/sh\nexit 0\n")
        silent.chmod(0o755)
        with pytest.raises(ConfigToolError, match="no output"):
            resolve_directories(InstallRequest(target_major_version=17), _env(silent), run_ctx)
