"""
Fixtures for the extension install pipeline: a fake pg_config and
settings that point at it.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from pgext_install.core.config.loader import InstallerSettings
from pgext_install.core.context import RunContext
from tests.ext_install.fakes import make_pg_config


@pytest.fixture
def pg_config(tmp_path: Path) -> Path:
    """pg_config reporting PostgreSQL 17 with a prefix under tmp_path."""
    bindir = tmp_path / "bin"
    bindir.mkdir()
    return make_pg_config(bindir, major=17, prefix=tmp_path / "pgsql")


@pytest.fixture
def settings(pg_config: Path) -> InstallerSettings:
    """Settings that use the fake pg_config and need only ``sh``."""
    return InstallerSettings(
        config_tool=str(pg_config),
        required_commands=("sh",),
    )


@pytest.fixture
def run_ctx(tmp_path: Path) -> RunContext:
    work = tmp_path / "work"
    work.mkdir()
    return RunContext(work_dir=work)


@pytest.fixture
def no_sudo(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run escalated commands unprefixed; targets live under tmp_path."""
    from pgext_install.core.services.ext_install.execution import subprocess_runner

    monkeypatch.setattr(subprocess_runner, "sudo_prefix", lambda needs_sudo: [])
