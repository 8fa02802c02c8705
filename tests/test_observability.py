"""
Tests for logging setup and the run context.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pgext_install.core.context import RunContext, open_run_context
from pgext_install.core.observability.logging_config import resolve_level, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestResolveLevel:
    def test_precedence(self):
        env = {"PGEXT_LOG_LEVEL": "ERROR"}
        assert resolve_level(debug=True, verbose=True, environ=env) == "DEBUG"
        assert resolve_level(verbose=True, quiet=True, environ=env) == "INFO"
        assert resolve_level(quiet=True, environ={}) == "ERROR"
        assert resolve_level(environ=env) == "ERROR"
        assert resolve_level(environ={}) == "WARNING"


@pytest.mark.usefixtures("restore_root_logger")
class TestSetupLogging:
    def test_console_level(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_bad_level_falls_back(self):
        setup_logging("LOUD")
        assert logging.getLogger().level == logging.WARNING

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "install.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        logging.getLogger("pgext_install.test").debug("written to file only")
        for h in root.handlers:
            h.flush()
        assert "written to file only" in log_file.read_text()

    def test_file_not_created_until_first_record(self, tmp_path: Path):
        log_file = tmp_path / "install.log"
        setup_logging("WARNING", log_file=str(log_file))
        assert not log_file.exists()
        logging.getLogger("pgext_install.test").warning("first record")
        for h in logging.getLogger().handlers:
            h.flush()
        assert log_file.exists()


class TestRunContext:
    def test_warn_records_and_forwards(self, tmp_path: Path):
        seen: list[str] = []
        ctx = RunContext(work_dir=tmp_path, on_warning=seen.append)
        ctx.warn("Directory /x does not exist, will create it")
        assert ctx.warnings == seen == ["Directory /x does not exist, will create it"]

    def test_work_dir_removed_after_block(self):
        with open_run_context() as ctx:
            work = ctx.work_dir
            (work / "artifact.tar.gz").write_bytes(b"x")
            assert work.is_dir()
        assert not work.exists()

    def test_work_dir_removed_on_error(self):
        with pytest.raises(RuntimeError):
            with open_run_context() as ctx:
                work = ctx.work_dir
                raise RuntimeError("boom")
        assert not work.exists()
