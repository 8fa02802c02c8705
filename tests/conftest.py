"""
Shared test fixtures and configuration.
"""

import pytest


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's installer env vars out of every test."""
    for var in (
        "PGEXT_CONFIG",
        "PGEXT_EXTENSION_NAME",
        "PGEXT_REPOSITORY",
        "PGEXT_API_BASE",
        "PGEXT_DOWNLOAD_BASE",
        "PGEXT_LOG_LEVEL",
        "PGEXT_LOG_FILE",
        "PGEXT_LOG_FILE_LEVEL",
        "GITHUB_TOKEN",
    ):
        monkeypatch.delenv(var, raising=False)
