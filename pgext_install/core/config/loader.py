"""
Settings loader — reads installer settings into a validated model.

Settings are resolved in precedence order:
    environment variables  >  YAML settings file  >  built-in defaults

The settings file is optional. It is taken from ``--config`` or the
PGEXT_CONFIG env var.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pgext_install.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PGEXT_CONFIG"

# env var → settings field
_ENV_OVERRIDES = {
    "PGEXT_EXTENSION_NAME": "extension_name",
    "PGEXT_REPOSITORY": "repository",
    "PGEXT_API_BASE": "api_base",
    "PGEXT_DOWNLOAD_BASE": "download_base",
    "GITHUB_TOKEN": "github_token",
}


class InstallerSettings(BaseModel):
    """Where artifacts come from and how the host is probed."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    extension_name: str = Field(default="pg_ecdsa_verify", min_length=1)
    repository: str = Field(
        default="joelonsql/pg_ecdsa_verify",
        pattern=r"^[\w.-]+/[\w.-]+$",
    )
    api_base: str = "https://api.github.com"
    download_base: str = "https://github.com"
    config_tool: str = "pg_config"
    required_commands: tuple[str, ...] = ("curl", "tar")
    api_timeout: float = Field(default=15.0, gt=0)
    download_timeout: float = Field(default=300.0, gt=0)
    github_token: str | None = None

    @property
    def latest_release_url(self) -> str:
        return f"{self.api_base.rstrip('/')}/repos/{self.repository}/releases/latest"

    def download_url(self, tag: str, file_name: str) -> str:
        """Browser download URL for a release asset."""
        base = self.download_base.rstrip("/")
        return f"{base}/{self.repository}/releases/download/{tag}/{file_name}"


def load_settings(
    path: Path | None = None,
    environ: dict[str, str] | None = None,
) -> InstallerSettings:
    """Load installer settings.

    Args:
        path: Explicit settings file. If None, PGEXT_CONFIG is consulted;
            if that is unset too, only defaults and env overrides apply.
        environ: Environment mapping (default: ``os.environ``).

    Returns:
        Validated InstallerSettings.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    env = os.environ if environ is None else environ

    if path is None and env.get(CONFIG_ENV_VAR):
        path = Path(env[CONFIG_ENV_VAR])

    data: dict = {}
    if path is not None:
        data = _read_settings_file(path)

    for var, field_name in _ENV_OVERRIDES.items():
        value = env.get(var)
        if value:
            data[field_name] = value

    try:
        settings = InstallerSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid installer settings: {e}") from e

    logger.debug(
        "Settings: extension=%s repository=%s", settings.extension_name, settings.repository,
    )
    return settings


def _read_settings_file(path: Path) -> dict:
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # Settings may sit under an "installer" key or be flat
    section = data.get("installer", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Expected a mapping under 'installer' in {path}")
    return dict(section)
