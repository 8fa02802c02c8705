"""
L3 Detection — installation target directories.

Overrides win; otherwise pg_config is asked. Missing directories are
reported, not created. Creation belongs to file placement.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pgext_install.core.context import RunContext
from pgext_install.core.models.environment import (
    InstallationTargets,
    ResolvedEnvironment,
)
from pgext_install.core.models.request import InstallRequest
from pgext_install.core.services.ext_install.data.constants import EXTENSION_SUBDIR
from pgext_install.core.services.ext_install.detection.environment import (
    query_config_tool,
)

logger = logging.getLogger(__name__)


def resolve_directories(
    request: InstallRequest,
    env: ResolvedEnvironment,
    ctx: RunContext,
) -> InstallationTargets:
    """Derive the library and extension directories."""
    if request.pkglibdir_override is not None:
        library_dir = request.pkglibdir_override
    else:
        library_dir = Path(query_config_tool(env.config_tool_path, "--pkglibdir"))

    if request.sharedir_override is not None:
        extension_dir = request.sharedir_override
    else:
        sharedir = Path(query_config_tool(env.config_tool_path, "--sharedir"))
        extension_dir = sharedir / EXTENSION_SUBDIR

    targets = InstallationTargets(library_dir=library_dir, extension_dir=extension_dir)

    for directory in (targets.library_dir, targets.extension_dir):
        if not directory.is_dir():
            ctx.warn(f"Directory {directory} does not exist, will create it")

    logger.info(
        "Targets: library=%s extension=%s", targets.library_dir, targets.extension_dir,
    )
    return targets
