"""
L3 Detection — read-only host probes.
"""

from pgext_install.core.services.ext_install.detection.directories import (  # noqa: F401
    resolve_directories,
)
from pgext_install.core.services.ext_install.detection.environment import (  # noqa: F401
    check_prerequisites,
    detect_architecture,
    locate_config_tool,
    parse_major_version,
    probe_environment,
    query_config_tool,
    query_reported_version,
)
