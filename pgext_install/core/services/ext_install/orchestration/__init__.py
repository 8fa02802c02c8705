"""
L5 Orchestration — the end-to-end install pipeline.
"""

from pgext_install.core.services.ext_install.orchestration.orchestrator import (  # noqa: F401
    install_extension,
)
