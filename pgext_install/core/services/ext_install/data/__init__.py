"""
L0 Data — static tables the installer consults.
"""

from pgext_install.core.services.ext_install.data.constants import (  # noqa: F401
    ARCH_MAP,
    CONFIG_TOOL_FALLBACKS,
    EXTENSION_SUBDIR,
    LIBRARY_SUBDIR,
    SEARCH_PATTERNS,
)
