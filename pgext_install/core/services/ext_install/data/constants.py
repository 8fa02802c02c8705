"""
L0 Data — architecture table, pg_config locations, archive layout.
"""

from __future__ import annotations

from pgext_install.core.models.plan import FileCategory

# raw ``uname -m`` value → architecture used in artifact names
ARCH_MAP: dict[str, str] = {
    "x86_64": "x86_64",
    "aarch64": "aarch64",
    "arm64": "aarch64",
}

# Tried in order after a PATH lookup fails; ``{major}`` is the requested
# PostgreSQL major version.
CONFIG_TOOL_FALLBACKS: tuple[str, ...] = (
    "/usr/lib/postgresql/{major}/bin/pg_config",    # Debian / Ubuntu
    "/usr/pgsql-{major}/bin/pg_config",             # RHEL / Fedora (PGDG)
)

# Conventional archive layout
LIBRARY_SUBDIR = "lib"
EXTENSION_SUBDIR = "extension"

# category → (conventional subdir, glob)
SEARCH_PATTERNS: dict[FileCategory, tuple[str, str]] = {
    FileCategory.LIBRARY: (LIBRARY_SUBDIR, "*.so"),
    FileCategory.CONTROL: (EXTENSION_SUBDIR, "*.control"),
    FileCategory.SQL: (EXTENSION_SUBDIR, "*.sql"),
}
