"""
L1 Domain — pure derivations (artifact naming, file search).
"""

from pgext_install.core.services.ext_install.domain.artifact_naming import (  # noqa: F401
    artifact_file_name,
    build_artifact_descriptor,
)
from pgext_install.core.services.ext_install.domain.file_search import (  # noqa: F401
    DEFAULT_STRATEGIES,
    conventional_subdir,
    find_files,
    recursive_extension,
)
