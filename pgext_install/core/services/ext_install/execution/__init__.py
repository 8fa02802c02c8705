"""
L4 Execution — side effects: subprocesses, downloads, file placement.
"""

from pgext_install.core.services.ext_install.execution.download import (  # noqa: F401
    download_artifact,
    extract_artifact,
)
from pgext_install.core.services.ext_install.execution.file_placement import (  # noqa: F401
    build_installation_plan,
    place_files,
    requires_privilege_escalation,
)
from pgext_install.core.services.ext_install.execution.subprocess_runner import (  # noqa: F401
    CommandResult,
    run_command,
)
