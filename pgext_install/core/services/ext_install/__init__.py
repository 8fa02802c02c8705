"""
Extension install service — package re-exports.

    from pgext_install.core.services.ext_install import install_extension

Each symbol lives in its single-responsibility module inside the
appropriate layer (data → domain → resolver → detection → execution →
orchestration).
"""

# ── L1: Domain ──
from pgext_install.core.services.ext_install.domain.artifact_naming import (  # noqa: F401
    build_artifact_descriptor,
)

# ── L2: Resolver ──
from pgext_install.core.services.ext_install.resolver.release_resolution import (  # noqa: F401
    resolve_release,
)
from pgext_install.core.services.ext_install.resolver.request_resolution import (  # noqa: F401
    resolve_request,
)

# ── L3: Detection ──
from pgext_install.core.services.ext_install.detection.directories import (  # noqa: F401
    resolve_directories,
)
from pgext_install.core.services.ext_install.detection.environment import (  # noqa: F401
    probe_environment,
)

# ── L4: Execution ──
from pgext_install.core.services.ext_install.execution.download import (  # noqa: F401
    download_artifact,
    extract_artifact,
)
from pgext_install.core.services.ext_install.execution.file_placement import (  # noqa: F401
    build_installation_plan,
    place_files,
)

# ── L5: Orchestration ──
from pgext_install.core.services.ext_install.orchestration.orchestrator import (  # noqa: F401
    install_extension,
)
