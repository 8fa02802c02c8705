"""
L2 Resolver — request and release resolution.
"""

from pgext_install.core.services.ext_install.resolver.release_resolution import (  # noqa: F401
    fetch_latest_tag,
    resolve_release,
)
from pgext_install.core.services.ext_install.resolver.request_resolution import (  # noqa: F401
    resolve_request,
)
