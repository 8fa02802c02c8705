"""
L2 Resolver — release spec → concrete tag.

``latest`` is looked up through the GitHub releases API. Any explicit
tag passes through unchecked; a tag that does not exist surfaces later
as a failed download.
"""

from __future__ import annotations

import http.client
import json
import logging
import urllib.request

from pgext_install import __version__
from pgext_install.core.config.loader import InstallerSettings
from pgext_install.core.errors import ReleaseLookupError
from pgext_install.core.models.release import ResolvedRelease
from pgext_install.core.models.request import InstallRequest

logger = logging.getLogger(__name__)


def _api_headers(settings: InstallerSettings) -> dict[str, str]:
    headers = {
        "Accept": "application/vnd.github+json",
        "User-Agent": f"pgext-install/{__version__}",
    }
    if settings.github_token:
        headers["Authorization"] = f"Bearer {settings.github_token}"
    return headers


def fetch_latest_tag(settings: InstallerSettings) -> str:
    """Ask the registry for the newest published release tag.

    Network errors, HTTP errors, timeouts, non-JSON bodies and a missing
    ``tag_name`` all raise the same error: the registry is unusable.

    Raises:
        ReleaseLookupError: No tag could be obtained.
    """
    url = settings.latest_release_url
    logger.debug("GET %s", url)

    req = urllib.request.Request(url, headers=_api_headers(settings))
    try:
        with urllib.request.urlopen(req, timeout=settings.api_timeout) as resp:
            body = resp.read()
    except (OSError, http.client.HTTPException) as e:  # URLError and timeouts are OSErrors
        raise ReleaseLookupError(f"Failed to fetch latest version: {e}") from e

    try:
        data = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise ReleaseLookupError(f"Failed to fetch latest version: invalid response from {url}") from e

    tag = data.get("tag_name") if isinstance(data, dict) else None
    if not isinstance(tag, str) or not tag.strip():
        raise ReleaseLookupError(f"Failed to fetch latest version: no release tag at {url}")
    return tag.strip()


def resolve_release(
    request: InstallRequest,
    settings: InstallerSettings,
) -> ResolvedRelease:
    """Turn the request's release spec into a concrete tag."""
    if request.wants_latest:
        tag = fetch_latest_tag(settings)
        logger.info("Latest release of %s is %s", settings.repository, tag)
    else:
        tag = request.release_spec
    return ResolvedRelease(tag=tag)
