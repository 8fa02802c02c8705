"""
Domain models — Pydantic types for the installer.

All models are re-exported here for convenient access:

    from pgext_install.core.models import InstallRequest, InstallationPlan
"""

from pgext_install.core.models.environment import (
    ConfirmationRequest,
    InstallationTargets,
    ResolvedEnvironment,
)
from pgext_install.core.models.plan import (
    FileCategory,
    InstallationPlan,
    InstallResult,
    PlannedFile,
)
from pgext_install.core.models.release import ArtifactDescriptor, ResolvedRelease
from pgext_install.core.models.request import (
    LATEST,
    InstallRequest,
)

__all__ = [
    # environment.py
    "ConfirmationRequest",
    "InstallationTargets",
    "ResolvedEnvironment",
    # plan.py
    "FileCategory",
    "InstallationPlan",
    "InstallResult",
    "PlannedFile",
    # release.py
    "ArtifactDescriptor",
    "ResolvedRelease",
    # request.py
    "InstallRequest",
    "LATEST",
]
