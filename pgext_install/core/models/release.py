"""
Release models — the concrete tag to install and the artifact it names.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Leading marker some projects put on tags ("v1.2.4")
TAG_MARKER = "v"


class ResolvedRelease(BaseModel):
    """A concrete release tag."""

    model_config = ConfigDict(frozen=True)

    tag: str = Field(min_length=1)

    @property
    def version_number(self) -> str:
        """The tag with its leading marker removed (``v1.2.4`` → ``1.2.4``)."""
        if self.tag.startswith(TAG_MARKER):
            return self.tag[len(TAG_MARKER):]
        return self.tag


class ArtifactDescriptor(BaseModel):
    """Where the artifact lives and what it is called."""

    model_config = ConfigDict(frozen=True)

    file_name: str
    download_url: str
