"""Abstract VCS interface for rfd-processor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from rfd_processor.vcs.models import GitHubRfdLocation, ImageDescriptor, RfdReadme

if TYPE_CHECKING:
    from rfd_processor.content.models import RfdNumber

IMAGE_EXTENSIONS: set[str] = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp", ".svg"}

# Candidate document files inside an RFD directory, in lookup order.
README_FILES: tuple[tuple[str, str], ...] = (
    ("README.adoc", "asciidoc"),
    ("README.md", "markdown"),
)


def is_image_path(path: str) -> bool:
    return PurePosixPath(path).suffix.lower() in IMAGE_EXTENSIONS


class VCSProvider(ABC):
    """Abstract base class for RFD source-control providers.

    Supplies the raw document and the images stored next to it at a
    specific location (branch + commit).
    """

    @abstractmethod
    async def locate(self, branch: str | None = None) -> GitHubRfdLocation:
        """Resolve a branch (default branch when None) to a pinned location."""
        ...

    @abstractmethod
    async def get_readme(self, number: RfdNumber, location: GitHubRfdLocation) -> RfdReadme:
        """Fetch the main document file of an RFD.

        Args:
            number: RFD whose directory is searched.
            location: Branch and commit to read from.
        """
        ...

    @abstractmethod
    async def list_images(
        self, number: RfdNumber, location: GitHubRfdLocation
    ) -> list[ImageDescriptor]:
        """List every image stored under the RFD's directory, with contents.

        Args:
            number: RFD whose directory is searched.
            location: Branch and commit to read from.
        """
        ...
