"""Local checkout provider: serves RFDs straight from a directory on disk."""

from __future__ import annotations

import asyncio
import base64
from pathlib import Path
from typing import TYPE_CHECKING

from rfd_processor.vcs.base import README_FILES, VCSProvider, is_image_path
from rfd_processor.vcs.models import GitHubRfdLocation, ImageDescriptor, RfdReadme, VCSError

if TYPE_CHECKING:
    from rfd_processor.content.models import RfdNumber


class LocalProvider(VCSProvider):
    """Reads RFDs from a working copy laid out like the RFD repository.

    There is no history, so every location resolves to the files as they
    currently are on disk.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).resolve()

    def _rfd_dir(self, number: RfdNumber) -> Path:
        return self.root / number.repo_path().strip("/")

    def _relative(self, path: Path) -> str:
        return path.relative_to(self.root).as_posix()

    async def locate(self, branch: str | None = None) -> GitHubRfdLocation:
        return GitHubRfdLocation(
            owner="local",
            repo=self.root.name,
            branch=branch or "local",
            commit="HEAD",
        )

    async def get_readme(self, number: RfdNumber, location: GitHubRfdLocation) -> RfdReadme:
        directory = self._rfd_dir(number)

        def _sync() -> RfdReadme:
            for name, fmt in README_FILES:
                path = directory / name
                if path.is_file():
                    return RfdReadme(
                        path=self._relative(path),
                        format=fmt,
                        content=base64.b64encode(path.read_bytes()).decode("ascii"),
                    )
            raise VCSError("get_readme", f"no README in {directory}", status=404)

        try:
            return await asyncio.to_thread(_sync)
        except OSError as e:
            raise VCSError("get_readme", e) from e

    async def list_images(
        self, number: RfdNumber, location: GitHubRfdLocation
    ) -> list[ImageDescriptor]:
        directory = self._rfd_dir(number)

        def _sync() -> list[ImageDescriptor]:
            if not directory.is_dir():
                raise VCSError("list_images", f"no such RFD directory {directory}", status=404)
            return [
                ImageDescriptor(
                    path=self._relative(path),
                    content=base64.b64encode(path.read_bytes()).decode("ascii"),
                )
                for path in sorted(directory.rglob("*"))
                if path.is_file() and is_image_path(path.name)
            ]

        try:
            return await asyncio.to_thread(_sync)
        except OSError as e:
            raise VCSError("list_images", e) from e
