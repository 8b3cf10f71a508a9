"""GitHub VCS provider using PyGithub."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Callable
from functools import cached_property
from typing import TYPE_CHECKING, TypeVar

import requests
from github import Auth, Github, GithubException, UnknownObjectException
from github.ContentFile import ContentFile
from github.Repository import Repository

from rfd_processor.vcs.base import README_FILES, VCSProvider, is_image_path
from rfd_processor.vcs.models import GitHubRfdLocation, ImageDescriptor, RfdReadme, VCSError

if TYPE_CHECKING:
    from rfd_processor.content.models import RfdNumber

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GitHubProvider(VCSProvider):
    """GitHub implementation of VCSProvider using PyGithub.

    PyGithub is synchronous, so all blocking calls are wrapped
    with asyncio.to_thread() to avoid blocking the event loop.
    """

    def __init__(self, owner: str, repo: str, token: str | None = None):
        self.owner = owner
        self.repo = repo
        self._token = token or os.environ.get("GITHUB_TOKEN", "")
        if not self._token:
            raise ValueError(
                "GitHub token required. Pass token= or set GITHUB_TOKEN env var."
            )

    @cached_property
    def _client(self) -> Github:
        auth = Auth.Token(self._token)
        return Github(auth=auth)

    def _get_repo(self) -> Repository:
        # lazy: no request until an attribute or sub-resource is needed
        return self._client.get_repo(f"{self.owner}/{self.repo}", lazy=True)

    async def _call(self, operation: str, fn: Callable[[], T]) -> T:
        """Run a blocking PyGithub call off the loop, mapping failures to VCSError."""
        try:
            return await asyncio.to_thread(fn)
        except GithubException as e:
            raise VCSError(operation, e, status=e.status) from e
        except requests.RequestException as e:
            # Connection resets, timeouts: worth another attempt
            raise VCSError(operation, e, retryable=True) from e

    async def locate(self, branch: str | None = None) -> GitHubRfdLocation:
        """Pin a branch to its current head commit."""

        def _sync() -> GitHubRfdLocation:
            repo = self._get_repo()
            name = branch or repo.default_branch
            head = repo.get_branch(name)
            return GitHubRfdLocation(
                owner=self.owner,
                repo=self.repo,
                branch=name,
                commit=head.commit.sha,
            )

        return await self._call("locate", _sync)

    async def get_readme(self, number: RfdNumber, location: GitHubRfdLocation) -> RfdReadme:
        """Fetch README.adoc (or README.md) from the RFD's directory."""
        directory = number.repo_path().strip("/")

        def _sync() -> RfdReadme:
            repo = self._get_repo()
            for name, fmt in README_FILES:
                try:
                    file = repo.get_contents(f"{directory}/{name}", ref=location.commit)
                except UnknownObjectException:
                    continue
                if isinstance(file, list):
                    continue
                # Blob API handles files over the 1 MB contents API limit
                blob = repo.get_git_blob(file.sha)
                return RfdReadme(path=file.path, format=fmt, content=blob.content)
            raise VCSError(
                "get_readme",
                f"no README in {directory} at {location.commit}",
                status=404,
            )

        return await self._call("get_readme", _sync)

    async def list_images(
        self, number: RfdNumber, location: GitHubRfdLocation
    ) -> list[ImageDescriptor]:
        """Walk the RFD directory at the pinned commit and fetch every image."""
        directory = number.repo_path().strip("/")

        def _list() -> list[ContentFile]:
            repo = self._get_repo()
            found: list[ContentFile] = []
            pending = [directory]
            while pending:
                contents = repo.get_contents(pending.pop(0), ref=location.commit)
                # get_contents returns a single item for files, list for dirs
                if not isinstance(contents, list):
                    contents = [contents]
                for c in contents:
                    if c.type == "dir":
                        pending.append(c.path)
                    elif is_image_path(c.path):
                        found.append(c)
            return found

        files = await self._call("list_images", _list)
        logger.debug("Found %d images for RFD %s at %s", len(files), number, location.commit)

        images: list[ImageDescriptor] = []
        for file in files:
            blob = await self._call(
                "get_image", lambda sha=file.sha: self._get_repo().get_git_blob(sha)
            )
            images.append(ImageDescriptor(path=file.path, content=blob.content))
        return images
