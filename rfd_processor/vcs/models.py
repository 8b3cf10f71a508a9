"""Pydantic models for VCS data."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

# Statuses worth retrying: rate limiting and upstream hiccups.
_RETRYABLE_STATUSES = frozenset({429, 500, 502, 503, 504})


class VCSError(Exception):
    """Wraps source-control failures with the operation that triggered them."""

    def __init__(
        self,
        operation: str,
        cause: Exception | str,
        status: int | None = None,
        retryable: bool | None = None,
    ) -> None:
        self.operation = operation
        self.status = status
        if retryable is None:
            retryable = status in _RETRYABLE_STATUSES
        self.retryable = retryable
        super().__init__(f"{operation} failed: {cause}")
        if isinstance(cause, Exception):
            self.__cause__ = cause


class GitHubRfdLocation(BaseModel):
    """Where a version of an RFD lives: repository plus branch and commit."""

    owner: str
    repo: str
    branch: str
    commit: str = Field(description="Commit sha used as the ref for all reads")

    @property
    def repo_id(self) -> str:
        return f"{self.owner}/{self.repo}"


class ImageDescriptor(BaseModel):
    """An image stored alongside an RFD."""

    path: str = Field(description="Repository path, e.g. rfd/0042/img/diagram.png")
    content: str = Field(description="Base64 encoded file contents")


class RfdReadme(BaseModel):
    """The main document file of an RFD as fetched from source control."""

    path: str
    format: Literal["asciidoc", "markdown"]
    content: str = Field(description="Base64 encoded file contents")
