"""VCS providers for rfd-processor."""

import os

from rfd_processor.config.models import VCSConfig
from rfd_processor.vcs.base import IMAGE_EXTENSIONS, VCSProvider
from rfd_processor.vcs.github import GitHubProvider
from rfd_processor.vcs.local import LocalProvider
from rfd_processor.vcs.models import GitHubRfdLocation, ImageDescriptor, RfdReadme, VCSError


def create_provider(config: VCSConfig) -> VCSProvider:
    """Create a VCS provider from config.

    For GitHub, resolves the token from the environment variable named in
    config.token_env.
    """
    if config.provider == "local":
        return LocalProvider(config.local_path)
    if config.provider != "github":
        raise ValueError(
            f"Unsupported VCS provider: {config.provider!r}. "
            "Supported: 'github', 'local'."
        )
    token = os.environ.get(config.token_env, "")
    if not token:
        raise ValueError(
            f"VCS token not found. Set the {config.token_env} environment variable."
        )
    return GitHubProvider(owner=config.owner, repo=config.repo, token=token)


__all__ = [
    "GitHubProvider",
    "GitHubRfdLocation",
    "IMAGE_EXTENSIONS",
    "ImageDescriptor",
    "LocalProvider",
    "RfdReadme",
    "VCSError",
    "VCSProvider",
    "create_provider",
]
