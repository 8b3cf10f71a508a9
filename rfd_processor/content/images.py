"""Stage the images an RFD embeds into its render workspace."""

from __future__ import annotations

import asyncio
import base64
import binascii
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rfd_processor.content.errors import (
    ContentDecodeError,
    ContentVCSError,
    FileIoError,
    TaskFailureError,
)
from rfd_processor.vcs.models import GitHubRfdLocation, VCSError

if TYPE_CHECKING:
    from rfd_processor.content.models import RfdNumber
    from rfd_processor.content.workspace import RenderWorkspace
    from rfd_processor.vcs.base import VCSProvider

logger = logging.getLogger(__name__)


def decode_base64(content: str) -> bytes:
    """Decode a base64 payload as served by GitHub (line wrapped)."""
    try:
        return base64.b64decode("".join(content.split()), validate=True)
    except (binascii.Error, ValueError) as e:
        raise ContentDecodeError(f"Failed to decode content file: {e}", e) from e


def staged_path(storage_path: Path, document_dir: str, image_path: str) -> Path:
    """Map a repository image path to its location inside the workspace.

    The RFD's own directory is stripped so that ``rfd/0042/img/a.png`` lands
    at ``<storage_path>/img/a.png``, matching relative references in the
    document. Leading separators on either side are ignored.
    """
    prefix = document_dir.strip("/")
    relative = image_path.lstrip("/")
    if prefix and (relative == prefix or relative.startswith(prefix + "/")):
        relative = relative[len(prefix):]
    relative = relative.lstrip("/")

    dest = storage_path / relative
    if not relative or not dest.resolve().is_relative_to(storage_path.resolve()):
        raise FileIoError(dest, "Image path escapes render workspace")
    return dest


def _write_file(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


async def stage_images(
    provider: VCSProvider,
    number: RfdNumber,
    location: GitHubRfdLocation,
    workspace: RenderWorkspace,
) -> list[Path]:
    """Download the RFD's images at ``location`` and write them into ``workspace``.

    Images are handled one at a time. The first failure aborts the run;
    files written before it stay on disk.

    Returns:
        Paths of the staged files, in the order they were written.

    Raises:
        ContentVCSError: The image listing could not be fetched.
        ContentDecodeError: An image was not valid base64.
        FileIoError: An image could not be written.
        TaskFailureError: The write worker failed unexpectedly.
    """
    storage_path = workspace.path()
    document_dir = number.repo_path()

    try:
        images = await provider.list_images(number, location)
    except VCSError as e:
        raise ContentVCSError(f"Failed communication with GitHub API: {e}", e) from e

    written: list[Path] = []
    for image in images:
        path = staged_path(storage_path, document_dir, image.path)
        data = decode_base64(image.content)
        try:
            await asyncio.to_thread(_write_file, path, data)
        except OSError as e:
            raise FileIoError(path, f"Failed to write image: {e}", e) from e
        except Exception as e:
            raise TaskFailureError(f"Image writer for {path} did not complete: {e}", e) from e

        logger.info("Wrote embedded image %s", path)
        written.append(path)

    return written
