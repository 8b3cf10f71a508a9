"""Per-render temporary directories."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from types import TracebackType
from uuid import UUID

from rfd_processor.content.errors import ContentIoError

logger = logging.getLogger(__name__)

WORKSPACE_FOLDER = "rfd-render"


def default_workspace_root() -> Path:
    """System temp area plus a fixed subfolder shared by all renders."""
    return Path(tempfile.gettempdir()) / WORKSPACE_FOLDER


class RenderWorkspace:
    """Scratch directory owned by a single render.

    The directory is ``<root>/<render_id>``. It is created on first use of
    :meth:`path` and removed by :meth:`cleanup`. Used as a context manager
    it is removed however the block exits, including cancellation::

        with workspace as path:
            ...
    """

    def __init__(self, render_id: UUID, root: str | Path | None = None) -> None:
        self.render_id = render_id
        self.root = Path(root) if root is not None else default_workspace_root()

    def __repr__(self) -> str:
        return f"RenderWorkspace({self.location})"

    @property
    def location(self) -> Path:
        """Where the workspace lives, without touching the filesystem."""
        return self.root / str(self.render_id)

    def path(self) -> Path:
        """Return the workspace directory, creating it (and parents) if needed."""
        path = self.location
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ContentIoError(f"Failed to create render workspace {path}: {e}", e) from e
        return path

    def cleanup(self) -> None:
        """Remove the workspace. Failures are logged, never raised."""
        path = self.location
        if not path.is_dir():
            return
        logger.info("Removing temporary content directory %s", path)
        try:
            shutil.rmtree(path)
        except OSError as e:
            logger.warning("Failed to clean up temporary files in %s: %s", path, e)

    def __enter__(self) -> Path:
        return self.path()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cleanup()
