"""PDF conversion of Asciidoc RFDs via asciidoctor-pdf.

The converter runs ``asciidoctor-pdf`` as a subprocess inside the render
workspace so that relative image references resolve against the staged
images, and reads the PDF back from stdout.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
from pathlib import Path
from typing import Protocol, runtime_checkable

from rfd_processor.config.models import RenderConfig
from rfd_processor.content.asciidoc import RfdAsciidoc
from rfd_processor.content.errors import CommandError, OutputFileError, OutputIoError

logger = logging.getLogger(__name__)

SOURCE_FILENAME = "rfd.adoc"

# asciidoctor-pdf can be chatty on stderr; keep error messages readable
_MAX_STDERR = 2000


@runtime_checkable
class PdfConverter(Protocol):
    """Turns Asciidoc content into PDF bytes using files in ``content_dir``."""

    async def convert(self, content: RfdAsciidoc, content_dir: Path) -> bytes: ...


class AsciidoctorPdfConverter:
    """PdfConverter backed by the asciidoctor-pdf command line tool."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()

    def check_available(self) -> bool:
        """Check if the configured executable is on PATH."""
        return shutil.which(self.config.command[0]) is not None

    def build_command(self, source: Path, content_dir: Path) -> list[str]:
        args = [*self.config.command, "--base-dir", str(content_dir), "--out-file", "-"]
        for lib in self.config.requires:
            args += ["-r", lib]
        for name, value in self.config.attributes.items():
            args += ["-a", f"{name}={value}"]
        args.append(str(source))
        return args

    async def convert(self, content: RfdAsciidoc, content_dir: Path) -> bytes:
        """Render ``content`` to PDF.

        Raises:
            OutputFileError: The source could not be written to ``content_dir``.
            OutputIoError: The executable could not be started.
            CommandError: The tool exited non-zero or produced no output.
        """
        source = content_dir / SOURCE_FILENAME
        try:
            await asyncio.to_thread(source.write_text, content.content, encoding="utf-8")
        except OSError as e:
            raise OutputFileError(source, f"Failed to write asciidoc source: {e}", e) from e

        command = self.build_command(source, content_dir)
        logger.debug("Running %s", " ".join(command))
        try:
            proc = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=str(content_dir),
            )
        except OSError as e:
            raise OutputIoError(f"Failed to execute {command[0]}: {e}", e) from e

        try:
            stdout, stderr = await proc.communicate()
        except asyncio.CancelledError:
            proc.kill()
            await proc.wait()
            raise
        err_text = stderr.decode("utf-8", errors="replace").strip()[:_MAX_STDERR]

        if proc.returncode != 0:
            raise CommandError(
                f"{command[0]} exited with status {proc.returncode}",
                exit_code=proc.returncode,
                stderr=err_text,
            )
        if not stdout:
            raise CommandError(
                f"{command[0]} produced no output",
                exit_code=proc.returncode,
                stderr=err_text,
            )
        if err_text:
            logger.warning("%s reported: %s", command[0], err_text)

        logger.info("Generated PDF (%d bytes) in %s", len(stdout), content_dir)
        return stdout
