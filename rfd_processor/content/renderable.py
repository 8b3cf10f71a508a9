"""RenderableRfd: an RFD in one of its dialects, ready for metadata edits and rendering."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING, TypeAlias, assert_never
from uuid import UUID, uuid4

from rfd_processor.content.asciidoc import RfdAsciidoc
from rfd_processor.content.errors import (
    CommandError,
    FormatNotSupportedError,
    InvalidContentError,
    RfdContentError,
    RfdOutputError,
)
from rfd_processor.content.images import decode_base64, stage_images
from rfd_processor.content.markdown import RfdMarkdown
from rfd_processor.content.models import ContentFormat, RfdNumber, RfdPdf
from rfd_processor.content.pdf import AsciidoctorPdfConverter, PdfConverter
from rfd_processor.content.workspace import RenderWorkspace

if TYPE_CHECKING:
    from rfd_processor.vcs.base import VCSProvider
    from rfd_processor.vcs.models import GitHubRfdLocation, RfdReadme

logger = logging.getLogger(__name__)

RfdContent: TypeAlias = RfdAsciidoc | RfdMarkdown


class RenderableRfd:
    """Wraps RFD content in either supported dialect.

    Each instance gets a fresh ``render_id`` which names its render
    workspace, so concurrent renders never share a directory, even for the
    same RFD. The dialect is fixed at construction.
    """

    def __init__(self, content: RfdContent, workspace_root: str | Path | None = None) -> None:
        self._content = content
        self._render_id = uuid4()
        self._workspace = RenderWorkspace(self._render_id, workspace_root)

    def __repr__(self) -> str:
        return f"RenderableRfd(format={self.format().value}, render_id={self._render_id})"

    @classmethod
    def new_asciidoc(cls, content: str, workspace_root: str | Path | None = None) -> RenderableRfd:
        """Construct a wrapper around Asciidoc content."""
        return cls(RfdAsciidoc(content), workspace_root)

    @classmethod
    def new_markdown(cls, content: str, workspace_root: str | Path | None = None) -> RenderableRfd:
        """Construct a wrapper around Markdown content."""
        return cls(RfdMarkdown(content), workspace_root)

    @classmethod
    def new_from_text(
        cls,
        format: ContentFormat | str,
        text: str,
        workspace_root: str | Path | None = None,
    ) -> RenderableRfd:
        fmt = ContentFormat(format)
        if fmt is ContentFormat.asciidoc:
            return cls.new_asciidoc(text, workspace_root)
        elif fmt is ContentFormat.markdown:
            return cls.new_markdown(text, workspace_root)
        else:
            assert_never(fmt)

    @classmethod
    def from_readme(
        cls, readme: RfdReadme, workspace_root: str | Path | None = None
    ) -> RenderableRfd:
        """Build from a README fetched from source control.

        Raises:
            ContentDecodeError: The payload is not valid base64.
            InvalidContentError: The decoded bytes are not UTF-8.
        """
        data = decode_base64(readme.content)
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidContentError(
                f"Failed to convert content string {readme.path}: {e}", e
            ) from e
        return cls.new_from_text(readme.format, text, workspace_root)

    @property
    def render_id(self) -> UUID:
        return self._render_id

    def workspace(self) -> RenderWorkspace:
        return self._workspace

    def workspace_path(self) -> Path:
        """This document's render workspace, created on first call."""
        return self._workspace.path()

    def raw(self) -> str:
        """The unparsed source as given at construction."""
        return self._content.raw()

    def header(self) -> str | None:
        """Content above the title line."""
        return self._content.header()

    def body(self) -> str | None:
        """Content below the title line."""
        return self._content.body()

    def format(self) -> ContentFormat:
        content = self._content
        if isinstance(content, RfdAsciidoc):
            return ContentFormat.asciidoc
        elif isinstance(content, RfdMarkdown):
            return ContentFormat.markdown
        else:
            assert_never(content)

    def into_inner_content(self) -> str:
        """The source text with every attribute update applied."""
        return self._content.content

    # -- attributes --------------------------------------------------------

    def get_title(self) -> str | None:
        return self._content.get_title()

    def get_state(self) -> str | None:
        return self._content.get_state()

    def update_state(self, value: str) -> None:
        self._content.update_state(value)

    def get_discussion(self) -> str | None:
        return self._content.get_discussion()

    def update_discussion(self, value: str) -> None:
        self._content.update_discussion(value)

    def get_authors(self) -> str | None:
        return self._content.get_authors()

    def get_labels(self) -> str | None:
        return self._content.get_labels()

    def update_labels(self, value: str) -> None:
        self._content.update_labels(value)

    # -- output ------------------------------------------------------------

    async def render_to_pdf(
        self,
        provider: VCSProvider,
        number: RfdNumber,
        location: GitHubRfdLocation,
        converter: PdfConverter | None = None,
    ) -> RfdPdf:
        """Generate a PDF from the RFD plus the images stored next to it at ``location``.

        Only Asciidoc is supported; Markdown fails before any network or
        filesystem access. The render workspace is removed however this
        returns.

        Raises:
            FormatNotSupportedError: The RFD is Markdown.
            ContentFailureError: Images could not be fetched, decoded or staged.
            CommandError: The converter failed.
        """
        content = self._content
        if isinstance(content, RfdMarkdown):
            raise FormatNotSupportedError(ContentFormat.markdown.value)
        elif not isinstance(content, RfdAsciidoc):
            assert_never(content)

        converter = converter or AsciidoctorPdfConverter()
        try:
            with self._workspace as content_dir:
                await stage_images(provider, number, location, self._workspace)
                contents = await self._convert(converter, content, content_dir)
        except RfdContentError as e:
            raise RfdOutputError.from_content_error(e) from e

        logger.info("Rendered RFD %s to PDF (%d bytes)", number, len(contents))
        return RfdPdf(contents=contents, number=number)

    async def _convert(
        self, converter: PdfConverter, content: RfdAsciidoc, content_dir: Path
    ) -> bytes:
        # Converter crashes surface as CommandError
        task = asyncio.create_task(converter.convert(content, content_dir))
        try:
            return await task
        except (RfdOutputError, RfdContentError):
            raise
        except Exception as e:
            raise CommandError(f"Failed to run output generator to completion: {e}", cause=e) from e
