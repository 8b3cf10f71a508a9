"""Shared test fixtures for rfd-processor."""

import base64
import logging
from pathlib import Path

import pytest
from unittest.mock import AsyncMock, MagicMock

from rfd_processor.config.models import RfdProcessorConfig
from rfd_processor.content.asciidoc import RfdAsciidoc
from rfd_processor.content.models import RfdNumber
from rfd_processor.vcs.base import VCSProvider
from rfd_processor.vcs.models import GitHubRfdLocation, ImageDescriptor, RfdReadme

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
SVG_BYTES = b'<svg xmlns="http://www.w3.org/2000/svg"></svg>'
PDF_BYTES = b"%PDF-1.7\n% fake pdf body\n%%EOF\n"

ASCIIDOC_RFD = """\
:showtitle:
:toc: left
:numbered:
:icons: font
:state: prediscussion
:discussion: https://github.com/oxidecomputer/rfd/pull/123
:revremark: State: {state}
:authors: Alice Example <alice@example.com>, Bob Example <bob@example.com>
:labels: storage, api

= RFD 123 Widget Storage
{authors}

== Background

Widgets need somewhere to live.

image::img/diagram.png[]

== Determinations

Store them.
"""

MARKDOWN_RFD = """\
---
authors: Carol Example <carol@example.com>
state: discussion
discussion: https://github.com/oxidecomputer/rfd/pull/124
---

# RFD 124 Markdown Things

Some text.

state: this line is prose, not an attribute
"""


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """CLI runs install handlers on the package logger; drop them between tests."""
    yield
    logger = logging.getLogger("rfd_processor")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def asciidoc_text():
    return ASCIIDOC_RFD


@pytest.fixture
def markdown_text():
    return MARKDOWN_RFD


@pytest.fixture
def rfd_number():
    return RfdNumber(123)


@pytest.fixture
def sample_location():
    return GitHubRfdLocation(
        owner="oxidecomputer",
        repo="rfd",
        branch="0123",
        commit="8f3c2a1d9e7b6c5a4f3e2d1c0b9a8f7e6d5c4b3a",
    )


@pytest.fixture
def sample_images():
    return [
        ImageDescriptor(path="rfd/0123/img/diagram.png", content=b64(PNG_BYTES)),
        ImageDescriptor(path="/rfd/0123/figures/nested/flow.svg", content=b64(SVG_BYTES)),
    ]


@pytest.fixture
def mock_vcs_provider(sample_images, sample_location, asciidoc_text):
    provider = MagicMock(spec=VCSProvider)
    provider.locate = AsyncMock(return_value=sample_location)
    provider.get_readme = AsyncMock(
        return_value=RfdReadme(
            path="rfd/0123/README.adoc",
            format="asciidoc",
            content=b64(asciidoc_text.encode()),
        )
    )
    provider.list_images = AsyncMock(return_value=sample_images)
    return provider


class FakeConverter:
    """PdfConverter double that records what the workspace held when called."""

    def __init__(self, result: bytes = PDF_BYTES, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[RfdAsciidoc, Path]] = []
        self.seen_files: list[str] = []

    async def convert(self, content: RfdAsciidoc, content_dir: Path) -> bytes:
        self.calls.append((content, content_dir))
        self.seen_files = sorted(
            p.relative_to(content_dir).as_posix() for p in content_dir.rglob("*") if p.is_file()
        )
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_converter():
    return FakeConverter()


@pytest.fixture
def workspace_root(tmp_path):
    return tmp_path / "rfd-render"


@pytest.fixture
def sample_config():
    return RfdProcessorConfig()


@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def svg_bytes():
    return SVG_BYTES


@pytest.fixture
def pdf_bytes():
    return PDF_BYTES


@pytest.fixture
def converter_factory():
    """Build FakeConverter instances with a custom result or error."""
    return FakeConverter
