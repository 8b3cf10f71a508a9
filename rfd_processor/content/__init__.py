"""RFD content: dialect variants, render workspaces, image staging and PDF output."""

from rfd_processor.content.asciidoc import RfdAsciidoc
from rfd_processor.content.attributes import RfdAttributes
from rfd_processor.content.errors import (
    CommandError,
    ContentDecodeError,
    ContentFailureError,
    ContentIoError,
    ContentVCSError,
    FileIoError,
    FormatNotSupportedError,
    InvalidContentError,
    OutputFileError,
    OutputIoError,
    ParserFailedError,
    RfdContentError,
    RfdOutputError,
    TaskFailureError,
)
from rfd_processor.content.images import stage_images
from rfd_processor.content.markdown import RfdMarkdown
from rfd_processor.content.models import ContentFormat, RfdNumber, RfdPdf
from rfd_processor.content.pdf import AsciidoctorPdfConverter, PdfConverter
from rfd_processor.content.renderable import RenderableRfd, RfdContent
from rfd_processor.content.workspace import RenderWorkspace, default_workspace_root

__all__ = [
    "AsciidoctorPdfConverter",
    "CommandError",
    "ContentDecodeError",
    "ContentFailureError",
    "ContentFormat",
    "ContentIoError",
    "ContentVCSError",
    "FileIoError",
    "FormatNotSupportedError",
    "InvalidContentError",
    "OutputFileError",
    "OutputIoError",
    "ParserFailedError",
    "PdfConverter",
    "RenderWorkspace",
    "RenderableRfd",
    "RfdAsciidoc",
    "RfdAttributes",
    "RfdContent",
    "RfdContentError",
    "RfdMarkdown",
    "RfdNumber",
    "RfdOutputError",
    "RfdPdf",
    "TaskFailureError",
    "default_workspace_root",
    "stage_images",
]
