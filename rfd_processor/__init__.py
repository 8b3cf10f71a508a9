"""rfd-processor - parse, update and render RFD documents."""

from rfd_processor.config import RfdProcessorConfig, load_config
from rfd_processor.content import (
    AsciidoctorPdfConverter,
    ContentFormat,
    RenderableRfd,
    RenderWorkspace,
    RfdContentError,
    RfdNumber,
    RfdOutputError,
    RfdPdf,
)
from rfd_processor.vcs import GitHubProvider, LocalProvider, VCSProvider, create_provider

__version__ = "0.1.0"

__all__ = [
    "AsciidoctorPdfConverter",
    "ContentFormat",
    "GitHubProvider",
    "LocalProvider",
    "RenderWorkspace",
    "RenderableRfd",
    "RfdContentError",
    "RfdNumber",
    "RfdOutputError",
    "RfdPdf",
    "RfdProcessorConfig",
    "VCSProvider",
    "create_provider",
    "load_config",
]
