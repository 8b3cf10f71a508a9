"""Error taxonomy for content preparation and output production.

Two layers:

* ``RfdContentError`` covers everything that can go wrong while getting an
  RFD ready for output: fetching from source control, decoding files,
  writing into the render workspace.
* ``RfdOutputError`` covers producing an output artifact. Any content error
  surfaces here as exactly one ``ContentFailureError`` wrapping it.

Every error carries a ``retryable`` flag so hosts can tell transient
failures (GitHub rate limits, network) from permanent ones (corrupt input,
unsupported format).
"""

from __future__ import annotations

from pathlib import Path


class RfdContentError(Exception):
    """Failure while preparing RFD content for output."""

    retryable: bool = False

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause


class ContentDecodeError(RfdContentError):
    """A base64 payload could not be decoded."""


class ContentVCSError(RfdContentError):
    """Communication with source control failed."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message, cause)
        self.retryable = bool(getattr(cause, "retryable", False))


class InvalidContentError(RfdContentError):
    """Fetched bytes are not valid UTF-8 text."""


class ContentIoError(RfdContentError):
    """General I/O failure, e.g. the workspace could not be created."""


class FileIoError(RfdContentError):
    """Reading or writing a specific file failed."""

    def __init__(self, path: str | Path, message: str, cause: Exception | None = None) -> None:
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}", cause)


class ParserFailedError(RfdContentError):
    """A dialect parser did not run to completion.

    ``output`` holds whatever the parser emitted, if anything.
    """

    def __init__(self, output: str | None = None, cause: Exception | None = None) -> None:
        self.output = output
        super().__init__("Failed to parse content", cause)


class TaskFailureError(RfdContentError):
    """A background unit of work died before finishing."""


class RfdOutputError(Exception):
    """Failure while producing an output artifact."""

    retryable: bool = False

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def from_content_error(cls, error: RfdContentError) -> ContentFailureError:
        return ContentFailureError(error)


class CommandError(RfdOutputError):
    """The output generator failed to run to completion."""

    def __init__(
        self,
        message: str,
        exit_code: int | None = None,
        stderr: str = "",
        cause: Exception | None = None,
    ) -> None:
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(message, cause)


class ContentFailureError(RfdOutputError):
    """Content could not be prepared for output."""

    def __init__(self, content_error: RfdContentError) -> None:
        self.content_error = content_error
        super().__init__(f"Failed to prepare content for output: {content_error}", content_error)
        self.retryable = content_error.retryable


class OutputFileError(RfdOutputError):
    """Reading or writing an output file failed."""

    def __init__(self, path: str | Path, message: str, cause: Exception | None = None) -> None:
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}", cause)


class FormatNotSupportedError(RfdOutputError):
    """The RFD's dialect cannot be rendered to the requested output."""

    def __init__(self, format: str) -> None:
        self.format = format
        super().__init__(f"Output format is not supported for {format} content")


class OutputIoError(RfdOutputError):
    """General I/O failure while producing output."""
