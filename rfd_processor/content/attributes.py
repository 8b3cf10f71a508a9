"""Attribute access shared by every RFD dialect."""

from __future__ import annotations

import re
from typing import Protocol, runtime_checkable

# "RFD 123 Title", "RFD 123: Title" -> "Title"
_RFD_PREFIX = re.compile(r"^RFD[ \t]+\d+[ \t]*:?[ \t]*", re.IGNORECASE)


@runtime_checkable
class RfdAttributes(Protocol):
    """Named metadata carried in an RFD's header.

    Title and authors are read-only here; they change by editing the
    document itself.
    """

    def get_title(self) -> str | None: ...

    def get_state(self) -> str | None: ...

    def update_state(self, value: str) -> None: ...

    def get_discussion(self) -> str | None: ...

    def update_discussion(self, value: str) -> None: ...

    def get_authors(self) -> str | None: ...

    def get_labels(self) -> str | None: ...

    def update_labels(self, value: str) -> None: ...


def strip_rfd_prefix(title: str) -> str:
    return _RFD_PREFIX.sub("", title.strip(), count=1)


def split_at(content: str, match: re.Match[str] | None) -> tuple[str | None, str | None]:
    """Split content around a matched title line, dropping the line itself."""
    if match is None:
        return None, None
    body = content[match.end():]
    if body.startswith("\n"):
        body = body[1:]
    return content[: match.start()], body


def replace_line(content: str, match: re.Match[str], line: str) -> str:
    return content[: match.start()] + line + content[match.end():]


def insert_line_after(content: str, position: int, line: str) -> str:
    """Insert a full line after the line ending at ``position``."""
    if position >= len(content):
        sep = "" if content.endswith("\n") or not content else "\n"
        return f"{content}{sep}{line}\n"
    # position points at the newline terminating the preceding line
    return content[: position + 1] + line + "\n" + content[position + 1:]


def single_line(value: str) -> str:
    """Attribute values occupy exactly one line."""
    return " ".join(value.splitlines()).strip()
