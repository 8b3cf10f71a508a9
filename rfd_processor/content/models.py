"""Core value types for RFD content and rendered output."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ContentFormat(str, Enum):
    """Markup dialects an RFD can be authored in."""

    asciidoc = "asciidoc"
    markdown = "markdown"

    @classmethod
    def from_path(cls, path: str | Path) -> ContentFormat:
        """Infer the dialect from a file suffix (.adoc / .md)."""
        suffix = Path(path).suffix.lower()
        if suffix in (".adoc", ".asciidoc"):
            return cls.asciidoc
        if suffix in (".md", ".markdown"):
            return cls.markdown
        raise ValueError(f"Cannot infer RFD format from suffix {suffix!r}")


@dataclass(frozen=True)
class RfdNumber:
    """Identifying number of an RFD."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"RFD number must be non-negative, got {self.value}")

    def as_number_string(self) -> str:
        """Zero-padded form used for branch and directory names (e.g. 0042)."""
        return f"{self.value:04}"

    def repo_path(self) -> str:
        """Directory holding this RFD inside the repository."""
        return f"/rfd/{self.as_number_string()}"

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class RfdPdf:
    """A rendered PDF tagged with the RFD it was produced from."""

    contents: bytes
    number: RfdNumber

    def filename(self) -> str:
        return f"rfd-{self.number.as_number_string()}.pdf"

    def write_to(self, path: str | Path) -> Path:
        dest = Path(path)
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(self.contents)
        return dest
