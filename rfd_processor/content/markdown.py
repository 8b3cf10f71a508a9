"""Markdown RFD documents."""

from __future__ import annotations

import re
from functools import lru_cache

from rfd_processor.content.attributes import (
    insert_line_after,
    replace_line,
    single_line,
    split_at,
    strip_rfd_prefix,
)

_TITLE = re.compile(r"^#[ \t]+(?P<title>\S.*?)[ \t]*$", re.MULTILINE)
_FRONT_MATTER_OPEN = "---\n"
_FRONT_MATTER_CLOSE = re.compile(r"^---[ \t]*$", re.MULTILINE)


@lru_cache(maxsize=None)
def _attribute_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(name)}:[ \t]*(?P<value>.*?)[ \t]*$", re.MULTILINE)


class RfdMarkdown:
    """An RFD written in Markdown.

    Attributes are ``name: value`` lines above the title heading, usually
    inside a ``---`` delimited front matter block. Only the header is
    searched, so prose such as "state: unknown" in the body is never taken
    for an attribute.
    """

    def __init__(self, content: str) -> None:
        self._raw = content
        self.content = content

    def __repr__(self) -> str:
        return f"RfdMarkdown(title={self.get_title()!r})"

    def raw(self) -> str:
        return self._raw

    def _front_matter_end(self) -> int:
        if not self.content.startswith(_FRONT_MATTER_OPEN):
            return 0
        close = _FRONT_MATTER_CLOSE.search(self.content, len(_FRONT_MATTER_OPEN))
        return close.end() if close is not None else 0

    def _title_match(self) -> re.Match[str] | None:
        # "#" lines inside front matter are YAML comments, not headings
        return _TITLE.search(self.content, self._front_matter_end())

    def _header_end(self) -> int:
        title = self._title_match()
        return title.start() if title is not None else len(self.content)

    def header(self) -> str | None:
        return split_at(self.content, self._title_match())[0]

    def body(self) -> str | None:
        return split_at(self.content, self._title_match())[1]

    def _find_attribute(self, name: str) -> re.Match[str] | None:
        return _attribute_pattern(name).search(self.content, 0, self._header_end())

    def _get_attribute(self, name: str) -> str | None:
        match = self._find_attribute(name)
        return match.group("value") if match else None

    def _set_attribute(self, name: str, value: str) -> None:
        line = f"{name}: {single_line(value)}"
        match = self._find_attribute(name)
        if match is not None:
            self.content = replace_line(self.content, match, line)
            return

        if self.content.startswith(_FRONT_MATTER_OPEN):
            position = len(_FRONT_MATTER_OPEN) - 1
        else:
            position = -1
        self.content = insert_line_after(self.content, position, line)

    def get_title(self) -> str | None:
        match = self._title_match()
        return strip_rfd_prefix(match.group("title")) if match else None

    def get_state(self) -> str | None:
        return self._get_attribute("state")

    def update_state(self, value: str) -> None:
        self._set_attribute("state", value)

    def get_discussion(self) -> str | None:
        return self._get_attribute("discussion")

    def update_discussion(self, value: str) -> None:
        self._set_attribute("discussion", value)

    def get_authors(self) -> str | None:
        return self._get_attribute("authors")

    def get_labels(self) -> str | None:
        return self._get_attribute("labels")

    def update_labels(self, value: str) -> None:
        self._set_attribute("labels", value)
