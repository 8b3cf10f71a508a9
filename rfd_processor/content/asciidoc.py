"""Asciidoc RFD documents."""

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

# Document title: a single "=" followed by whitespace ("== " starts a section)
_TITLE = re.compile(r"^=[ \t]+(?P<title>\S.*?)[ \t]*$", re.MULTILINE)
_BLANK_LINE = re.compile(r"^[ \t]*$", re.MULTILINE)


@lru_cache(maxsize=None)
def _attribute_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf"^:{re.escape(name)}:[ \t]*(?P<value>.*?)[ \t]*$", re.MULTILINE)


class RfdAsciidoc:
    """An RFD written in Asciidoc.

    Header attributes are ``:name: value`` lines. Updates rewrite a working
    copy of the text; the source passed to the constructor is kept as is.
    """

    def __init__(self, content: str) -> None:
        self._raw = content
        self.content = content

    def __repr__(self) -> str:
        return f"RfdAsciidoc(title={self.get_title()!r})"

    def raw(self) -> str:
        return self._raw

    def _title_match(self) -> re.Match[str] | None:
        return _TITLE.search(self.content)

    def header(self) -> str | None:
        return split_at(self.content, self._title_match())[0]

    def body(self) -> str | None:
        return split_at(self.content, self._title_match())[1]

    def _header_end(self) -> int:
        # The document header runs through the attribute block under the
        # title and ends at the first blank line after it.
        title = self._title_match()
        start = title.end() if title is not None else 0
        blank = _BLANK_LINE.search(self.content, start)
        return blank.start() if blank is not None else len(self.content)

    def _find_attribute(self, name: str) -> re.Match[str] | None:
        return _attribute_pattern(name).search(self.content, 0, self._header_end())

    def _get_attribute(self, name: str) -> str | None:
        match = self._find_attribute(name)
        return match.group("value") if match else None

    def _set_attribute(self, name: str, value: str) -> None:
        line = f":{name}: {single_line(value)}"
        match = self._find_attribute(name)
        if match is not None:
            self.content = replace_line(self.content, match, line)
            return

        # New attributes belong in the document header, right under the title
        title = self._title_match()
        position = title.end() if title is not None else -1
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
