"""Tests for rfd_processor.content: value types and shared attribute helpers."""

import dataclasses

import pytest

from rfd_processor.content.attributes import (
    insert_line_after,
    single_line,
    strip_rfd_prefix,
)
from rfd_processor.content.models import ContentFormat, RfdNumber, RfdPdf


# ── RfdNumber ───────────────────────────────────────────────────────


class TestRfdNumber:
    def test_number_string_is_zero_padded(self):
        assert RfdNumber(42).as_number_string() == "0042"
        assert RfdNumber(0).as_number_string() == "0000"

    def test_number_string_wider_than_four_digits(self):
        assert RfdNumber(12345).as_number_string() == "12345"

    def test_repo_path(self):
        assert RfdNumber(7).repo_path() == "/rfd/0007"

    def test_str_is_plain_number(self):
        assert str(RfdNumber(123)) == "123"

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            RfdNumber(-1)

    def test_is_hashable_and_frozen(self):
        number = RfdNumber(5)
        assert {number, RfdNumber(5)} == {number}
        with pytest.raises(dataclasses.FrozenInstanceError):
            number.value = 6  # type: ignore[misc]


# ── RfdPdf ──────────────────────────────────────────────────────────


class TestRfdPdf:
    def test_filename(self):
        pdf = RfdPdf(contents=b"%PDF", number=RfdNumber(123))
        assert pdf.filename() == "rfd-0123.pdf"

    def test_write_to_creates_parents(self, tmp_path):
        pdf = RfdPdf(contents=b"%PDF-1.7", number=RfdNumber(1))
        dest = pdf.write_to(tmp_path / "out" / "nested" / pdf.filename())
        assert dest.read_bytes() == b"%PDF-1.7"
        assert dest.name == "rfd-0001.pdf"


# ── ContentFormat ───────────────────────────────────────────────────


class TestContentFormat:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("README.adoc", ContentFormat.asciidoc),
            ("rfd/0001/doc.asciidoc", ContentFormat.asciidoc),
            ("README.md", ContentFormat.markdown),
            ("NOTES.MARKDOWN", ContentFormat.markdown),
        ],
    )
    def test_from_path(self, path, expected):
        assert ContentFormat.from_path(path) is expected

    def test_from_path_unknown_suffix(self):
        with pytest.raises(ValueError, match="Cannot infer"):
            ContentFormat.from_path("README.txt")

    def test_value_round_trips_through_constructor(self):
        assert ContentFormat("markdown") is ContentFormat.markdown


# ── attribute helpers ───────────────────────────────────────────────


class TestStripRfdPrefix:
    def test_number_prefix(self):
        assert strip_rfd_prefix("RFD 123 Widget Storage") == "Widget Storage"

    def test_number_prefix_with_colon(self):
        assert strip_rfd_prefix("RFD 9: Things") == "Things"

    def test_case_insensitive(self):
        assert strip_rfd_prefix("rfd 1 lower") == "lower"

    def test_no_prefix_unchanged(self):
        assert strip_rfd_prefix("Widget Storage") == "Widget Storage"

    def test_rfd_word_without_number_kept(self):
        assert strip_rfd_prefix("RFD Process") == "RFD Process"


class TestSingleLine:
    def test_joins_lines(self):
        assert single_line("one\ntwo\r\nthree") == "one two three"

    def test_strips(self):
        assert single_line("  published \n") == "published"


class TestInsertLineAfter:
    def test_prepend(self):
        assert insert_line_after("body\n", -1, "first") == "first\nbody\n"

    def test_after_line(self):
        content = "a\nb\n"
        assert insert_line_after(content, 1, "x") == "a\nx\nb\n"

    def test_append_without_trailing_newline(self):
        assert insert_line_after("a", 1, "x") == "a\nx\n"

    def test_append_to_empty(self):
        assert insert_line_after("", 0, "x") == "x\n"
