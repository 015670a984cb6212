"""Tests for checkit.codec module."""

from __future__ import annotations

import pytest

from checkit.codec import decode, encode
from checkit.errors import ChecklistParseError
from checkit.task import Task


class TestDecode:
    """Tests for decode function."""

    def test_sample(self) -> None:
        """Test decoding a simple checklist."""
        tasks = decode("[x] Buy milk\n[ ] Walk dog\n[ ] Write report\n")
        assert tasks == [
            Task(True, "Buy milk"),
            Task(False, "Walk dog"),
            Task(False, "Write report"),
        ]

    def test_empty_input(self) -> None:
        """Test empty and blank files decode to no tasks."""
        assert decode("") == []
        assert decode("  \n\n  ") == []

    def test_surrounding_whitespace_trimmed(self) -> None:
        """Test leading/trailing whitespace of the file is dropped."""
        tasks = decode("\n\n[x] First\n[ ] Last   \n\n")
        assert tasks == [Task(True, "First"), Task(False, "Last")]

    def test_only_lowercase_x_is_done(self) -> None:
        """Test marker characters other than 'x' are open."""
        tasks = decode("[X] upper\n[.] dot\n[-] dash\n[x] lower")
        assert [t.completed for t in tasks] == [False, False, False, True]

    def test_content_trimmed(self) -> None:
        """Test content whitespace is trimmed."""
        assert decode("[ ]    spaced out   ") == [Task(False, "spaced out")]

    def test_empty_content(self) -> None:
        """Test a bare marker gives empty content."""
        assert decode("[x]") == [Task(True, "")]

    def test_brackets_not_checked_by_default(self) -> None:
        """Test lenient mode only reads offsets 1 and 3 onward."""
        assert decode("(x) paren") == [Task(True, "paren")]

    def test_crlf_line_endings(self) -> None:
        """Test Windows line endings are tolerated."""
        tasks = decode("[x] a\r\n[ ] b\r\n")
        assert tasks == [Task(True, "a"), Task(False, "b")]

    def test_blank_line_inside_aborts(self) -> None:
        """Test an interior blank line is a parse error."""
        with pytest.raises(ChecklistParseError) as exc_info:
            decode("[x] a\n\n[ ] b")
        assert exc_info.value.line_number == 2

    def test_short_line_aborts(self) -> None:
        """Test a line with a marker but no content offset fails."""
        with pytest.raises(ChecklistParseError) as exc_info:
            decode("[x] a\n[x")
        assert exc_info.value.line_number == 2
        assert exc_info.value.line == "[x"

    def test_single_char_line_aborts(self) -> None:
        """Test a line with no marker fails."""
        with pytest.raises(ChecklistParseError, match="missing status marker"):
            decode("[")

    def test_strict_rejects_bad_brackets(self) -> None:
        """Test strict mode validates the bracket characters."""
        with pytest.raises(ChecklistParseError, match="line 1"):
            decode("(x) paren", strict=True)

    def test_strict_accepts_valid(self) -> None:
        """Test strict mode accepts well-formed lines."""
        assert decode("[x] ok\n[ ] fine", strict=True) == [
            Task(True, "ok"),
            Task(False, "fine"),
        ]


class TestEncode:
    """Tests for encode function."""

    def test_encode(self) -> None:
        """Test each task becomes one newline-terminated line."""
        text = encode([Task(True, "Buy milk"), Task(False, "Walk dog")])
        assert text == "[x] Buy milk\n[ ] Walk dog\n"

    def test_encode_empty(self) -> None:
        """Test no tasks encode to an empty string."""
        assert encode([]) == ""

    def test_round_trip(self) -> None:
        """Test decode(encode(tasks)) gives the same tasks back."""
        tasks = [
            Task(True, "Buy milk"),
            Task(False, "[x] looks like a marker"),
            Task(False, ""),
            Task(True, "unicode ✓ ok"),
        ]
        assert decode(encode(tasks)) == tasks

    def test_scenario(self) -> None:
        """Test toggling the last task of the sample list."""
        tasks = decode("[x] Buy milk\n[ ] Walk dog\n[ ] Write report\n")
        tasks[2].select()
        assert encode(tasks) == "[x] Buy milk\n[ ] Walk dog\n[x] Write report\n"
