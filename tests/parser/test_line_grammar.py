"""Unit tests for the include and exclude line recognizers."""

import pytest

from pathdirectives.directive import Directive
from pathdirectives.exceptions import (
    EmptyPathListError,
    MissingSeparatorWhitespaceError,
    TrailingDelimiterError,
    UnrecognizedKeywordError,
)
from pathdirectives.parser.line_grammar import parse_exclude_line, parse_include_line, scan_keyword_line
from pathdirectives.types import DirectiveKind


class TestIncludeLine:
    """Test the include recognizer."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("include /etc/path", Directive.include("/etc/path")),
            ("include\t/etc/a,/etc/b", Directive.include("/etc/a", "/etc/b")),
            ("include  \t  /etc/a , /etc/b", Directive.include("/etc/a", "/etc/b")),
            ("include /home/user/My Documents", Directive.include("/home/user/My Documents")),
        ],
    )
    def test_parses_include(self, text, expected):
        """Test valid include lines."""
        remaining, directive = parse_include_line(text)
        assert directive == expected
        assert remaining == ""

    def test_rejects_exclude_keyword(self):
        """Test that the include recognizer does not accept exclude lines."""
        with pytest.raises(UnrecognizedKeywordError):
            parse_include_line("exclude /etc/a")

    def test_keyword_is_case_sensitive(self):
        """Test that keywords must be lowercase."""
        with pytest.raises(UnrecognizedKeywordError):
            parse_include_line("Include /etc/a")


class TestExcludeLine:
    """Test the exclude recognizer."""

    def test_parses_exclude(self):
        """Test a valid exclude line."""
        remaining, directive = parse_exclude_line("exclude /etc/a")
        assert directive == Directive.exclude("/etc/a")
        assert remaining == ""

    def test_rejects_include_keyword(self):
        """Test that the exclude recognizer does not accept include lines."""
        with pytest.raises(UnrecognizedKeywordError):
            parse_exclude_line("include /etc/a")


class TestKeywordSeparator:
    """Test the whitespace required after a keyword."""

    @pytest.mark.parametrize("text", ["includeXYZ /etc/a", "includefoo /a", "include,/a", "include/etc/a"])
    def test_keyword_prefix_is_not_enough(self, text):
        """Test that a keyword must be followed by whitespace, not other characters."""
        with pytest.raises(MissingSeparatorWhitespaceError) as exc_info:
            parse_include_line(text)
        assert exc_info.value.position == len("include")

    def test_keyword_alone(self):
        """Test a keyword at the end of input."""
        with pytest.raises(MissingSeparatorWhitespaceError):
            parse_exclude_line("exclude")

    def test_newline_counts_as_keyword_separator(self):
        """Test that the keyword separator accepts any whitespace run."""
        remaining, directive = parse_include_line("include\n/etc/a")
        assert directive == Directive.include("/etc/a")
        assert remaining == ""


class TestPathListFailures:
    """Test that path-list failures abort the whole line."""

    def test_keyword_and_whitespace_only(self):
        """Test a keyword followed only by whitespace."""
        with pytest.raises(EmptyPathListError) as exc_info:
            parse_include_line("include   ")
        assert exc_info.value.position == 10

    def test_trailing_comma(self):
        """Test a line ending with a comma."""
        with pytest.raises(TrailingDelimiterError) as exc_info:
            parse_exclude_line("exclude /a,")
        assert exc_info.value.position == 10
        assert exc_info.value.text == "exclude /a,"


def test_scan_keyword_line_returns_offset():
    """Test that scanning returns the offset just past the path list."""
    end, directive = scan_keyword_line(DirectiveKind.INCLUDE, "include /a\nexclude /b")
    assert end == 10
    assert directive.kind == DirectiveKind.INCLUDE
    assert directive.paths == ("/a",)
