from enum import Enum
from typing import Optional


class ParseErrorKind(str, Enum):
    """Enumeration of the ways a directive line can fail to parse.

    Attributes:
        UNRECOGNIZED_KEYWORD: The line does not start with ``include`` or ``exclude``.
        MISSING_SEPARATOR_WHITESPACE: A keyword was recognized but not followed by whitespace.
        EMPTY_PATH_LIST: No path token was found where at least one is required.
        TRAILING_DELIMITER: A comma was not followed by a path token.
        TRAILING_INPUT: Unconsumed text remained after a complete single-line directive.
    """

    UNRECOGNIZED_KEYWORD = "unrecognized_keyword"
    MISSING_SEPARATOR_WHITESPACE = "missing_separator_whitespace"
    EMPTY_PATH_LIST = "empty_path_list"
    TRAILING_DELIMITER = "trailing_delimiter"
    TRAILING_INPUT = "trailing_input"


class ParseError(ValueError):
    """
    Exception raised when directive text cannot be parsed.

    Every failure aborts the parse of the line it occurred in; no partial directive
    is produced. Subclasses identify the kind of failure, and the attributes locate
    it so callers can build user-facing reports.

    Attributes:
        kind (ParseErrorKind): The kind of failure.
        text (str): The text that was being parsed.
        position (int): Zero-based offset into ``text`` at which parsing stopped.
        reason (str): Human-readable description of the failure.
        line_number (Optional[int]): One-based line number within a document, when known.

    Example:
        >>> error = EmptyPathListError("include ", 8)
        >>> str(error)
        'column 9: expected at least one path'
        >>> error.line_number = 3
        >>> str(error)
        'line 3, column 9: expected at least one path'
    """

    kind: ParseErrorKind
    default_reason = "invalid directive"

    def __init__(
        self, text: str, position: int, reason: Optional[str] = None, line_number: Optional[int] = None
    ) -> None:
        """
        Initialize the exception with the location of the failure.

        Args:
            text (str): The text that was being parsed.
            position (int): Zero-based offset into ``text`` at which parsing stopped.
            reason (str, optional): Description of the failure. Defaults to the subclass's default reason.
            line_number (int, optional): One-based line number within a document.
        """
        self.text = text
        self.position = position
        self.reason = reason if reason is not None else self.default_reason
        self.line_number = line_number
        super().__init__(self.reason)

    @property
    def column(self) -> int:
        """One-based column corresponding to ``position``."""
        return self.position + 1

    def __str__(self) -> str:
        location = f"column {self.column}"
        if self.line_number is not None:
            location = f"line {self.line_number}, {location}"
        return f"{location}: {self.reason}"


class UnrecognizedKeywordError(ParseError):
    """Raised when a line starts with neither ``include`` nor ``exclude``."""

    kind = ParseErrorKind.UNRECOGNIZED_KEYWORD
    default_reason = "expected 'include' or 'exclude'"


class MissingSeparatorWhitespaceError(ParseError):
    """Raised when a keyword is not followed by at least one whitespace character."""

    kind = ParseErrorKind.MISSING_SEPARATOR_WHITESPACE
    default_reason = "expected whitespace after keyword"


class EmptyPathListError(ParseError):
    """Raised when a path list holds no path before its first separator or end."""

    kind = ParseErrorKind.EMPTY_PATH_LIST
    default_reason = "expected at least one path"


class TrailingDelimiterError(ParseError):
    """Raised when a comma is not followed by a path token."""

    kind = ParseErrorKind.TRAILING_DELIMITER
    default_reason = "expected a path after ','"


class TrailingInputError(ParseError):
    """Raised when text remains after a directive that should span the whole line."""

    kind = ParseErrorKind.TRAILING_INPUT
    default_reason = "unexpected input after directive"
