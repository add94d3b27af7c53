"""Recognizers for ``include`` and ``exclude`` directive lines.

Each recognizer matches its keyword at the start of the text, requires a run of
at least one whitespace character, and hands the rest to the path-list
tokenizer. Any failure aborts the whole recognizer.
"""

import re
from typing import Tuple

from pathdirectives.directive import Directive
from pathdirectives.exceptions import MissingSeparatorWhitespaceError, UnrecognizedKeywordError
from pathdirectives.parser.path_list import scan_path_list
from pathdirectives.types import DirectiveKind

# The separator after a keyword is any whitespace, newlines included.
_KEYWORD_SEPARATOR = re.compile(r"\s+")


def scan_keyword_line(kind: DirectiveKind, text: str) -> Tuple[int, Directive]:
    """Recognize a directive line of the given kind.

    Args:
        kind: The directive kind whose keyword must start ``text``.
        text: The text being parsed.

    Returns:
        A tuple of the offset just past the consumed input and the parsed directive.

    Raises:
        UnrecognizedKeywordError: If ``text`` does not start with the keyword.
        MissingSeparatorWhitespaceError: If the keyword is not followed by whitespace.
        EmptyPathListError: If no path follows the keyword.
        TrailingDelimiterError: If a comma is not followed by a path.
    """
    keyword = kind.value
    if not text.startswith(keyword):
        raise UnrecognizedKeywordError(text, 0, f"expected '{keyword}'")

    separator = _KEYWORD_SEPARATOR.match(text, len(keyword))
    if separator is None:
        raise MissingSeparatorWhitespaceError(text, len(keyword), f"expected whitespace after '{keyword}'")

    end, paths = scan_path_list(text, separator.end())
    return end, Directive(kind, tuple(paths))


def parse_include_line(text: str) -> Tuple[str, Directive]:
    """Parse an ``include`` directive, returning the remainder and the directive.

    Example:
        >>> parse_include_line("include\\t/etc/a,/etc/b")
        ('', Directive(kind=<DirectiveKind.INCLUDE: 'include'>, paths=('/etc/a', '/etc/b')))
    """
    end, directive = scan_keyword_line(DirectiveKind.INCLUDE, text)
    return text[end:], directive


def parse_exclude_line(text: str) -> Tuple[str, Directive]:
    """Parse an ``exclude`` directive, returning the remainder and the directive."""
    end, directive = scan_keyword_line(DirectiveKind.EXCLUDE, text)
    return text[end:], directive
