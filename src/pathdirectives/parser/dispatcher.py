"""Dispatch a directive line to the matching keyword recognizer."""

from typing import Callable, Sequence, Tuple

from pathdirectives.directive import Directive
from pathdirectives.exceptions import TrailingInputError, UnrecognizedKeywordError
from pathdirectives.parser.line_grammar import parse_exclude_line, parse_include_line

# Alternatives are tried in this order. Include first keeps results deterministic.
_ALTERNATIVES: Sequence[Callable[[str], Tuple[str, Directive]]] = (parse_include_line, parse_exclude_line)


def parse_directive(text: str) -> Tuple[str, Directive]:
    """Parse one directive from the start of ``text``.

    Each keyword recognizer is tried in turn. A recognizer that fails to match its
    keyword lets the next one try; once a keyword has matched, any later failure
    is final and is raised as is.

    Args:
        text: Text starting with a directive.

    Returns:
        A tuple of the unconsumed remainder of ``text`` and the parsed directive.

    Raises:
        ParseError: A subclass describing why ``text`` is not a directive.

    Example:
        >>> parse_directive("exclude /etc/a")
        ('', Directive(kind=<DirectiveKind.EXCLUDE: 'exclude'>, paths=('/etc/a',)))
    """
    for alternative in _ALTERNATIVES:
        try:
            return alternative(text)
        except UnrecognizedKeywordError:
            continue
    raise UnrecognizedKeywordError(text, 0)


def parse_line(line: str) -> Directive:
    """Parse a single configuration line into a directive.

    One trailing line terminator (``\\n`` or ``\\r\\n``) is tolerated. Anything left
    over after the directive is an error, so a line cannot silently carry a second
    directive.

    Args:
        line: The content of one line.

    Returns:
        The parsed directive.

    Raises:
        ParseError: If the line is not a directive.
        TrailingInputError: If input remains after the directive.

    Example:
        >>> parse_line("include /etc/passwd\\n")
        Directive(kind=<DirectiveKind.INCLUDE: 'include'>, paths=('/etc/passwd',))
    """
    if line.endswith("\r\n"):
        line = line[:-2]
    elif line.endswith("\n"):
        line = line[:-1]

    remaining, directive = parse_directive(line)
    if remaining:
        raise TrailingInputError(line, len(line) - len(remaining))
    return directive
