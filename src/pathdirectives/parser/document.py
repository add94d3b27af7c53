"""Whole-document parsing.

These helpers split a configuration document into lines, parse each non-blank
line with :func:`parse_line`, and fold the results into a :class:`Config`.
"""

from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from pathdirectives.directive import Config, Directive
from pathdirectives.exceptions import ParseError
from pathdirectives.parser.dispatcher import parse_line
from pathdirectives.types import ErrorAction, PathType


def iter_directives(
    text: str, error_action: ErrorAction = ErrorAction.RAISE, errors: Optional[List[ParseError]] = None
) -> Iterator[Tuple[int, Directive]]:
    """Yield the directives of a document together with their line numbers.

    Lines are numbered from 1. Blank lines, including lines holding only
    whitespace, are skipped. A carriage return at the end of a line is dropped so
    CRLF documents parse like LF ones.

    Args:
        text: The full document.
        error_action: What to do with a malformed line. RAISE propagates the error,
            IGNORE skips the line.
        errors: Optional list that receives the errors of skipped lines.

    Yields:
        Tuples of (line number, directive) in document order.

    Raises:
        ParseError: Under RAISE, for the first malformed line, with ``line_number`` set.

    Example:
        >>> list(iter_directives("include /a\\n\\nexclude /a/b\\n"))  # doctest: +NORMALIZE_WHITESPACE
        [(1, Directive(kind=<DirectiveKind.INCLUDE: 'include'>, paths=('/a',))),
         (3, Directive(kind=<DirectiveKind.EXCLUDE: 'exclude'>, paths=('/a/b',)))]
    """
    for line_number, line in enumerate(text.split("\n"), start=1):
        if line.endswith("\r"):
            line = line[:-1]
        if not line.strip():
            continue

        try:
            directive = parse_line(line)
        except ParseError as e:
            e.line_number = line_number
            if error_action == ErrorAction.RAISE:
                raise
            if errors is not None:
                errors.append(e)
            continue

        yield line_number, directive


def parse_config(text: str, error_action: ErrorAction = ErrorAction.RAISE) -> Config:
    """Parse a document and fold its directives into a Config.

    Args:
        text: The full document.
        error_action: What to do with a malformed line. Under IGNORE the errors of
            skipped lines are kept in ``Config.errors``.

    Returns:
        The accumulated Config.

    Raises:
        ParseError: Under RAISE, for the first malformed line.

    Example:
        >>> config = parse_config("include /etc/passwd\\ninclude /home/user\\nexclude /home/user/.local\\n")
        >>> config.includes, config.excludes
        (['/etc/passwd', '/home/user'], ['/home/user/.local'])
    """
    errors: List[ParseError] = []
    config = Config.from_directives(directive for _, directive in iter_directives(text, error_action, errors))
    config.errors.extend(errors)
    return config


def load_config(path: PathType, error_action: ErrorAction = ErrorAction.RAISE, encoding: str = "utf-8") -> Config:
    """Read a configuration file and parse it into a Config.

    Args:
        path: Path to the configuration file.
        error_action: What to do with a malformed line.
        encoding: Text encoding of the file.

    Returns:
        The accumulated Config.

    Raises:
        FileNotFoundError: If the file does not exist.
        ParseError: Under RAISE, for the first malformed line.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding=encoding, newline="") as f:
        content = f.read()

    return parse_config(content, error_action)
