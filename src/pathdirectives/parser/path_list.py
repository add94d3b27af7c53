"""Tokenizer for comma-delimited path lists."""

import re
from typing import List, Tuple, cast

from pathdirectives.exceptions import EmptyPathListError, TrailingDelimiterError

# A token is every character up to the next comma or newline. It may be empty.
_TOKEN = re.compile(r"[^,\n]*")
# Optional whitespace, a comma, optional whitespace. Newlines never count as
# separator whitespace, so a path list ends with its physical line.
_SEPARATOR = re.compile(r"[^\S\n]*,[^\S\n]*")


def scan_path_list(text: str, pos: int = 0) -> Tuple[int, List[str]]:
    """Read a path list starting at ``pos`` and return the end offset and the paths.

    Errors are reported with offsets into the full ``text``, which lets the line
    grammar delegate to this function without losing track of columns.

    Args:
        text: The text being parsed.
        pos: Offset at which the path list starts.

    Returns:
        A tuple of the offset just past the last consumed token and the trimmed paths.

    Raises:
        EmptyPathListError: If the first token is empty or only whitespace.
        TrailingDelimiterError: If a separator is followed by an empty token.
    """
    pos, token = _read_token(text, pos)
    if not token.strip():
        raise EmptyPathListError(text, pos)

    paths = [token.strip()]

    while True:
        separator = _SEPARATOR.match(text, pos)
        if separator is None:
            break
        pos, token = _read_token(text, separator.end())
        if not token.strip():
            raise TrailingDelimiterError(text, text.index(",", separator.start()))
        paths.append(token.strip())

    return pos, paths


def _read_token(text: str, pos: int) -> Tuple[int, str]:
    # The token pattern accepts the empty string, so it always matches
    match = cast("re.Match[str]", _TOKEN.match(text, pos))
    return match.end(), match.group()


def parse_path_list(text: str) -> Tuple[str, List[str]]:
    """Split a comma-delimited path list into trimmed paths.

    Whitespace around commas belongs to the separator, and whitespace at either
    end of a token is trimmed, while whitespace inside a path is preserved. The
    list stops at the first newline, which is left unconsumed.

    Args:
        text: The path list, typically the remainder of a directive line.

    Returns:
        A tuple of the unconsumed remainder of ``text`` and the list of paths.

    Raises:
        EmptyPathListError: If no path precedes the first separator or end of line.
        TrailingDelimiterError: If a comma is not followed by a path.

    Example:
        >>> parse_path_list(" /etc/a  , /etc/b   ,  /etc/c ")
        ('', ['/etc/a', '/etc/b', '/etc/c'])
        >>> parse_path_list("/srv/my files,/srv/b\\nexclude /tmp")
        ('\\nexclude /tmp', ['/srv/my files', '/srv/b'])
    """
    end, paths = scan_path_list(text)
    return text[end:], paths
