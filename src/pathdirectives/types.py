from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class DirectiveKind(str, Enum):
    """Enumeration of directive kinds, named after their keyword.

    Attributes:
        INCLUDE: Paths the consumer should traverse.
        EXCLUDE: Paths the consumer should skip.
    """

    INCLUDE = "include"
    EXCLUDE = "exclude"


class ErrorAction(str, Enum):
    """Action to take when a malformed line is found while parsing a whole document.

    Values:
        IGNORE: Skip the malformed line and keep parsing, recording the error
        RAISE: Raise the ParseError immediately (default behavior)
    """

    IGNORE = "ignore"
    RAISE = "raise"
