"""Parsers for include/exclude directive text."""

from .dispatcher import parse_directive, parse_line
from .document import iter_directives, load_config, parse_config
from .line_grammar import parse_exclude_line, parse_include_line
from .path_list import parse_path_list

__all__ = [
    "iter_directives",
    "load_config",
    "parse_config",
    "parse_directive",
    "parse_exclude_line",
    "parse_include_line",
    "parse_line",
    "parse_path_list",
]
