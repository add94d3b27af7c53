"""Include/exclude path directive parsing.

This package parses the line-oriented configuration format used to tell a
backup or sync engine which filesystem paths to include and exclude.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("pathdirectives")
except PackageNotFoundError:
    __version__ = "unknown"
