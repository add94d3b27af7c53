"""Command-line argument parsing for pathdirectives.

This module defines the command-line interface for pathdirectives,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from pathdirectives import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with pathdirectives' options.
    """
    description = """
    pathdirectives: check include/exclude path configuration files.

    A configuration file holds one directive per line. Each directive is the
    keyword 'include' or 'exclude', whitespace, and one or more comma-separated
    paths. Blank lines are ignored; there are no comments.

        include /etc/passwd
        include /home/user
        exclude /home/user/.local, /home/user/.cache

    Without PATH arguments the parsed configuration is printed. With PATH
    arguments each path is reported as included or excluded.
    """

    epilog = """
    Examples:
      # Print the parsed include and exclude lists
      pathdirectives backup.conf

      # Print them as JSON
      pathdirectives -f json backup.conf

      # Check whether paths would be traversed
      pathdirectives backup.conf /home/user/docs /home/user/.cache/pip

      # Handle malformed lines
      pathdirectives -P fail backup.conf    # Stop at the first malformed line (default)
      pathdirectives -P warn backup.conf    # Skip malformed lines with a warning
      pathdirectives -P ignore backup.conf  # Skip malformed lines silently

      # Display version information and exit
      pathdirectives -V
    """

    parser = argparse.ArgumentParser(
        prog="pathdirectives",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Version information
    parser.add_argument(
        "-V", "--version", action="version", version=f"pathdirectives {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "config",
        type=Path,
        help="The configuration file to parse.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Paths to check against the configuration.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "-P",
        "--parse-error-action",
        choices=["ignore", "warn", "fail"],
        default="fail",
        help="How to handle malformed lines (default: fail).",
    )

    return parser
