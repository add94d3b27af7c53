"""Command-line interface for pathdirectives.

This module provides the command-line interface for pathdirectives, which parses
an include/exclude configuration file and either prints the result or checks
paths against it.

Exit Codes:
    0: Successful completion
    1: Malformed configuration or runtime error
    2: Command-line syntax error

Example:
    # Print the parsed configuration
    $ pathdirectives backup.conf

    # Check paths, skipping malformed lines with a warning
    $ pathdirectives -P warn backup.conf /home/user/docs
"""

import json
import sys
from typing import Sequence

from pathdirectives.cli.argparser import create_parser
from pathdirectives.directive import Config
from pathdirectives.exceptions import ParseError
from pathdirectives.parser.document import load_config
from pathdirectives.selection_rules.base_rules import BaseExclusionRules
from pathdirectives.selection_rules.directive_rules import DirectiveExclusionRules
from pathdirectives.types import ErrorAction


def format_config(config: Config, output_format: str) -> str:
    """Format the include and exclude lists of a Config.

    Args:
        config: The parsed configuration.
        output_format: Either "text" or "json".

    Returns:
        One ``include <path>`` or ``exclude <path>`` line per path for text,
        or a JSON object with ``includes`` and ``excludes`` arrays.
    """
    if output_format == "json":
        return json.dumps(config.to_dict(), indent=2)

    lines = [f"include {path}" for path in config.includes]
    lines.extend(f"exclude {path}" for path in config.excludes)
    return "\n".join(lines)


def format_selection(rules: BaseExclusionRules, paths: Sequence[str], output_format: str) -> str:
    """Report whether each path is included or excluded.

    Args:
        rules: The rules to check the paths against.
        paths: The paths to check.
        output_format: Either "text" or "json".

    Returns:
        One tab-separated ``<path>\\t<status>`` line per path for text, or a JSON
        object mapping each path to its status.
    """
    statuses = {path: "excluded" if rules.exclude(path) else "included" for path in paths}

    if output_format == "json":
        return json.dumps(statuses, indent=2)

    return "\n".join(f"{path}\t{status}" for path, status in statuses.items())


def main() -> None:
    """Main entry point for the pathdirectives command-line interface.

    Exit codes:
        0: Successful completion
        1: Malformed configuration or runtime error
        2: Command-line syntax error
    """
    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = parser.parse_args()

    # Map CLI parse error actions to internal enum
    error_action = {
        "ignore": ErrorAction.IGNORE,
        "warn": ErrorAction.IGNORE,
        "fail": ErrorAction.RAISE,
    }[args.parse_error_action]

    try:
        config = load_config(args.config, error_action)

        if args.parse_error_action == "warn":
            for error in config.errors:
                print(f"Warning: {args.config}: {str(error)}: {error.text!r}", file=sys.stderr)

        if args.paths:
            output = format_selection(DirectiveExclusionRules(config), args.paths, args.format)
        else:
            output = format_config(config, args.format)
    except ParseError as e:
        print(f"Error: {args.config}: {str(e)}: {e.text!r}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    if output:
        print(output)


if __name__ == "__main__":
    main()
