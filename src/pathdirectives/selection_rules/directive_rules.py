"""Exclusion rules driven by include/exclude directives."""

from os import PathLike
from typing import Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from pathdirectives.directive import Config, Directive
from pathdirectives.parser.dispatcher import parse_line
from pathdirectives.parser.document import load_config
from pathdirectives.types import DirectiveKind, PathType

from .base_rules import BaseExclusionRules


def strip_current_dir(path: str) -> str:
    """Remove any leading ``./`` segments from a path.

    Example:
        >>> strip_current_dir("././build/out.o")
        'build/out.o'
    """
    while path.startswith("./"):
        path = path[2:]
    return path


def path_to_pattern(path: str) -> str:
    """Convert a configured path into an anchored .gitignore pattern.

    The pattern matches the path itself and everything beneath it. Backslashes
    and glob characters in the path are escaped, so configured paths are always
    literal. Absolute and relative paths yield the same pattern; callers keep
    them in separate specs.

    Example:
        >>> path_to_pattern("/home/user/.local")
        '/home/user/.local'
        >>> path_to_pattern("./build/")
        '/build'
        >>> path_to_pattern("/srv/[draft]*")
        '/srv/\\\\[draft\\\\]\\\\*'
    """
    stripped = strip_current_dir(path).strip("/")
    if not stripped or stripped == ".":
        return "**"
    return "/" + GitWildMatchPattern.escape(stripped.replace("\\", "\\\\"))


class DirectiveExclusionRules(BaseExclusionRules):
    """Exclusion rules built from include and exclude directives.

    A path is excluded when it lies at or beneath any excluded path. When at least
    one include directive has been added, a path is also excluded unless it lies at
    or beneath an included path. With no include directives, everything not
    explicitly excluded is kept.

    Configured paths are matched literally and by path component, using the
    pathspec library's .gitignore matching: ``/home/user`` covers
    ``/home/user/docs`` but not ``/home/username``. Paths are not resolved.
    Absolute entries (starting with ``/``) are only compared with absolute query
    paths and relative entries only with relative query paths, with leading
    ``./`` segments ignored on both sides.

    Attributes:
        include_spec (PathSpec): Compiled patterns for absolute included paths.
        exclude_spec (PathSpec): Compiled patterns for absolute excluded paths.
        relative_include_spec (PathSpec): Compiled patterns for relative included paths.
        relative_exclude_spec (PathSpec): Compiled patterns for relative excluded paths.

    Example:
        >>> from pathdirectives.parser.document import parse_config
        >>> rules = DirectiveExclusionRules(parse_config("include /home/user\\nexclude /home/user/.local\\n"))
        >>> rules.exclude("/home/user/docs/report.txt")
        False
        >>> rules.exclude("/home/user/.local/share")
        True
        >>> rules.exclude("/etc/passwd")
        True
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
    ):
        """Initialize the rules from an optional Config and optional config files.

        Args:
            config: A parsed Config whose includes and excludes are added first.
            rules_files: Path(s) to configuration files loaded after ``config``.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            ParseError: If any rules file holds a malformed line.
        """
        # Initialize with empty specs
        self.include_spec = PathSpec.from_lines(GitWildMatchPattern, [])
        self.exclude_spec = PathSpec.from_lines(GitWildMatchPattern, [])
        self.relative_include_spec = PathSpec.from_lines(GitWildMatchPattern, [])
        self.relative_exclude_spec = PathSpec.from_lines(GitWildMatchPattern, [])

        if config is not None:
            self.add_config(config)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check whether a path should be skipped.

        Args:
            path: The path to check. Use forward slashes as separators.

        Returns:
            bool: True if the path is excluded, or if includes exist and none covers it.
        """
        if path.startswith("/"):
            include_spec, exclude_spec = self.include_spec, self.exclude_spec
        else:
            include_spec, exclude_spec = self.relative_include_spec, self.relative_exclude_spec
            path = strip_current_dir(path)

        if exclude_spec.match_file(path):
            return True
        if self.include_spec.patterns or self.relative_include_spec.patterns:
            return not include_spec.match_file(path)
        return False

    def has_rules(self) -> bool:
        """Check whether any directive has been added.

        Returns:
            True if any include or exclude path is configured, False otherwise.
        """
        specs = (self.include_spec, self.exclude_spec, self.relative_include_spec, self.relative_exclude_spec)
        return any(spec.patterns for spec in specs)

    def add_directive(self, directive: Directive) -> None:
        """Add the paths of a parsed directive to the matching specs."""
        for path in directive.paths:
            if directive.kind is DirectiveKind.INCLUDE:
                spec = self.include_spec if path.startswith("/") else self.relative_include_spec
            else:
                spec = self.exclude_spec if path.startswith("/") else self.relative_exclude_spec

            # Ensure patterns is a list that supports append
            if not hasattr(spec.patterns, "append"):
                spec.patterns = list(spec.patterns)

            spec.patterns.append(GitWildMatchPattern(path_to_pattern(path)))

    def add_config(self, config: Config) -> None:
        """Add every include and exclude path of a Config."""
        if config.includes:
            self.add_directive(Directive(DirectiveKind.INCLUDE, tuple(config.includes)))
        if config.excludes:
            self.add_directive(Directive(DirectiveKind.EXCLUDE, tuple(config.excludes)))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine directives from one or more configuration files.

        Args:
            rules_files: Path(s) to configuration files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            ParseError: If any rules file holds a malformed line.
        """
        # Convert to list if it's a single path
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            self.add_config(load_config(rules_file))

    def add_rule(self, rule: str) -> None:
        """Add a single directive line, e.g. ``exclude /tmp,/var/tmp``.

        Raises:
            ParseError: If the line is not a valid directive.

        Example:
            >>> rules = DirectiveExclusionRules()
            >>> rules.add_rule("include /srv")
            >>> rules.exclude("/srv/www")
            False
            >>> rules.exclude("/opt")
            True
        """
        self.add_directive(parse_line(rule))
