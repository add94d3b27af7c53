"""Directive and Config data model.

A Directive is one parsed configuration line. A Config is the aggregate a
consumer builds by folding directives, in the order they were parsed, into
ordered include and exclude lists.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple

from pathdirectives.exceptions import ParseError
from pathdirectives.types import DirectiveKind


@dataclass(frozen=True)
class Directive:
    """An ``include`` or ``exclude`` instruction together with its paths.

    Paths are stored verbatim as they appeared between delimiters, after trimming
    surrounding whitespace. No normalization is applied, so ``/a//b`` stays
    ``/a//b``.

    Attributes:
        kind (DirectiveKind): Whether the paths are included or excluded.
        paths (Tuple[str, ...]): Ordered, non-empty sequence of paths.

    Example:
        >>> Directive.include("/etc/a", "/etc/b")
        Directive(kind=<DirectiveKind.INCLUDE: 'include'>, paths=('/etc/a', '/etc/b'))
        >>> Directive.exclude()
        Traceback (most recent call last):
            ...
        ValueError: A directive requires at least one path
    """

    kind: DirectiveKind
    paths: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", DirectiveKind(self.kind))
        if not isinstance(self.paths, tuple):
            object.__setattr__(self, "paths", tuple(self.paths))
        if not self.paths:
            raise ValueError("A directive requires at least one path")

    @classmethod
    def include(cls, *paths: str) -> "Directive":
        return cls(DirectiveKind.INCLUDE, paths)

    @classmethod
    def exclude(cls, *paths: str) -> "Directive":
        return cls(DirectiveKind.EXCLUDE, paths)

    def __str__(self) -> str:
        return f"{self.kind.value} {','.join(self.paths)}"


@dataclass
class Config:
    """Include and exclude lists accumulated from parsed directives.

    Successive include directives extend ``includes`` and successive exclude
    directives extend ``excludes``, preserving the order of both directives and
    paths. Duplicates are kept.

    Attributes:
        includes (List[str]): Included paths, in parse order.
        excludes (List[str]): Excluded paths, in parse order.
        errors (List[ParseError]): Errors for lines skipped while parsing a document.
    """

    includes: List[str] = field(default_factory=list)
    excludes: List[str] = field(default_factory=list)
    errors: List[ParseError] = field(default_factory=list)

    @classmethod
    def from_directives(cls, directives: Iterable[Directive]) -> "Config":
        """Fold a sequence of directives into a new Config.

        Example:
            >>> config = Config.from_directives(
            ...     [Directive.include("/home"), Directive.exclude("/home/.cache"), Directive.include("/etc")]
            ... )
            >>> config.includes
            ['/home', '/etc']
            >>> config.excludes
            ['/home/.cache']
        """
        config = cls()
        for directive in directives:
            config.add(directive)
        return config

    def add(self, directive: Directive) -> None:
        """Extend the list matching the directive's kind with its paths."""
        if directive.kind is DirectiveKind.INCLUDE:
            self.includes.extend(directive.paths)
        else:
            self.excludes.extend(directive.paths)

    def to_dict(self) -> Dict[str, Any]:
        return {"includes": list(self.includes), "excludes": list(self.excludes)}
