from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface a traversal engine uses to filter paths.

    Implementations decide, path by path, whether a file or directory should be
    skipped. How rules are configured is up to each implementation.

    Example:
        >>> from pathdirectives.selection_rules.directive_rules import DirectiveExclusionRules
        >>> rules = DirectiveExclusionRules()
        >>> rules.add_rule("exclude /var/cache")
        >>> rules.exclude("/var/cache/apt")
        True
        >>> rules.exclude("/var/log")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): The file or directory path to check.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass
