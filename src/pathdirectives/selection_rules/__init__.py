"""Path selection rules for consumers of parsed directives."""

from .base_rules import BaseExclusionRules
from .directive_rules import DirectiveExclusionRules

__all__ = [
    "BaseExclusionRules",
    "DirectiveExclusionRules",
]
