"""Exclusion rules for filtering files and directories by name."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .name_rules import NameExclusionRules
from .pattern_rules import PatternExclusionRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "NameExclusionRules",
    "PatternExclusionRules",
]
