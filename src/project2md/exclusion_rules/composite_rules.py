"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A name is excluded if ANY of the constituent rules excludes it. This is how the
    literal names from configuration and the command line are combined with the
    optional wildcard patterns.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from project2md.exclusion_rules.name_rules import NameExclusionRules
        >>> from project2md.exclusion_rules.pattern_rules import PatternExclusionRules
        >>> composite = CompositeExclusionRules(
        ...     [NameExclusionRules(["vendor"]), PatternExclusionRules(["*.log"])]
        ... )
        >>> composite.exclude("vendor", is_dir=True)
        True
        >>> composite.exclude("server.log")
        True
        >>> composite.exclude("main.py")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, name: str, is_dir: bool = False) -> bool:
        """Check if a name is excluded by any constituent rule (short-circuits)."""
        return any(rule.exclude(name, is_dir) for rule in self.rules)

    def has_rules(self) -> bool:
        return any(rule.has_rules() for rule in self.rules)
