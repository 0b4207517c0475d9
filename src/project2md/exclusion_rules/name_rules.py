"""Literal-name exclusion rules."""

from typing import Iterable, List, Optional

from .base_rules import BaseExclusionRules


class NameExclusionRules(BaseExclusionRules):
    """Exclusion rules that match entry names literally.

    A name is excluded iff it is exactly equal to one of the configured names. There
    are no wildcard semantics: the rule ``*.php`` only excludes an entry that is
    literally named ``*.php``. Use PatternExclusionRules when wildcards are wanted.

    Names are deduplicated while keeping the order in which they were first added, so
    the configured list can be reported back unchanged.

    Attributes:
        names (List[str]): The configured names, in first-seen order.

    Example:
        >>> rules = NameExclusionRules(["vendor", ".git"], extra=["dist", "vendor"])
        >>> rules.names
        ['vendor', '.git', 'dist']
        >>> rules.exclude("dist")
        True
        >>> rules.exclude("*.php")
        False
    """

    def __init__(self, defaults: Iterable[str] = (), extra: Optional[Iterable[str]] = None) -> None:
        """Initialize the rules from a default list merged with caller-supplied names.

        Args:
            defaults: Names excluded by configuration.
            extra: Additional names supplied by the caller, e.g. on the command line.
        """
        self.names: List[str] = []
        self._lookup: set = set()
        self.add_rules(defaults)
        if extra is not None:
            self.add_rules(extra)

    def exclude(self, name: str, is_dir: bool = False) -> bool:
        return name in self._lookup

    def add_rules(self, rules: Iterable[str]) -> None:
        for name in rules:
            if name not in self._lookup:
                self._lookup.add(name)
                self.names.append(name)

    def has_rules(self) -> bool:
        return bool(self.names)
