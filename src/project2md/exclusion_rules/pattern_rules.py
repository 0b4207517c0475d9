"""Wildcard exclusion rules using .gitignore pattern syntax."""

from typing import Iterable, List, Optional

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from .base_rules import BaseExclusionRules


class PatternExclusionRules(BaseExclusionRules):
    """Exclusion rules that match entry names against gitignore-style patterns.

    This is the wildcard counterpart to NameExclusionRules. Each pattern is compiled
    with the pathspec library and tested against the base name of an entry, so
    ``*.pyc`` excludes every compiled file at any level and ``build/`` excludes every
    directory named ``build``. Directories are tested with a trailing slash so that
    directory-only patterns never match plain files.

    Since only base names are tested, patterns containing an inner slash (such as
    ``src/*.tmp``) can never match.

    Attributes:
        patterns (List[str]): The raw patterns in the order they were added.
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = PatternExclusionRules(["*.pyc", "build/", "!keep.pyc"])
        >>> rules.exclude("module.pyc")
        True
        >>> rules.exclude("keep.pyc")
        False
        >>> rules.exclude("build", is_dir=True)
        True
        >>> rules.exclude("build")
        False
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None) -> None:
        self.patterns: List[str] = []
        self.spec = PathSpec.from_lines(GitWildMatchPattern, [])
        if patterns is not None:
            self.add_rules(patterns)

    def exclude(self, name: str, is_dir: bool = False) -> bool:
        """Check a base name against the compiled patterns.

        Args:
            name: Base name of the entry.
            is_dir: Whether the entry is a directory.

        Returns:
            True if the last matching pattern excludes the name.
        """
        candidate = name + "/" if is_dir else name
        return bool(self.spec.match_file(candidate))

    def add_rules(self, rules: Iterable[str]) -> None:
        """Add gitignore-style patterns. Later patterns override earlier ones (e.g. negations)."""
        self.patterns.extend(rules)
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self.patterns)

    def has_rules(self) -> bool:
        return bool(self.patterns)
