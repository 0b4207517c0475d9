from abc import ABC, abstractmethod
from typing import Iterable


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry-name exclusion rules.

    Exclusion rules decide, one directory entry at a time, whether the entry (and
    therefore its whole subtree) is left out of the documentation. Rules only ever see
    the bare base name of an entry, never a full path, so a rule cannot exclude
    ``bootstrap/cache`` as a unit, only every entry named ``cache``.

    Example:
        >>> from project2md.exclusion_rules.name_rules import NameExclusionRules
        >>> rules = NameExclusionRules(["node_modules"])
        >>> rules.exclude("node_modules", is_dir=True)
        True
        >>> rules.exclude("src", is_dir=True)
        False
    """

    @abstractmethod
    def exclude(self, name: str, is_dir: bool = False) -> bool:
        """
        Determine if an entry with the given base name should be excluded.

        Args:
            name (str): The base name of the file or directory.
            is_dir (bool): Whether the entry is a directory. Rule types that do not
                distinguish files from directories ignore this flag.

        Returns:
            bool: True if the entry should be excluded, False if it should be listed.
        """
        pass

    def add_rules(self, rules: Iterable[str]) -> None:
        """
        Add several exclusion rules at once.

        Rule types that cannot be extended after construction (e.g. composite rules)
        use this default implementation, which raises NotImplementedError.

        Args:
            rules: The rules to add. Their format depends on the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    @abstractmethod
    def has_rules(self) -> bool:
        """
        Whether any rule is configured at all.

        Rule objects without rules exclude nothing and are left out of a run entirely.

        Returns:
            bool: True if at least one rule is configured.
        """
        pass
