from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    This class serves as a contract for implementing exclusion rules that determine which
    files and directories should be pruned while walking a directory. All implementations
    must provide logic for checking if a given path should be excluded. Individual rule
    addition is an optional capability that depends on the rule type.

    Example:
        >>> from file_lister.exclusion_rules.glob_rules import GlobExclusionRules
        >>> rules = GlobExclusionRules()
        >>> rules.add_rule('*.log')
        >>> rules.exclude('logs/server.log')
        True
        >>> rules.exclude('main.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded based on the configured rules.

        Args:
            path (str): The file or directory path to check, relative to the root of the
                directory being processed. Directory paths end with a forward slash.

        Returns:
            bool: True if the path should be excluded, False if it should be included.

        Example:
            >>> class TmpExclusionRules(BaseExclusionRules):
            ...     def exclude(self, path: str) -> bool:
            ...         return path.endswith('.tmp')
            >>> rules = TmpExclusionRules()
            >>> rules.exclude("build/temp.tmp")
            True
            >>> rules.exclude("main.py")
            False
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        This method may be overridden by subclasses that support programmatic rule addition.
        Rule types that don't support it use the default implementation which raises
        NotImplementedError.

        Args:
            rule (str): The exclusion rule to add. The format depends on the specific
                implementation (e.g., a glob pattern like "*.pyc").

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
