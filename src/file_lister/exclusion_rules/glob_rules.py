"""Implementation of exclusion rules using comma-separated glob patterns."""

from typing import List, Tuple

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from .base_rules import BaseExclusionRules


def _check_brackets(pattern: str) -> None:
    """Raise ValueError if a character class in the pattern is never closed.

    A "]" directly after "[" or "[!" is a literal member of the class, and a
    backslash escapes the next character.
    """
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "\\":
            i += 2
            continue
        if char == "[":
            j = i + 1
            if j < len(pattern) and pattern[j] in "!^":
                j += 1
            if j < len(pattern) and pattern[j] == "]":
                j += 1
            while j < len(pattern) and pattern[j] != "]":
                j += 1
            if j >= len(pattern):
                raise ValueError(f"Unclosed character class in pattern: {pattern!r}")
            i = j
        i += 1


class GlobExclusionRules(BaseExclusionRules):
    """Exclusion rules built from independently compiled glob patterns.

    Each pattern is compiled on its own with the pathspec library using Git's wildmatch
    syntax, and a path is excluded if ANY pattern matches it. Pattern order is irrelevant.

    Supported syntax:
    - Basic globs (*, ?, [abc], [0-9], etc.); ``*`` and ``?`` never cross a ``/``
    - Patterns without a slash match an entry name at any depth (``*.log``, ``node_modules``)
    - Patterns containing a slash are anchored at the processed root (``src/*.py``)
    - Double-asterisk matching (``docs/**/*.md``)

    Attributes:
        specs (List[PathSpec]): One compiled matcher per accepted pattern.
        patterns (List[str]): The accepted pattern strings, in the order they were added.

    Example:
        >>> rules = GlobExclusionRules()
        >>> rejected = rules.add_rules("*.log, build")
        >>> rejected
        []
        >>> rules.exclude("logs/server.log")
        True
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("src/main.py")
        False

    Note:
        The paths provided to exclude() should use forward slashes (/) as path separators
        and end with a slash when they name a directory.
    """

    def __init__(self, patterns: str = ""):
        """Initialize GlobExclusionRules from an optional comma-separated pattern list.

        Args:
            patterns: Comma-separated glob patterns. Invalid patterns are silently dropped
                here; use add_rules() to find out which patterns were rejected.
        """
        self.specs: List[PathSpec] = []
        self.patterns: List[str] = []

        if patterns:
            self.add_rules(patterns)

    def exclude(self, path: str) -> bool:
        """Check if a path matches any of the compiled patterns.

        A leading ``./`` is stripped and backslashes are normalised to forward slashes
        before matching.

        Args:
            path: The relative path to check.

        Returns:
            bool: True if at least one pattern matches, False otherwise (always False
                when no patterns are configured).

        Example:
            >>> rules = GlobExclusionRules("*.pyc")
            >>> rules.exclude("./pkg/module.pyc")
            True
            >>> rules.exclude("pkg/module.py")
            False
        """
        normalized = path.replace("\\", "/")
        while normalized.startswith("./"):
            normalized = normalized[2:]
        return any(spec.match_file(normalized) for spec in self.specs)

    def add_rule(self, rule: str) -> None:
        """Compile and add a single glob pattern.

        Surrounding whitespace is trimmed. An empty pattern is ignored.

        Args:
            rule: A single glob pattern (e.g., "*.pyc", "node_modules", "src/*.tmp").

        Raises:
            ValueError: If the pattern cannot be compiled or has an unclosed ``[``.

        Example:
            >>> rules = GlobExclusionRules()
            >>> rules.add_rule("  *.pyc ")
            >>> rules.patterns
            ['*.pyc']
            >>> rules.add_rule("")
            >>> rules.has_rules()
            True
        """
        pattern = rule.strip()
        if not pattern:
            return

        _check_brackets(pattern)

        # A leading "#" or "!" is literal in a glob, not a comment or a negation
        line = "\\" + pattern if pattern[0] in "#!" else pattern
        spec = PathSpec.from_lines(GitWildMatchPattern, [line])
        self.specs.append(spec)
        self.patterns.append(pattern)

    def add_rules(self, value: str) -> List[Tuple[str, ValueError]]:
        """Add every pattern from a comma-separated list.

        Each comma-delimited token is trimmed and compiled independently. Tokens that
        fail to compile are dropped rather than aborting the whole list.

        Args:
            value: Comma-separated glob patterns, e.g. ``"*.log, target, dist/*"``.

        Returns:
            Pairs of (pattern, error) for each token that was rejected.
        """
        rejected: List[Tuple[str, ValueError]] = []
        for token in value.split(","):
            try:
                self.add_rule(token)
            except ValueError as e:
                rejected.append((token.strip(), e))
        return rejected

    def has_rules(self) -> bool:
        """Check whether any pattern has been compiled.

        Returns:
            True if at least one pattern is configured.
        """
        return bool(self.specs)
