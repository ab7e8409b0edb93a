"""Abstract base classes for regular expression engines."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MatchGroups(ABC):
    """The capture groups of a single match."""

    @abstractmethod
    def group(self, index: int) -> str | None:
        """
        Get the text captured by a group.

        Args:
            index: Positional group index (0 is the whole match)

        Returns:
            The captured text, or None if the index is out of range
            or the group did not participate in the match
        """


class Matcher(ABC):
    """A compiled regular expression."""

    @property
    @abstractmethod
    def group_count(self) -> int:
        """Number of capture groups defined by the pattern, excluding group 0."""

    @abstractmethod
    def first_match(self, text: str) -> MatchGroups | None:
        """
        Find the leftmost match in the text.

        Args:
            text: The text to search

        Returns:
            The groups of the first match, or None if the pattern does not match
        """


class RegexEngine(ABC):
    """Abstract interface for regular expression engines."""

    @abstractmethod
    def compile(self, pattern: str) -> Matcher:
        """
        Compile a pattern.

        Args:
            pattern: Regular expression in the engine dialect

        Returns:
            Matcher instance

        Raises:
            InvalidPatternError: If the pattern does not compile
        """

    @abstractmethod
    def get_name(self) -> str:
        """
        Get engine name.

        Returns:
            Engine name (e.g., 'python')
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if engine is available.

        Returns:
            True if engine can be used
        """
