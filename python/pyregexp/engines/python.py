"""Regex engine backed by the standard library `re` module."""

from __future__ import annotations

import re

from pyregexp.engines.base import Matcher, MatchGroups, RegexEngine
from pyregexp.exceptions import InvalidPatternError


class PythonMatchGroups(MatchGroups):
    def __init__(self, match: re.Match[str], group_count: int) -> None:
        self._match = match
        self._group_count = group_count

    def group(self, index: int) -> str | None:
        # `re.Match.group()` raises `IndexError` for groups the pattern does not define.
        if index < 0 or index > self._group_count:
            return None
        return self._match.group(index)


class PythonMatcher(Matcher):
    def __init__(self, pattern: re.Pattern[str]) -> None:
        self._pattern = pattern

    @property
    def group_count(self) -> int:
        return self._pattern.groups

    def first_match(self, text: str) -> MatchGroups | None:
        match = self._pattern.search(text)
        if match is None:
            return None
        return PythonMatchGroups(match, self.group_count)


class PythonEngine(RegexEngine):
    """Engine using Python's backtracking `re` module.

    Named groups such as ``(?P<num>\\d+)`` are numbered together with
    unnamed groups in the order their opening parentheses appear.
    """

    def compile(self, pattern: str) -> Matcher:
        try:
            compiled = re.compile(pattern)
        except re.error as err:
            message = f"Invalid regex pattern: {err}"
            raise InvalidPatternError(message, pattern=pattern) from err
        return PythonMatcher(compiled)

    def get_name(self) -> str:
        return "python"

    def is_available(self) -> bool:
        return True
