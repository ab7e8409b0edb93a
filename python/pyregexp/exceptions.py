"""Custom exceptions for the regexp_extract function."""

from __future__ import annotations


class RegexpExtractError(Exception):
    """Base exception for regexp_extract errors."""


class InternalError(RegexpExtractError):
    """Raised when the caller violates the function contract (e.g. wrong argument count)."""


class InvalidPatternError(RegexpExtractError):
    """Raised when the pattern is not a valid regular expression."""

    def __init__(self, message: str, pattern: str | None = None) -> None:
        super().__init__(message)
        self.pattern = pattern


class EngineNotAvailableError(RegexpExtractError):
    """Raised when the requested regex engine cannot be used."""


class InvalidOptionsError(RegexpExtractError):
    """Raised when UDF options are invalid or inconsistent."""
