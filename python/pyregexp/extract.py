"""The `regexp_extract` scalar function."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pyregexp.engines import PythonEngine
from pyregexp.exceptions import InternalError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pyregexp.engines import RegexEngine

ARGUMENT_COUNT = 3


def regexp_extract(
    text: str | None,
    pattern: str | None,
    index: int | None,
    *,
    engine: RegexEngine | None = None,
) -> str | None:
    """
    Extract the text matched by a capture group of the leftmost match.

    Args:
        text: The text to search
        pattern: Regular expression to match
        index: Capture group index (0 is the whole match)
        engine: Regex engine used to compile the pattern (defaults to `PythonEngine`)

    Returns:
        None if any argument is None; the captured text if the group participated
        in the match; otherwise an empty string

    Raises:
        InvalidPatternError: If the pattern does not compile

    >>> regexp_extract("abc123", r"(\\d+)", 0)
    '123'
    >>> regexp_extract("abc", r"(\\d+)", 1)
    ''
    >>> regexp_extract(None, "(", 1) is None
    True
    """
    if text is None or pattern is None or index is None:
        return None

    matcher = (engine or PythonEngine()).compile(pattern)
    groups = matcher.first_match(text)
    if groups is None:
        return ""
    captured = groups.group(index)
    if captured is None:
        return ""
    return captured


def invoke_regexp_extract(args: Sequence[Any], *, engine: RegexEngine | None = None) -> str | None:
    """
    Call `regexp_extract` with a positional argument list from a host adapter.

    Raises:
        InternalError: If the number of arguments is not 3
        InvalidPatternError: If the pattern does not compile
    """
    if len(args) != ARGUMENT_COUNT:
        message = f"regexp_extract expects exactly {ARGUMENT_COUNT} arguments, got {len(args)}"
        raise InternalError(message)
    text, pattern, index = args
    return regexp_extract(text, pattern, index, engine=engine)
