"""Regular expression engines for regexp_extract.

Available engines:
- python: the standard library `re` module
"""

from __future__ import annotations

import logging

from pyregexp.engines.base import Matcher, MatchGroups, RegexEngine
from pyregexp.engines.python import PythonEngine
from pyregexp.exceptions import EngineNotAvailableError

logger = logging.getLogger("pyregexp")

__all__ = [
    "ENGINES",
    "MatchGroups",
    "Matcher",
    "PythonEngine",
    "RegexEngine",
    "get_engine",
]

ENGINES: dict[str, type[RegexEngine]] = {
    "python": PythonEngine,
}


def get_engine(name: str = "python") -> RegexEngine:
    """
    Get engine instance by name.

    Args:
        name: Engine name (currently only 'python')

    Returns:
        RegexEngine instance

    Raises:
        ValueError: If the engine name is unknown
        EngineNotAvailableError: If the engine cannot be used in this environment
    """
    engine_class = ENGINES.get(name.lower())
    if engine_class is None:
        valid_engines = ", ".join(sorted(ENGINES))
        message = f"Invalid engine: {name}. Must be one of: {valid_engines}"
        raise ValueError(message)

    engine = engine_class()
    if not engine.is_available():
        message = f"Regex engine '{engine.get_name()}' is not available"
        raise EngineNotAvailableError(message)

    logger.debug("Using regex engine '%s'", engine.get_name())
    return engine
