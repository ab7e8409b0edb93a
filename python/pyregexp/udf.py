"""Host-independent definition of the `regexp_extract` scalar UDF."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import TYPE_CHECKING, Any

import pyarrow as pa

from pyregexp.exceptions import InternalError
from pyregexp.extract import invoke_regexp_extract

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from pyregexp.engines import RegexEngine

REGEXP_EXTRACT_NAME = "regexp_extract"


class Volatility(Enum):
    """How a function result may vary for identical arguments."""

    IMMUTABLE = "immutable"
    STABLE = "stable"
    VOLATILE = "volatile"


@dataclass(frozen=True)
class ScalarUDF:
    """A scalar function with an exact argument signature.

    The function receives the arguments of one logical row as a tuple
    and returns the value of that row.
    """

    name: str
    input_types: tuple[pa.DataType, ...]
    return_type: pa.DataType
    volatility: Volatility
    func: Callable[[tuple[Any, ...]], Any]

    @property
    def deterministic(self) -> bool:
        return self.volatility is Volatility.IMMUTABLE

    @property
    def arity(self) -> int:
        return len(self.input_types)

    def __call__(self, *args: Any) -> Any:
        return self.func(args)

    def coerce_args(self, args: Sequence[Any]) -> tuple[Any, ...]:
        """
        Convert one row of Python values to the declared input types.

        Args:
            args: One value per function argument

        Returns:
            The values after conversion through the Arrow input types

        Raises:
            InternalError: If the argument count does not match the signature
            TypeError: If a value cannot be converted to its input type
        """
        if len(args) != self.arity:
            message = f"{self.name} expects exactly {self.arity} arguments, got {len(args)}"
            raise InternalError(message)
        coerced = []
        for position, (value, data_type) in enumerate(zip(args, self.input_types), start=1):
            try:
                coerced.append(pa.scalar(value, type=data_type).as_py())
            except (TypeError, ValueError) as err:
                message = f"{self.name} argument {position} cannot be converted to {data_type}: {value!r}"
                raise TypeError(message) from err
        return tuple(coerced)


def create_regexp_extract_udf(engine: RegexEngine | None = None) -> ScalarUDF:
    """
    Create the `regexp_extract(string, string, int)` UDF.

    Args:
        engine: Regex engine used for every call (defaults to `PythonEngine`)

    Returns:
        ScalarUDF with signature (utf8, utf8, int32) -> utf8
    """
    return ScalarUDF(
        name=REGEXP_EXTRACT_NAME,
        input_types=(pa.string(), pa.string(), pa.int32()),
        return_type=pa.string(),
        volatility=Volatility.IMMUTABLE,
        func=partial(invoke_regexp_extract, engine=engine),
    )
