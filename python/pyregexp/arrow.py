"""Per-row evaluation of scalar UDFs over Arrow data."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pyarrow as pa
import pyarrow.compute as pc

from pyregexp.exceptions import InternalError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pyregexp.udf import ScalarUDF


@dataclass(frozen=True)
class Column:
    """A reference to a table column in `evaluate_table` arguments."""

    name: str


def col(name: str) -> Column:
    return Column(name)


def _batch_length(args: Sequence[Any], num_rows: int | None) -> int:
    lengths = {len(arg) for arg in args if isinstance(arg, (pa.Array, pa.ChunkedArray))}
    if num_rows is not None:
        lengths.add(num_rows)
    if not lengths:
        # All arguments are scalars, so the result is a single row.
        return 1
    if len(lengths) > 1:
        message = f"argument arrays must have the same length, got lengths {sorted(lengths)}"
        raise InternalError(message)
    return lengths.pop()


def _to_values(arg: Any, data_type: pa.DataType, length: int) -> list[Any]:
    if isinstance(arg, (pa.Array, pa.ChunkedArray)):
        if not arg.type.equals(data_type):
            arg = pc.cast(arg, data_type)
        return arg.to_pylist()
    if isinstance(arg, pa.Scalar):
        if not arg.type.equals(data_type):
            arg = arg.cast(data_type)
        value = arg.as_py()
    else:
        value = pa.scalar(arg, type=data_type).as_py()
    return list(itertools.repeat(value, length))


def evaluate_batch(udf: ScalarUDF, args: Sequence[Any], *, num_rows: int | None = None) -> pa.Array:
    """
    Evaluate a scalar UDF once per row of the argument batch.

    Args:
        udf: The function to evaluate
        args: One entry per function argument; each entry is an Arrow array
            (one value per row), an Arrow scalar, or a Python value
            (broadcast to every row)
        num_rows: Number of rows in the batch; required when every argument
            is a scalar and the batch has more than one row

    Returns:
        Array of the UDF return type, one value per row

    Raises:
        InternalError: If the argument count does not match the UDF signature
            or the argument arrays have different lengths
    """
    if len(args) != udf.arity:
        message = f"{udf.name} expects exactly {udf.arity} arguments, got {len(args)}"
        raise InternalError(message)

    length = _batch_length(args, num_rows)
    columns = [_to_values(arg, data_type, length) for arg, data_type in zip(args, udf.input_types)]
    values = [udf(*row) for row in zip(*columns)]
    return pa.array(values, type=udf.return_type)


def evaluate_table(udf: ScalarUDF, table: pa.Table, args: Sequence[Any], *, alias: str | None = None) -> pa.Table:
    """
    Append the result of a scalar UDF to a table.

    Arguments given as `Column` references read the named table column;
    all other arguments are literals broadcast to every row.

    >>> import pyarrow as pa
    >>> from pyregexp.udf import create_regexp_extract_udf
    >>> table = pa.table({"text": ["abc123", "no_digits"]})
    >>> evaluate_table(create_regexp_extract_udf(), table, [col("text"), r"(\\d+)", 0], alias="extracted").to_pydict()
    {'text': ['abc123', 'no_digits'], 'extracted': ['123', '']}
    """
    resolved = [table.column(arg.name) if isinstance(arg, Column) else arg for arg in args]
    result = evaluate_batch(udf, resolved, num_rows=table.num_rows)
    return table.append_column(alias or udf.name, result)
