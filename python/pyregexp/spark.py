"""Registration of `regexp_extract` as a PySpark user-defined function.

Usage:
    from pyspark.sql import SparkSession
    from pyregexp.spark import register_regexp_extract

    spark = SparkSession.builder.remote("sc://localhost:50051").getOrCreate()
    register_regexp_extract(spark)

    spark.sql("SELECT regexp_extract('abc123', '(\\\\d+)', 1)").show()

The function runs once per row in the Python UDF worker of the server,
so `pyregexp` must be importable there as well.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pyspark.sql.functions import udf
from pyspark.sql.types import StringType

from pyregexp.engines import ENGINES, get_engine
from pyregexp.exceptions import InvalidOptionsError
from pyregexp.udf import REGEXP_EXTRACT_NAME, create_regexp_extract_udf

if TYPE_CHECKING:
    from pyspark.sql import SparkSession
    from pyspark.sql.udf import UserDefinedFunction

logger = logging.getLogger("pyregexp")

_BOOLEAN_VALUES = {"true": True, "false": False}


@dataclass
class RegexpExtractOptions:
    """Normalized & validated UDF options."""

    engine: str = "python"
    use_arrow: bool = False

    @classmethod
    def from_spark_options(cls, options: dict[str, str]) -> RegexpExtractOptions:
        """
        Convert Spark option dict → normalized options.

        Args:
            options: Dictionary of options (keys are case-insensitive)

        Returns:
            RegexpExtractOptions instance

        Raises:
            InvalidOptionsError: If an option value is invalid
        """
        norm_opts = {k.lower(): v for k, v in options.items()}

        engine = norm_opts.get("engine", "python").lower()
        if engine not in ENGINES:
            valid_engines = ", ".join(sorted(ENGINES))
            msg = f"Invalid engine: {engine}. Must be one of: {valid_engines}"
            raise InvalidOptionsError(msg)

        use_arrow = norm_opts.get("usearrow", "false").strip().lower()
        if use_arrow not in _BOOLEAN_VALUES:
            msg = f"useArrow must be 'true' or 'false', got: {norm_opts['usearrow']}"
            raise InvalidOptionsError(msg)

        return cls(engine=engine, use_arrow=_BOOLEAN_VALUES[use_arrow])


def regexp_extract_udf(options: RegexpExtractOptions | None = None) -> UserDefinedFunction:
    """
    Create the PySpark UDF for `regexp_extract(str, pattern, idx)`.

    Args:
        options: UDF options (defaults are used if not given)

    Returns:
        A deterministic UDF returning `StringType`. A row whose index is not an
        integer (e.g. a DECIMAL or STRING value) fails with `TypeError`
    """
    options = options or RegexpExtractOptions()
    scalar_udf = create_regexp_extract_udf(get_engine(options.engine))

    def regexp_extract(text, pattern, index):
        # Python UDF arguments carry no SQL types, so the declared signature is applied per row.
        return scalar_udf(*scalar_udf.coerce_args((text, pattern, index)))

    return udf(regexp_extract, returnType=StringType(), useArrow=options.use_arrow)


def register_regexp_extract(
    spark: SparkSession,
    options: RegexpExtractOptions | dict[str, str] | None = None,
) -> UserDefinedFunction:
    """
    Register `regexp_extract` in the Spark session so that SQL queries can call it.

    Args:
        spark: The Spark session
        options: UDF options, either normalized or as a Spark option dict

    Returns:
        The registered UDF, which can also be used in DataFrame expressions
    """
    if isinstance(options, dict):
        options = RegexpExtractOptions.from_spark_options(options)
    options = options or RegexpExtractOptions()

    registered = spark.udf.register(REGEXP_EXTRACT_NAME, regexp_extract_udf(options))
    logger.info(
        "Registered %s (engine=%s, useArrow=%s)",
        REGEXP_EXTRACT_NAME,
        options.engine,
        options.use_arrow,
    )
    return registered
