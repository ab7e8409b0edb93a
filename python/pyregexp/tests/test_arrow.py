"""Tests for per-row evaluation over Arrow data."""

import pyarrow as pa
import pytest

from pyregexp.arrow import col, evaluate_batch, evaluate_table
from pyregexp.exceptions import InternalError, InvalidPatternError
from pyregexp.udf import create_regexp_extract_udf


@pytest.fixture
def udf():
    return create_regexp_extract_udf()


class TestEvaluateBatch:
    """Test batch evaluation."""

    def test_array_with_literal_arguments(self, udf):
        """Test that literals are broadcast to every row."""
        text = pa.array(["abc123", "xyz789", "no_digits"])

        result = evaluate_batch(udf, [text, r"(\d+)", 0])

        assert result.type == pa.string()
        assert result.to_pylist() == ["123", "789", ""]

    def test_null_rows(self, udf):
        """Test that null values produce null results row by row."""
        text = pa.array(["abc123", None, "xyz789"])
        index = pa.array([1, 1, None], type=pa.int32())

        result = evaluate_batch(udf, [text, pa.scalar(r"(\d+)"), index])

        assert result.to_pylist() == ["123", None, None]

    def test_per_row_patterns(self, udf):
        """Test that every argument may vary per row."""
        result = evaluate_batch(
            udf,
            [
                pa.array(["abc123", "abc123", "abc123"]),
                pa.array([r"(a)(b)(c)", r"(\d+)", r"(x)"]),
                pa.array([2, 5, 1], type=pa.int32()),
            ],
        )

        assert result.to_pylist() == ["b", "", ""]

    def test_index_is_cast_to_int32(self, udf):
        """Test that arguments are cast to the declared input types."""
        result = evaluate_batch(udf, [pa.array(["abc123"]), r"(\d+)", pa.array([1], type=pa.int64())])

        assert result.to_pylist() == ["123"]

    def test_large_string_input(self, udf):
        """Test that large strings are accepted."""
        result = evaluate_batch(udf, [pa.array(["abc123"], type=pa.large_string()), r"(\d+)", 0])

        assert result.to_pylist() == ["123"]

    def test_all_scalar_arguments(self, udf):
        """Test that scalar-only calls produce a single row."""
        assert evaluate_batch(udf, ["abc123", r"(\d+)", 0]).to_pylist() == ["123"]
        assert evaluate_batch(udf, ["abc123", r"(\d+)", 0], num_rows=2).to_pylist() == ["123", "123"]

    def test_null_scalar_argument(self, udf):
        """Test that a null scalar makes every row null."""
        text = pa.array(["abc123", "xyz789"])

        result = evaluate_batch(udf, [text, pa.scalar(None, type=pa.string()), 0])

        assert result.to_pylist() == [None, None]

    def test_empty_batch(self, udf):
        """Test that an empty batch yields an empty result."""
        result = evaluate_batch(udf, [pa.array([], type=pa.string()), r"(\d+)", 0])

        assert len(result) == 0
        assert result.type == pa.string()

    def test_invalid_pattern(self, udf):
        """Test that pattern errors fail the batch."""
        with pytest.raises(InvalidPatternError, match="Invalid regex pattern"):
            evaluate_batch(udf, [pa.array(["abc123"]), "(", 0])

    def test_invalid_pattern_in_null_row_is_not_compiled(self, udf):
        """Test that rows with a null argument skip pattern compilation."""
        result = evaluate_batch(udf, [pa.array([None], type=pa.string()), "(", 0])

        assert result.to_pylist() == [None]

    def test_wrong_arity(self, udf):
        """Test that the argument count is checked against the signature."""
        with pytest.raises(InternalError, match="expects exactly 3 arguments, got 2"):
            evaluate_batch(udf, [pa.array(["abc123"]), r"(\d+)"])

    def test_mismatched_lengths(self, udf):
        """Test that argument arrays must have the same length."""
        with pytest.raises(InternalError, match="same length"):
            evaluate_batch(udf, [pa.array(["a", "b"]), pa.array(["(a)"]), 0])


class TestEvaluateTable:
    """Test evaluation over a table."""

    def test_select_extracted_column(self, udf):
        """Test extraction of digits from a text column."""
        schema = pa.schema([pa.field("text", pa.string(), nullable=False)])
        table = pa.table({"text": ["abc123", "xyz789", "no_digits"]}, schema=schema)

        result = evaluate_table(udf, table, [col("text"), r"(\d+)", 0], alias="extracted")

        assert result.column_names == ["text", "extracted"]
        assert result.to_pydict() == {
            "text": ["abc123", "xyz789", "no_digits"],
            "extracted": ["123", "789", ""],
        }

    def test_default_alias(self, udf):
        """Test that the result column is named after the function by default."""
        table = pa.table({"text": ["abc123"]})

        result = evaluate_table(udf, table, [col("text"), r"(\d+)", 0])

        assert result.column_names == ["text", "regexp_extract"]

    def test_literal_arguments_broadcast_to_table_rows(self, udf):
        """Test that literal-only arguments produce one value per table row."""
        table = pa.table({"id": [1, 2, 3]})

        result = evaluate_table(udf, table, ["abc123", r"(a)(b)(c)", 2], alias="b")

        assert result.column("b").to_pylist() == ["b", "b", "b"]

    def test_multi_chunk_column(self, udf):
        """Test that chunked columns are evaluated across chunks."""
        table = pa.Table.from_batches(
            [
                pa.record_batch([pa.array(["a1"])], names=["text"]),
                pa.record_batch([pa.array(["b2", "c"])], names=["text"]),
            ]
        )

        result = evaluate_table(udf, table, [col("text"), r"\d", 0], alias="digit")

        assert result.column("digit").to_pylist() == ["1", "2", ""]
