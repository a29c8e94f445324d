import pyspark.sql.types as T
import pytest

from src.phoenix_bridge.types import map_type


@pytest.mark.parametrize(
    "source, expected",
    [
        ("int", "integer"),
        ("integer", "integer"),
        ("int64", "integer"),
        ("string", "varchar"),
        ("binary", "binary"),
        ("date", "date"),
        ("timestamp", "timestamp"),
        ("boolean", "boolean"),
        ("double", "double"),
        ("bigint", "bigint"),
    ],
)
def test_scalar_types(source, expected):
    assert map_type(source) == expected


def test_arrays_map_element_type_and_nest():
    assert map_type("array<string>") == "varchar[]"
    assert map_type("array<int>") == "integer[]"
    assert map_type("array<array<int>>") == "integer[][]"


def test_only_exact_string_maps_to_varchar():
    # prefix match applies to int only
    assert map_type("strings") == "strings"
    assert map_type("varchar(10)") == "varchar(10)"


@pytest.mark.parametrize("source", ["binary", "date", "timestamp", "boolean", "double", "decimal(10,2)", "unknown"])
def test_pass_through_is_idempotent(source):
    assert map_type(map_type(source)) == map_type(source)


def test_accepts_spark_data_types():
    assert map_type(T.IntegerType()) == "integer"
    assert map_type(T.StringType()) == "varchar"
    assert map_type(T.LongType()) == "bigint"
    assert map_type(T.BinaryType()) == "binary"
    assert map_type(T.ArrayType(T.ArrayType(T.IntegerType()))) == "integer[][]"


def test_surrounding_whitespace_is_ignored():
    assert map_type("  string ") == "varchar"
    assert map_type("array< int >") == "integer[]"
