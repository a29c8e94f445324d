"""Map Hive column types onto Phoenix column types."""

from __future__ import annotations

import pyspark.sql.types as T

_ARRAY_PREFIX = "array<"


def map_type(source_type: str | T.DataType) -> str:
    """
    Return the Phoenix spelling of a Hive type.

    - ``array<T>``    -> ``map_type(T) + "[]"`` (nests: ``array<array<int>>`` -> ``integer[][]``)
    - ``int*``        -> ``integer`` (prefix match: int, integer, ...)
    - ``string``      -> ``varchar``
    - anything else   -> unchanged (binary, date, timestamp, boolean, double, bigint, ...)

    Total: unknown types pass through and fail later, when Phoenix executes the DDL.
    """
    if isinstance(source_type, T.DataType):
        source_type = source_type.simpleString()

    type_name = source_type.strip()
    lowered = type_name.lower()

    if lowered.startswith(_ARRAY_PREFIX) and lowered.endswith(">"):
        element_type = type_name[len(_ARRAY_PREFIX) : -1]
        return map_type(element_type) + "[]"
    if lowered.startswith("int"):
        return "integer"
    if lowered == "string":
        return "varchar"
    return type_name
