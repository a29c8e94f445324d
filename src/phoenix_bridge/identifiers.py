"""
Naming helpers for Phoenix tables.

- `derive_store_table_name`: which Phoenix table a Hive table points at.
- `split_schema_and_table`: 'SCHEMA.TABLE' -> ('SCHEMA', 'TABLE'); unqualified -> ('', 'TABLE').
- `build_primary_key_name`: 'pk_<table>' constraint name.
"""

from __future__ import annotations

from src.phoenix_bridge.constants import PHOENIX_TABLE_NAME
from src.phoenix_bridge.models import TableDescriptor


def derive_store_table_name(descriptor: TableDescriptor) -> str:
    """`phoenix.table.name` when set, otherwise the Hive table name."""
    explicit = (descriptor.get_property(PHOENIX_TABLE_NAME) or "").strip()
    return explicit or descriptor.table_name


def split_schema_and_table(qualified_name: str) -> tuple[str, str]:
    """
    Split a Phoenix table name into (schema, table).

    Only the first dot separates; a name without a dot has an empty schema.
    """
    schema, separator, table = qualified_name.strip().partition(".")
    if not separator:
        return "", schema
    return schema, table


def build_primary_key_name(store_table_name: str) -> str:
    """Primary key constraint name, built from the unqualified table part."""
    _, table = split_schema_and_table(store_table_name)
    return f"pk_{table}"
