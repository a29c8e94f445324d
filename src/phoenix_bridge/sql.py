"""
SQL string builders for Phoenix DDL/DML.

Deterministic and side-effect free. Table and column names are emitted as
given: Phoenix upper-cases unquoted identifiers, which is what Hive users
expect for names declared in table properties.
"""

from __future__ import annotations

from collections.abc import Sequence

from src.phoenix_bridge.constants import COMMA


def sql_create_table(
    table_name: str,
    column_clauses: Sequence[str],
    primary_key_name: str,
    primary_key_columns: Sequence[str],
    table_options: str | None = None,
) -> str:
    """
    CREATE TABLE with one clause per line and a trailing primary key constraint.

    `table_options` (e.g. ``SALT_BUCKETS=4``) is appended verbatim after the
    closing parenthesis.
    """
    if not primary_key_columns:
        raise ValueError("Primary key requires at least one column.")

    lines = [f"  {clause}," for clause in column_clauses]
    lines.append(
        f"  constraint {primary_key_name} primary key({COMMA.join(primary_key_columns)})"
    )
    statement = f"create table {table_name} (\n" + "\n".join(lines) + "\n)\n"
    if table_options:
        statement += table_options
    return statement


def sql_drop_table(table_name: str) -> str:
    return f"drop table {table_name}"


def sql_set_disable_wal(table_name: str, disable: bool) -> str:
    """ALTER TABLE ... SET DISABLE_WAL=true|false."""
    return f"alter table {table_name} set disable_wal={str(disable).lower()}"


def sql_delete_by_primary_key(table_name: str, primary_key_columns: Sequence[str]) -> str:
    """Parameterised single-row delete: ``delete from T where a = ? and b = ?``."""
    if not primary_key_columns:
        raise ValueError(f"Cannot build a delete statement for {table_name}: no primary key.")
    predicate = " and ".join(f"{column} = ?" for column in primary_key_columns)
    return f"delete from {table_name} where {predicate}"
