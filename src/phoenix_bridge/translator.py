"""
Schema translator: Hive table descriptor -> Phoenix CREATE TABLE.

Flow for one table:
  1) Parse ``phoenix.rowkeys`` (required) and ``phoenix.column.mapping`` (optional).
  2) Walk the Hive columns in declared order:
       - row-key columns become ``<name> <type> not null``
       - other columns become ``<name> <type>`` using the mapped name, if any
     Phoenix ``binary`` needs a length, taken from the row-key entry or the
     mapping value (``r2(100)`` / ``c1:col(100)``).
  3) Close with ``constraint pk_<table> primary key(...)`` in row-key order and
     append ``phoenix.table.options`` verbatim.

No I/O here; the lifecycle orchestrator owns execution.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src import settings
from src.enums import UnmatchedRowKeyPolicy
from src.logger import get_logger
from src.phoenix_bridge.constants import (
    BINARY_TYPE,
    PHOENIX_COLUMN_MAPPING,
    PHOENIX_ROWKEYS,
    PHOENIX_TABLE_OPTIONS,
)
from src.phoenix_bridge.directives import (
    ColumnMapping,
    RowKeyEntry,
    RowKeySpec,
    lookup_row_key,
    parse_column_mapping,
    parse_row_keys,
    split_length_suffix,
)
from src.phoenix_bridge.errors import SchemaError
from src.phoenix_bridge.identifiers import build_primary_key_name, derive_store_table_name
from src.phoenix_bridge.models import ColumnDef, CreateTableStatement, TableDescriptor
from src.phoenix_bridge.sql import sql_create_table
from src.phoenix_bridge.types import map_type


@dataclass(frozen=True)
class TranslatorOptions:
    """
    Strictness toggles.

    unmatched_row_key_policy:
        FAIL -> a row-key entry naming no Hive column raises SchemaError.
        SKIP -> the entry is dropped from the DDL (legacy behaviour).
    require_binary_length:
        If False, a non-key binary column without a length is emitted as bare
        ``binary`` and left for Phoenix to reject.
    """

    unmatched_row_key_policy: UnmatchedRowKeyPolicy = field(
        default_factory=lambda: settings.UNMATCHED_ROW_KEY_POLICY
    )
    require_binary_length: bool = field(default_factory=lambda: settings.REQUIRE_BINARY_LENGTH)


class SchemaTranslator:
    """Build Phoenix CREATE TABLE statements from Hive table descriptors."""

    def __init__(
        self,
        options: TranslatorOptions | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.options = options or TranslatorOptions()
        self.logger = logger or get_logger("translator")

    def build_create_statement(self, descriptor: TableDescriptor) -> CreateTableStatement:
        """
        Translate `descriptor` into DDL plus its primary key columns (row-key order).

        Raises:
            SchemaError: row keys missing, malformed or unresolvable; binary column
                without a length.
        """
        table_name = derive_store_table_name(descriptor)
        row_keys = self._row_keys(descriptor)
        column_mapping = parse_column_mapping(descriptor.get_property(PHOENIX_COLUMN_MAPPING))

        column_clauses: list[str] = []
        key_columns: dict[RowKeyEntry, str] = {}

        for column in descriptor.columns:
            entry = lookup_row_key(column.name, row_keys)
            if entry is not None and entry not in key_columns:
                name, clause = self._key_column_clause(column, entry)
                key_columns[entry] = name
            else:
                clause = self._value_column_clause(column, column_mapping)
            column_clauses.append(clause)

        primary_key_columns = self._ordered_primary_key(descriptor, row_keys, key_columns)

        ddl = sql_create_table(
            table_name=table_name,
            column_clauses=column_clauses,
            primary_key_name=build_primary_key_name(table_name),
            primary_key_columns=primary_key_columns,
            table_options=descriptor.get_property(PHOENIX_TABLE_OPTIONS),
        )
        self.logger.debug("DDL for %s:\n%s", descriptor.full_name, ddl)

        return CreateTableStatement(
            table_name=table_name,
            ddl=ddl,
            primary_key_columns=primary_key_columns,
        )

    # ---------- helpers ----------

    @staticmethod
    def _row_keys(descriptor: TableDescriptor) -> RowKeySpec:
        spec = descriptor.get_property(PHOENIX_ROWKEYS)
        if spec is None or not spec.strip():
            raise SchemaError(f"{PHOENIX_ROWKEYS} is not set for table {descriptor.full_name}")
        return parse_row_keys(spec)

    @staticmethod
    def _key_column_clause(column: ColumnDef, entry: RowKeyEntry) -> tuple[str, str]:
        """Return (emitted name, clause) for a row-key column."""
        column_type = map_type(column.data_type)
        if column_type == BINARY_TYPE:
            if entry.length is None:
                raise SchemaError(
                    f"Row key {column.name!r} is binary; declare its length as "
                    f"'{column.name}(<length>)' in {PHOENIX_ROWKEYS}"
                )
            column_type = f"{BINARY_TYPE}({entry.length})"
        return entry.name, f"{entry.name} {column_type} not null"

    def _value_column_clause(self, column: ColumnDef, column_mapping: ColumnMapping) -> str:
        column_type = map_type(column.data_type)
        target = column_mapping.target_for(column.name) or column.name

        if column_type != BINARY_TYPE:
            return f"{target} {column_type}"

        name, length = split_length_suffix(target)
        if length is not None:
            return f"{name} {BINARY_TYPE}({length})"
        if self.options.require_binary_length:
            raise SchemaError(
                f"Column {column.name!r} is binary; declare its length as "
                f"'{column.name}:{name}(<length>)' in {PHOENIX_COLUMN_MAPPING}"
            )
        return f"{name} {column_type}"

    def _ordered_primary_key(
        self,
        descriptor: TableDescriptor,
        row_keys: RowKeySpec,
        key_columns: dict[RowKeyEntry, str],
    ) -> tuple[str, ...]:
        """Emitted key names in row-key order; applies the unmatched-entry policy."""
        unmatched = [entry.text for entry in row_keys if entry not in key_columns]
        if unmatched:
            if self.options.unmatched_row_key_policy is UnmatchedRowKeyPolicy.FAIL:
                raise SchemaError(
                    f"Row key(s) {unmatched} in {PHOENIX_ROWKEYS} match no column of "
                    f"{descriptor.full_name}"
                )
            self.logger.warning(
                "Skipping row key(s) %s: no such column in %s", unmatched, descriptor.full_name
            )

        ordered = tuple(
            key_columns[entry]
            for entry in sorted(key_columns, key=row_keys.position_of)
        )
        if not ordered:
            raise SchemaError(f"No primary key columns resolved for {descriptor.full_name}")
        return ordered
