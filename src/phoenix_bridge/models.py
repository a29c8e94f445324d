"""Domain models: Hive table descriptors, lifecycle events and translated DDL."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

import pyspark.sql.types as T

from src.phoenix_bridge.errors import SchemaError


class TableKind(StrEnum):
    """Hive table types the bridge knows how to handle."""

    EXTERNAL = "EXTERNAL_TABLE"
    MANAGED = "MANAGED_TABLE"

    @classmethod
    def from_catalog(cls, table_type: str) -> TableKind:
        """Parse a metastore table type; views and anything else are rejected."""
        try:
            return cls(str(table_type).strip().upper())
        except ValueError:
            raise SchemaError(f"Unsupported table type: {table_type!r}") from None


class LifecycleEvent(StrEnum):
    PRE_CREATE = "pre_create"
    ROLLBACK_CREATE = "rollback_create"
    COMMIT_CREATE = "commit_create"
    PRE_DROP = "pre_drop"
    ROLLBACK_DROP = "rollback_drop"
    COMMIT_DROP = "commit_drop"


@dataclass(frozen=True)
class ColumnDef:
    """
    A Hive column.

    `data_type` is either a Hive type string (``"int"``, ``"array<string>"``) or a
    Spark ``DataType``; Spark types are reported through their simple string,
    which uses the same spelling as Hive.
    """

    name: str
    data_type: str | T.DataType

    @property
    def type_name(self) -> str:
        if isinstance(self.data_type, T.DataType):
            return self.data_type.simpleString()
        return str(self.data_type)


@dataclass(frozen=True)
class TableDescriptor:
    """
    Read-only view of a Hive table as handed over by the metastore.

    `kind` may be given as the metastore's table type string; it is parsed
    with `TableKind.from_catalog`, so unsupported kinds fail here.
    """

    table_name: str
    kind: TableKind
    columns: Sequence[ColumnDef]
    properties: Mapping[str, str] = field(default_factory=dict)
    database_name: str = "default"

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", TableKind.from_catalog(self.kind))

    @property
    def full_name(self) -> str:
        """Unquoted 'database.table'."""
        return f"{self.database_name}.{self.table_name}"

    @property
    def column_names(self) -> tuple[str, ...]:
        """Column names in declared order."""
        return tuple(column.name for column in self.columns)

    def get_property(self, key: str) -> str | None:
        return self.properties.get(key)


@dataclass(frozen=True)
class CreateTableStatement:
    """A translated CREATE TABLE statement and its primary key, in key order."""

    table_name: str
    ddl: str
    primary_key_columns: tuple[str, ...]
