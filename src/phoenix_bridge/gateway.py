"""
Catalog gateway port.

- StoreConnection: opaque, request-scoped handle to Phoenix.
- CatalogGateway: everything the lifecycle orchestrator (and downstream writers)
  need from Phoenix. Implementations raise `CatalogError` on failure.
- build_delete_statement: primary-key delete for a live table.
"""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import AbstractContextManager
from typing import Any, Protocol

from src.phoenix_bridge.models import TableDescriptor
from src.phoenix_bridge.sql import sql_delete_by_primary_key


class StoreConnection(Protocol):
    """A live Phoenix connection; only valid inside `acquire_connection`."""

    def close(self) -> Any: ...


class CatalogGateway(Protocol):
    """Port for Phoenix catalog access."""

    def acquire_connection(
        self, descriptor: TableDescriptor
    ) -> AbstractContextManager[StoreConnection]:
        """Open a connection for `descriptor`; closed on every exit path."""
        ...

    def table_exists(self, connection: StoreConnection, table_name: str) -> bool: ...

    def execute_ddl(self, connection: StoreConnection, statement: str) -> None: ...

    def drop_table(self, connection: StoreConnection, table_name: str) -> None: ...

    def get_primary_key_columns(
        self, connection: StoreConnection, table_name: str
    ) -> Sequence[str]: ...

    def set_write_ahead_log(
        self, connection: StoreConnection, table_name: str, enabled: bool
    ) -> None: ...

    def flush(self, connection: StoreConnection, table_name: str) -> None: ...


def build_delete_statement(
    gateway: CatalogGateway, connection: StoreConnection, table_name: str
) -> str:
    """Read the live primary key and build ``delete from T where pk1 = ? and ...``."""
    primary_key_columns = list(gateway.get_primary_key_columns(connection, table_name))
    return sql_delete_by_primary_key(table_name, primary_key_columns)
