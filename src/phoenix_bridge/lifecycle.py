"""
Lifecycle orchestration for Hive tables stored in Phoenix.

The Hive metastore calls one hook per step of a create/drop transaction.
Behaviour per table kind:

    event            EXTERNAL                  MANAGED
    ---------------  ------------------------  ------------------------------------
    pre_create       Phoenix table must exist  Phoenix table must not exist; create
    rollback_create  no-op                     drop Phoenix table if it exists
    commit_create    no-op                     no-op
    pre_drop         no-op                     no-op
    rollback_drop    no-op                     no-op
    commit_drop      no-op                     drop Phoenix table if it exists

External tables are owned outside Hive: they are validated, never created or
dropped. Transactions belong to the metastore; each hook only reacts to the
event it receives. Failures propagate; nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import assert_never

from src.logger import get_logger
from src.phoenix_bridge.errors import BridgeError, CatalogError, TableExistenceError
from src.phoenix_bridge.gateway import CatalogGateway, StoreConnection
from src.phoenix_bridge.identifiers import derive_store_table_name
from src.phoenix_bridge.models import LifecycleEvent, TableDescriptor, TableKind
from src.phoenix_bridge.translator import SchemaTranslator


class LifecycleOrchestrator:
    """Drive Phoenix table creation/removal from Hive metastore events."""

    def __init__(
        self,
        gateway: CatalogGateway,
        translator: SchemaTranslator | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.gateway = gateway
        self.translator = translator or SchemaTranslator()
        self.logger = logger or get_logger("lifecycle")

    # ---------- public API ----------

    def handle(self, event: LifecycleEvent, descriptor: TableDescriptor) -> None:
        """Dispatch a single metastore event."""
        handlers: dict[LifecycleEvent, Callable[[TableDescriptor], None]] = {
            LifecycleEvent.PRE_CREATE: self.pre_create_table,
            LifecycleEvent.ROLLBACK_CREATE: self.rollback_create_table,
            LifecycleEvent.COMMIT_CREATE: self.commit_create_table,
            LifecycleEvent.PRE_DROP: self.pre_drop_table,
            LifecycleEvent.ROLLBACK_DROP: self.rollback_drop_table,
            LifecycleEvent.COMMIT_DROP: self.commit_drop_table,
        }
        self.logger.debug("%s for %s (%s)", event, descriptor.full_name, descriptor.kind)
        handlers[event](descriptor)

    def pre_create_table(self, descriptor: TableDescriptor) -> None:
        """
        Validate (EXTERNAL) or create (MANAGED) the Phoenix table.

        Raises:
            TableExistenceError: EXTERNAL table missing, or MANAGED table already present.
            SchemaError: the MANAGED table cannot be translated; nothing is executed.
            CatalogError: Phoenix failed.
        """
        table_name = derive_store_table_name(descriptor)

        with self._connection(descriptor) as connection:
            exists = self._table_exists(connection, table_name)

            match descriptor.kind:
                case TableKind.EXTERNAL:
                    if not exists:
                        raise TableExistenceError(
                            f"Phoenix table {table_name} does not exist; "
                            f"external table {descriptor.full_name} cannot point at it."
                        )
                    self.logger.info(
                        "External table %s attached to Phoenix table %s.",
                        descriptor.full_name,
                        table_name,
                    )

                case TableKind.MANAGED:
                    if exists:
                        raise TableExistenceError(
                            f"Phoenix table {table_name} already exists; "
                            f"managed table {descriptor.full_name} cannot be created."
                        )
                    statement = self.translator.build_create_statement(descriptor)
                    self._run(
                        f"Creating Phoenix table {statement.table_name}",
                        self.gateway.execute_ddl,
                        connection,
                        statement.ddl,
                    )
                    self.logger.info(
                        "Created Phoenix table %s (primary key: %s).",
                        statement.table_name,
                        ", ".join(statement.primary_key_columns),
                    )

                case _:
                    assert_never(descriptor.kind)

    def rollback_create_table(self, descriptor: TableDescriptor) -> None:
        """Undo a MANAGED pre_create by dropping the Phoenix table, if present."""
        self._drop_table_if_exists(descriptor)

    def commit_create_table(self, descriptor: TableDescriptor) -> None:
        """Nothing to do: the Phoenix table was created in pre_create."""

    def pre_drop_table(self, descriptor: TableDescriptor) -> None:
        """Nothing to do: the Phoenix table is only dropped once the drop commits."""

    def rollback_drop_table(self, descriptor: TableDescriptor) -> None:
        """Nothing to do: pre_drop made no changes."""

    def commit_drop_table(self, descriptor: TableDescriptor, delete_data: bool = True) -> None:
        """
        Drop the Phoenix table behind a MANAGED Hive table, if it exists.

        `delete_data` is accepted for parity with the metastore hook; a managed
        table's Phoenix data always goes with it.
        """
        self._drop_table_if_exists(descriptor)

    # ---------- helpers ----------

    def _drop_table_if_exists(self, descriptor: TableDescriptor) -> None:
        if descriptor.kind != TableKind.MANAGED:
            return

        table_name = derive_store_table_name(descriptor)
        with self._connection(descriptor) as connection:
            if not self._table_exists(connection, table_name):
                self.logger.info("Phoenix table %s not found; nothing to drop.", table_name)
                return
            self._run("Dropping Phoenix table", self.gateway.drop_table, connection, table_name)
            self.logger.info("Dropped Phoenix table %s.", table_name)

    @contextmanager
    def _connection(self, descriptor: TableDescriptor) -> Iterator[StoreConnection]:
        """
        Scoped gateway connection.

        Only acquiring and releasing the connection is wrapped into CatalogError;
        errors raised inside the block propagate unchanged.
        """
        body_error: BaseException | None = None
        try:
            with self.gateway.acquire_connection(descriptor) as connection:
                try:
                    yield connection
                except BaseException as error:
                    body_error = error
                    raise
        except BridgeError:
            raise
        except Exception as error:
            if error is body_error:
                raise
            raise CatalogError.from_exception(
                f"Phoenix connection for {descriptor.full_name}", error
            ) from error

    def _table_exists(self, connection: StoreConnection, table_name: str) -> bool:
        exists = self._run(
            f"Checking whether {table_name} exists",
            self.gateway.table_exists,
            connection,
            table_name,
        )
        return bool(exists)

    @staticmethod
    def _run(operation: str, call: Callable[..., object], *args: object) -> object:
        """Invoke a gateway call, wrapping non-bridge failures into CatalogError."""
        try:
            return call(*args)
        except BridgeError:
            raise
        except Exception as error:
            raise CatalogError.from_exception(operation, error) from error
