"""
Adapter: Phoenix over JDBC, through the Spark driver's JVM.

The Phoenix client jar is expected on the Spark driver classpath
(``spark.jars`` / ``spark.driver.extraClassPath``). Calls go through py4j:

    spark._jvm.java.sql.DriverManager.getConnection("jdbc:phoenix:zk:2181:/hbase")

Rules
-----
- One JDBC connection per `acquire_connection` block, closed on every exit path.
- Statements and result sets are closed as soon as they are consumed.
- Every py4j failure is re-raised as `CatalogError` (no retries).
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import closing, contextmanager
from dataclasses import dataclass
from typing import Any

from py4j.protocol import Py4JError
from pyspark.sql import SparkSession

from src import settings
from src.logger import get_logger
from src.phoenix_bridge.constants import (
    JDBC_URL_PREFIX,
    ZOOKEEPER_PARENT,
    ZOOKEEPER_PORT,
    ZOOKEEPER_QUORUM,
)
from src.phoenix_bridge.errors import CatalogError
from src.phoenix_bridge.identifiers import split_schema_and_table
from src.phoenix_bridge.models import TableDescriptor
from src.phoenix_bridge.sql import sql_drop_table, sql_set_disable_wal

LOGGER = get_logger("jdbc")

_PHOENIX_CONNECTION_CLASS = "org.apache.phoenix.jdbc.PhoenixConnection"


@dataclass(frozen=True)
class ConnectionSettings:
    """ZooKeeper coordinates of the HBase cluster Phoenix runs on."""

    quorum: str = settings.PHOENIX_ZOOKEEPER_QUORUM
    port: int = settings.PHOENIX_ZOOKEEPER_PORT
    parent: str = settings.PHOENIX_ZOOKEEPER_PARENT

    @property
    def jdbc_url(self) -> str:
        return f"{JDBC_URL_PREFIX}:{self.quorum}:{self.port}:{self.parent}"

    def for_descriptor(self, descriptor: TableDescriptor) -> ConnectionSettings:
        """Table properties override these settings, key by key."""
        port = descriptor.get_property(ZOOKEEPER_PORT)
        return ConnectionSettings(
            quorum=descriptor.get_property(ZOOKEEPER_QUORUM) or self.quorum,
            port=int(port) if port else self.port,
            parent=descriptor.get_property(ZOOKEEPER_PARENT) or self.parent,
        )


class PhoenixJdbcGateway:
    """`CatalogGateway` backed by the Phoenix JDBC driver in the Spark JVM."""

    def __init__(
        self, spark: SparkSession, connection_settings: ConnectionSettings | None = None
    ) -> None:
        self.spark = spark
        self.connection_settings = connection_settings or ConnectionSettings()

    @property
    def _jvm(self) -> Any:
        return self.spark._jvm

    # ----- connection scope -----

    @contextmanager
    def acquire_connection(self, descriptor: TableDescriptor) -> Iterator[Any]:
        url = self.connection_settings.for_descriptor(descriptor).jdbc_url
        LOGGER.debug("Opening Phoenix connection %s for %s", url, descriptor.full_name)

        with _translate_errors(f"Connecting to {url}"):
            connection = self._jvm.java.sql.DriverManager.getConnection(url)
        try:
            yield connection
        finally:
            with _translate_errors(f"Closing connection to {url}"):
                if not connection.isClosed():
                    connection.close()

    # ----- metadata -----

    def table_exists(self, connection: Any, table_name: str) -> bool:
        """
        Look the table up in JDBC metadata (Phoenix stores names upper-cased).

        An unqualified name is searched with schema pattern "" (tables without a
        schema); None would match the same table name in every schema.
        """
        schema, table = split_schema_and_table(table_name.upper())
        with _translate_errors(f"Checking whether {table_name} exists"):
            metadata = connection.getMetaData()
            with closing(metadata.getTables(None, schema, table, None)) as rows:
                exists = bool(rows.next())

        LOGGER.debug("Phoenix table %s %s.", table_name, "exists" if exists else "does not exist")
        return exists

    def get_primary_key_columns(self, connection: Any, table_name: str) -> list[str]:
        """Primary key column names ordered by KEY_SEQ."""
        schema, table = split_schema_and_table(table_name.upper())
        entries: list[tuple[int, str]] = []
        with _translate_errors(f"Reading primary key of {table_name}"):
            metadata = connection.getMetaData()
            with closing(metadata.getPrimaryKeys(None, schema, table)) as rows:
                while rows.next():
                    key_sequence = int(rows.getShort("KEY_SEQ"))
                    entries.append((key_sequence, str(rows.getString("COLUMN_NAME"))))

        entries.sort(key=lambda pair: pair[0])
        columns = [name for _, name in entries]
        LOGGER.debug("Primary key of %s: %s", table_name, columns)
        return columns

    # ----- DDL -----

    def execute_ddl(self, connection: Any, statement: str) -> None:
        with _translate_errors("Executing DDL"):
            self._execute(connection, statement)

    def drop_table(self, connection: Any, table_name: str) -> None:
        with _translate_errors(f"Dropping {table_name}"):
            self._execute(connection, sql_drop_table(table_name))

    def set_write_ahead_log(self, connection: Any, table_name: str, enabled: bool) -> None:
        with _translate_errors(f"Setting DISABLE_WAL on {table_name}"):
            self._execute(connection, sql_set_disable_wal(table_name, disable=not enabled))

    def flush(self, connection: Any, table_name: str) -> None:
        """Flush the table's memstores through the HBase admin of the Phoenix connection."""
        with _translate_errors(f"Flushing {table_name}"):
            phoenix_class = self._jvm.java.lang.Class.forName(_PHOENIX_CONNECTION_CLASS)
            query_services = connection.unwrap(phoenix_class).getQueryServices()
            with closing(query_services.getAdmin()) as admin:
                table_name_class = self._jvm.org.apache.hadoop.hbase.TableName
                hbase_table = table_name_class.valueOf(table_name.upper())
                admin.flush(hbase_table)

    @staticmethod
    def _execute(connection: Any, statement: str) -> None:
        with closing(connection.createStatement()) as jdbc_statement:
            jdbc_statement.execute(statement)


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    """Re-raise py4j/JVM failures as `CatalogError`."""
    try:
        yield
    except Py4JError as error:
        raise CatalogError.from_exception(operation, error) from error
