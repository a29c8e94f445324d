"""Table property keys and literals shared by the Phoenix bridge."""

from typing import Final

# Table properties read from the Hive table descriptor (case-sensitive).
PHOENIX_TABLE_NAME: Final[str] = "phoenix.table.name"
PHOENIX_ROWKEYS: Final[str] = "phoenix.rowkeys"
PHOENIX_COLUMN_MAPPING: Final[str] = "phoenix.column.mapping"
PHOENIX_TABLE_OPTIONS: Final[str] = "phoenix.table.options"

ZOOKEEPER_QUORUM: Final[str] = "phoenix.zookeeper.quorum"
ZOOKEEPER_PORT: Final[str] = "phoenix.zookeeper.client.port"
ZOOKEEPER_PARENT: Final[str] = "phoenix.zookeeper.znode.parent"

# Directive syntax
COMMA: Final[str] = ","
COLON: Final[str] = ":"

# Phoenix requires an explicit max length for this type.
BINARY_TYPE: Final[str] = "binary"

JDBC_URL_PREFIX: Final[str] = "jdbc:phoenix"
