"""Configuration values sourced from environment variables."""

import os
from typing import Final

from src.enums import UnmatchedRowKeyPolicy

_unmatched_row_key_policy = os.getenv(key="UNMATCHED_ROW_KEY_POLICY", default="fail")


LOG_LEVEL: Final[str] = os.getenv(key="LOG_LEVEL", default="INFO")
LOGGER_NAME: Final[str] = os.getenv(key="LOGGER_NAME", default="hive-phoenix")
LOG_COLOUR_ENABLED: Final[bool] = bool(
    os.getenv(key="LOG_COLOUR_ENABLED", default="True").upper() == "TRUE"
)

PHOENIX_ZOOKEEPER_QUORUM: Final[str] = os.getenv(
    key="PHOENIX_ZOOKEEPER_QUORUM", default="localhost"
)
PHOENIX_ZOOKEEPER_PORT: Final[int] = int(os.getenv(key="PHOENIX_ZOOKEEPER_PORT", default="2181"))
PHOENIX_ZOOKEEPER_PARENT: Final[str] = os.getenv(
    key="PHOENIX_ZOOKEEPER_PARENT", default="/hbase"
)

UNMATCHED_ROW_KEY_POLICY: Final[UnmatchedRowKeyPolicy] = UnmatchedRowKeyPolicy(
    _unmatched_row_key_policy.lower()
)
REQUIRE_BINARY_LENGTH: Final[bool] = bool(
    os.getenv(key="REQUIRE_BINARY_LENGTH", default="True").upper() == "TRUE"
)
