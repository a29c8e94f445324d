import logging
from collections.abc import Callable, Mapping, Sequence

import pytest

from src.phoenix_bridge.models import ColumnDef, TableDescriptor, TableKind


class RecordingLogger:
    """Stand-in for logging.Logger that keeps %-formatted messages per level."""

    def __init__(self) -> None:
        self.records: list[tuple[int, str]] = []

    def _log(self, level: int, msg: str, *args) -> None:
        self.records.append((level, msg % args if args else msg))

    def debug(self, msg: str, *args) -> None:
        self._log(logging.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(logging.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(logging.WARNING, msg, *args)

    def messages(self, level: int | None = None) -> list[str]:
        return [m for lvl, m in self.records if level is None or lvl == level]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def make_descriptor() -> Callable[..., TableDescriptor]:
    """Build a TableDescriptor from (name, type) pairs and table properties."""

    def _make(
        columns: Sequence[tuple[str, object]] = (("r1", "int"), ("c1", "string")),
        properties: Mapping[str, str] | None = None,
        kind: TableKind = TableKind.MANAGED,
        table_name: str = "orders",
        database_name: str = "sales",
    ) -> TableDescriptor:
        return TableDescriptor(
            table_name=table_name,
            kind=kind,
            columns=[ColumnDef(name, data_type) for name, data_type in columns],
            properties=dict(properties if properties is not None else {"phoenix.rowkeys": "r1"}),
            database_name=database_name,
        )

    return _make
