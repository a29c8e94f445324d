"""
Parsers for the string-encoded table directives.

Two table properties drive translation:

- ``phoenix.rowkeys``: ``"r1, r2(100), r3"``. Comma separated, order is the
  primary key order. A ``(length)`` suffix is required when the column maps to
  Phoenix ``binary``.
- ``phoenix.column.mapping``: ``"c1:col_one, c2:col_two(100)"``. Maps Hive
  column names to Phoenix column names. The value keeps its ``(length)`` suffix;
  the translator splits it when the column type needs it.

Malformed syntax raises `SchemaError` here, so the translator only ever sees
well-formed values.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from src.logger import get_logger
from src.phoenix_bridge.constants import COLON, COMMA
from src.phoenix_bridge.errors import SchemaError

LOGGER = get_logger("directives")

_LENGTH_SUFFIXED = re.compile(r"^(?P<name>[^()\s]+)\((?P<length>\d+)\)$")
_BARE_NAME = re.compile(r"^[^()\s]+$")


@dataclass(frozen=True, slots=True)
class RowKeyEntry:
    """One row-key column, optionally carrying a max length."""

    name: str
    length: int | None = None

    @property
    def is_length_bound(self) -> bool:
        return self.length is not None

    @property
    def text(self) -> str:
        """The entry as written in the directive, e.g. ``r2(100)``."""
        return f"{self.name}({self.length})" if self.length is not None else self.name

    def matches(self, field_name: str) -> bool:
        return self.name == field_name


@dataclass(frozen=True, slots=True)
class RowKeySpec:
    """Ordered row-key entries; the order is the primary key order."""

    entries: tuple[RowKeyEntry, ...]

    def __iter__(self) -> Iterator[RowKeyEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.entries)

    def position_of(self, entry: RowKeyEntry) -> int:
        return self.entries.index(entry)


@dataclass(frozen=True, slots=True)
class ColumnMapping:
    """Hive column name -> Phoenix column spec (possibly ``name(length)``)."""

    targets: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __len__(self) -> int:
        return len(self.targets)

    def target_for(self, field_name: str) -> str | None:
        return self.targets.get(field_name)


# ---------- parsing ----------


def split_length_suffix(text: str) -> tuple[str, int | None]:
    """
    Split ``"name(100)"`` into ``("name", 100)``; ``"name"`` gives ``("name", None)``.

    Raises:
        SchemaError: for unbalanced parentheses, a non-decimal length or an empty name.
    """
    token = text.strip()
    suffixed = _LENGTH_SUFFIXED.match(token)
    if suffixed:
        return suffixed.group("name"), int(suffixed.group("length"))
    if _BARE_NAME.match(token):
        return token, None
    raise SchemaError(f"Malformed column reference {text!r}; expected 'name' or 'name(length)'")


def parse_row_keys(spec: str) -> RowKeySpec:
    """
    Parse a ``phoenix.rowkeys`` value into a `RowKeySpec`.

    Raises:
        SchemaError: on an empty token, malformed entry or a repeated column name.
    """
    entries: list[RowKeyEntry] = []
    seen: set[str] = set()

    for token in (raw.strip() for raw in spec.split(COMMA)):
        if not token:
            raise SchemaError(f"Empty row key entry in {spec!r}")
        name, length = split_length_suffix(token)
        if name in seen:
            raise SchemaError(f"Row key column {name!r} is listed more than once in {spec!r}")
        seen.add(name)
        entries.append(RowKeyEntry(name=name, length=length))

    LOGGER.debug("Row keys: %s", [entry.text for entry in entries])
    return RowKeySpec(entries=tuple(entries))


def parse_column_mapping(spec: str | None) -> ColumnMapping:
    """
    Parse a ``phoenix.column.mapping`` value into a `ColumnMapping`.

    ``None`` is the normal case of "no mapping": Hive names are used verbatim.

    Raises:
        SchemaError: on a token without a colon, an empty side, or a repeated source column.
    """
    if spec is None:
        LOGGER.info("phoenix.column.mapping not set; using Hive column names.")
        return ColumnMapping()

    targets: dict[str, str] = {}
    for token in (raw.strip() for raw in spec.split(COMMA)):
        source, separator, target = token.partition(COLON)
        source, target = source.strip(), target.strip()
        if not separator or not source or not target:
            raise SchemaError(f"Malformed column mapping {token!r}; expected 'hive:phoenix'")
        if source in targets:
            raise SchemaError(f"Column {source!r} is mapped more than once in {spec!r}")
        targets[source] = target

    LOGGER.debug("Column mapping: %s", targets)
    return ColumnMapping(targets=MappingProxyType(targets))


def lookup_row_key(field_name: str, row_keys: RowKeySpec) -> RowKeyEntry | None:
    """Return the first row-key entry for `field_name` (bare or ``name(length)``), if any."""
    for entry in row_keys:
        if entry.matches(field_name):
            return entry
    return None
