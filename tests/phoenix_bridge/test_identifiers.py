import pytest

from src.phoenix_bridge.identifiers import (
    build_primary_key_name,
    derive_store_table_name,
    split_schema_and_table,
)


def test_store_table_name_defaults_to_hive_table_name(make_descriptor):
    descriptor = make_descriptor(table_name="orders")
    assert derive_store_table_name(descriptor) == "orders"


def test_store_table_name_prefers_phoenix_table_name_property(make_descriptor):
    descriptor = make_descriptor(
        properties={"phoenix.rowkeys": "r1", "phoenix.table.name": " SALES.ORDERS "}
    )
    assert derive_store_table_name(descriptor) == "SALES.ORDERS"


def test_blank_phoenix_table_name_is_ignored(make_descriptor):
    descriptor = make_descriptor(properties={"phoenix.rowkeys": "r1", "phoenix.table.name": "  "})
    assert derive_store_table_name(descriptor) == "orders"


@pytest.mark.parametrize(
    "qualified, expected",
    [
        ("SALES.ORDERS", ("SALES", "ORDERS")),
        ("ORDERS", ("", "ORDERS")),
        ("a.b.c", ("a", "b.c")),
    ],
)
def test_split_schema_and_table(qualified, expected):
    assert split_schema_and_table(qualified) == expected


def test_primary_key_name_uses_unqualified_table():
    assert build_primary_key_name("orders") == "pk_orders"
    assert build_primary_key_name("sales.orders") == "pk_orders"
