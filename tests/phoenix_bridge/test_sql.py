import pytest

import src.phoenix_bridge.sql as sql


# ---- sql_create_table ----

def test_create_table_layout():
    statement = sql.sql_create_table(
        table_name="orders",
        column_clauses=["r1 integer not null", "c1 varchar"],
        primary_key_name="pk_orders",
        primary_key_columns=["r1"],
    )
    assert statement == (
        "create table orders (\n"
        "  r1 integer not null,\n"
        "  c1 varchar,\n"
        "  constraint pk_orders primary key(r1)\n"
        ")\n"
    )


def test_create_table_appends_options_verbatim():
    statement = sql.sql_create_table(
        "orders", ["r1 integer not null"], "pk_orders", ["r1"], "SALT_BUCKETS=4, COMPRESSION='GZ'"
    )
    assert statement.endswith(")\nSALT_BUCKETS=4, COMPRESSION='GZ'")


def test_create_table_primary_key_keeps_given_order():
    statement = sql.sql_create_table("t", ["a integer not null", "b integer not null"], "pk_t", ["b", "a"])
    assert "primary key(b,a)" in statement


def test_create_table_requires_primary_key():
    with pytest.raises(ValueError):
        sql.sql_create_table("t", ["a integer"], "pk_t", [])


# ---- drop / wal ----

def test_drop_table():
    assert sql.sql_drop_table("sales.orders") == "drop table sales.orders"


@pytest.mark.parametrize("disable, expected", [(True, "true"), (False, "false")])
def test_set_disable_wal(disable, expected):
    assert sql.sql_set_disable_wal("orders", disable) == f"alter table orders set disable_wal={expected}"


# ---- delete ----

def test_delete_by_primary_key():
    assert (
        sql.sql_delete_by_primary_key("orders", ["R1", "R2"])
        == "delete from orders where R1 = ? and R2 = ?"
    )


def test_delete_requires_primary_key():
    with pytest.raises(ValueError, match="no primary key"):
        sql.sql_delete_by_primary_key("orders", [])
