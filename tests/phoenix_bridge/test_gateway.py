import pytest

from src.phoenix_bridge.gateway import build_delete_statement


class PrimaryKeyGateway:
    def __init__(self, columns):
        self.columns = columns
        self.calls = []

    def get_primary_key_columns(self, connection, table_name):
        self.calls.append((connection, table_name))
        return self.columns


def test_delete_statement_uses_live_primary_key_order():
    gateway = PrimaryKeyGateway(("R2", "R1"))

    statement = build_delete_statement(gateway, "conn", "ORDERS")

    assert statement == "delete from ORDERS where R2 = ? and R1 = ?"
    assert gateway.calls == [("conn", "ORDERS")]


def test_delete_statement_without_primary_key_raises():
    with pytest.raises(ValueError):
        build_delete_statement(PrimaryKeyGateway([]), "conn", "ORDERS")
