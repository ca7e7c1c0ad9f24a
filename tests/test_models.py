import sqlite3
from datetime import datetime, timezone

import pytest

from simplebank.models import Account, Entry, Transfer, create_schema


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:", isolation_level=None)
    create_schema(conn)
    yield conn
    conn.close()


def _tables(conn):
    rows = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
    return {name for (name,) in rows}


def test_create_schema_creates_tables(connection):
    assert {"accounts", "entries", "transfers"} <= _tables(connection)


def test_create_schema_is_idempotent(connection):
    before = _tables(connection)
    create_schema(connection)
    assert _tables(connection) == before


def test_schema_fills_created_at(connection):
    connection.execute(
        "INSERT INTO accounts (owner, balance, currency) VALUES ('abcdef', 10, 'USD')"
    )
    row = connection.execute("SELECT * FROM accounts").fetchone()
    account = Account(*row)
    now = datetime.now(timezone.utc)
    assert abs((now - account.created_at).total_seconds()) < 5
    assert account.owner == "abcdef"
    assert account.balance == 10


def test_schema_enforces_foreign_keys(connection):
    with pytest.raises(sqlite3.IntegrityError):
        connection.execute("INSERT INTO entries (account_id, amount) VALUES (999, 5)")


def test_text_timestamp_is_parsed_as_utc():
    account = Account(1, "abcdef", 100, "USD", "2024-01-02 03:04:05.678")
    assert account.created_at == datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)


def test_datetime_timestamp_is_kept():
    moment = datetime(2023, 6, 1, tzinfo=timezone.utc)
    entry = Entry(3, 1, -50, moment)
    transfer = Transfer(4, 1, 2, 50, moment)
    assert entry.created_at is moment
    assert transfer.created_at is moment
    assert entry.amount == -transfer.amount


def test_records_are_frozen():
    entry = Entry(1, 1, 5, "2024-01-01 00:00:00.000")
    with pytest.raises(AttributeError):
        entry.amount = 7
    assert entry.amount == 5
    assert entry.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)