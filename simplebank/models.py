"""Records stored by the bank and the database schema that holds them."""

import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone

_SCHEMA = """
PRAGMA foreign_keys = ON;

CREATE TABLE IF NOT EXISTS accounts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    owner TEXT NOT NULL,
    balance INTEGER NOT NULL,
    currency TEXT NOT NULL,
    created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%d %H:%M:%f', 'now'))
);

CREATE TABLE IF NOT EXISTS entries (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    account_id INTEGER NOT NULL REFERENCES accounts (id),
    amount INTEGER NOT NULL,
    created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%d %H:%M:%f', 'now'))
);

CREATE TABLE IF NOT EXISTS transfers (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    from_account_id INTEGER NOT NULL REFERENCES accounts (id),
    to_account_id INTEGER NOT NULL REFERENCES accounts (id),
    amount INTEGER NOT NULL,
    created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%d %H:%M:%f', 'now'))
);

CREATE INDEX IF NOT EXISTS accounts_owner_idx ON accounts (owner);
CREATE INDEX IF NOT EXISTS entries_account_id_idx ON entries (account_id);
CREATE INDEX IF NOT EXISTS transfers_from_idx ON transfers (from_account_id);
CREATE INDEX IF NOT EXISTS transfers_to_idx ON transfers (to_account_id);
CREATE INDEX IF NOT EXISTS transfers_from_to_idx
    ON transfers (from_account_id, to_account_id);
"""


def _as_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class _Timestamped:
    def __post_init__(self):
        object.__setattr__(self, "created_at", _as_datetime(self.created_at))


@dataclass(frozen=True)
class Account(_Timestamped):
    """A bank account."""

    id: int
    owner: str
    balance: int
    currency: str
    created_at: datetime


@dataclass(frozen=True)
class Entry(_Timestamped):
    """A change to one account's balance; the amount can be negative or positive."""

    id: int
    account_id: int
    amount: int
    created_at: datetime


@dataclass(frozen=True)
class Transfer(_Timestamped):
    """A movement of money between two accounts; the amount must be positive."""

    id: int
    from_account_id: int
    to_account_id: int
    amount: int
    created_at: datetime


def create_schema(connection: sqlite3.Connection) -> None:
    """Create the accounts, entries and transfers tables if they are missing."""
    connection.executescript(_SCHEMA)