"""Typed queries over the bank's accounts, entries and transfers."""

import sqlite3
from typing import Any, Callable, List, Sequence, TypeVar

from .models import Account, Entry, Transfer

T = TypeVar("T")

_ACCOUNT_COLUMNS = "id, owner, balance, currency, created_at"
_ENTRY_COLUMNS = "id, account_id, amount, created_at"
_TRANSFER_COLUMNS = "id, from_account_id, to_account_id, amount, created_at"


class NoRowsError(LookupError):
    """Raised when a query that returns one row finds none."""

    def __init__(self, message: str = "sql: no rows in result set"):
        super().__init__(message)


class Queries:
    """Runs the bank's queries on a database connection."""

    def __init__(self, connection: sqlite3.Connection):
        self._connection = connection

    def with_tx(self, connection: sqlite3.Connection) -> "Queries":
        """Return queries bound to another connection, typically one in a transaction."""
        return Queries(connection)

    def _one(self, sql: str, params: Sequence[Any], record: Callable[..., T]) -> T:
        row = self._connection.execute(sql, params).fetchone()
        if row is None:
            raise NoRowsError()
        return record(*row)

    def _many(self, sql: str, params: Sequence[Any], record: Callable[..., T]) -> List[T]:
        return [record(*row) for row in self._connection.execute(sql, params)]

    # accounts

    def create_account(self, owner: str, balance: int, currency: str) -> Account:
        cursor = self._connection.execute(
            "INSERT INTO accounts (owner, balance, currency) VALUES (?, ?, ?)",
            (owner, balance, currency),
        )
        return self.get_account(cursor.lastrowid)

    def get_account(self, account_id: int) -> Account:
        return self._one(
            f"SELECT {_ACCOUNT_COLUMNS} FROM accounts WHERE id = ? LIMIT 1",
            (account_id,),
            Account,
        )

    def list_accounts(self, limit: int, offset: int) -> List[Account]:
        return self._many(
            f"SELECT {_ACCOUNT_COLUMNS} FROM accounts ORDER BY id LIMIT ? OFFSET ?",
            (limit, offset),
            Account,
        )

    def update_account(self, account_id: int, balance: int) -> Account:
        cursor = self._connection.execute(
            "UPDATE accounts SET balance = ? WHERE id = ?", (balance, account_id)
        )
        if cursor.rowcount == 0:
            raise NoRowsError()
        return self.get_account(account_id)

    def delete_account(self, account_id: int) -> None:
        self._connection.execute("DELETE FROM accounts WHERE id = ?", (account_id,))

    # entries

    def create_entry(self, account_id: int, amount: int) -> Entry:
        cursor = self._connection.execute(
            "INSERT INTO entries (account_id, amount) VALUES (?, ?)",
            (account_id, amount),
        )
        return self.get_entry(cursor.lastrowid)

    def get_entry(self, entry_id: int) -> Entry:
        return self._one(
            f"SELECT {_ENTRY_COLUMNS} FROM entries WHERE id = ? LIMIT 1",
            (entry_id,),
            Entry,
        )

    def list_entries(self, account_id: int, limit: int, offset: int) -> List[Entry]:
        return self._many(
            f"SELECT {_ENTRY_COLUMNS} FROM entries WHERE account_id = ? "
            "ORDER BY id LIMIT ? OFFSET ?",
            (account_id, limit, offset),
            Entry,
        )

    # transfers

    def create_transfer(self, from_account_id: int, to_account_id: int, amount: int) -> Transfer:
        cursor = self._connection.execute(
            "INSERT INTO transfers (from_account_id, to_account_id, amount) VALUES (?, ?, ?)",
            (from_account_id, to_account_id, amount),
        )
        return self.get_transfer(cursor.lastrowid)

    def get_transfer(self, transfer_id: int) -> Transfer:
        return self._one(
            f"SELECT {_TRANSFER_COLUMNS} FROM transfers WHERE id = ? LIMIT 1",
            (transfer_id,),
            Transfer,
        )

    def list_transfers(
        self, from_account_id: int, to_account_id: int, limit: int, offset: int
    ) -> List[Transfer]:
        return self._many(
            f"SELECT {_TRANSFER_COLUMNS} FROM transfers "
            "WHERE from_account_id = ? OR to_account_id = ? "
            "ORDER BY id LIMIT ? OFFSET ?",
            (from_account_id, to_account_id, limit, offset),
            Transfer,
        )