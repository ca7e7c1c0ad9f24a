"""Transactional operations over the bank's queries."""

import sqlite3
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from .models import Account, Entry, Transfer
from .queries import Queries


class TransactionError(Exception):
    """Raised when a failed transaction could not be rolled back either."""

    def __init__(self, tx_error: BaseException, rollback_error: BaseException):
        super().__init__(f"tx err: {tx_error}, rb err: {rollback_error}")
        self.tx_error = tx_error
        self.rollback_error = rollback_error


@dataclass(frozen=True, kw_only=True)
class TransferTxResult:
    """Everything a money transfer created."""

    transfer: Transfer
    from_account: Optional[Account] = None
    to_account: Optional[Account] = None
    from_entry: Entry
    to_entry: Entry


class Store(Queries):
    """Queries plus operations that run inside a database transaction."""

    def __init__(self, connection: sqlite3.Connection):
        super().__init__(connection)
        self._lock = threading.RLock()

    @contextmanager
    def _transaction(self) -> Iterator[Queries]:
        with self._lock:
            connection = self._connection
            if not connection.in_transaction:
                connection.execute("BEGIN")
            try:
                yield self.with_tx(connection)
            except Exception as exc:
                try:
                    connection.rollback()
                except Exception as rollback_error:
                    raise TransactionError(exc, rollback_error) from exc
                raise
            connection.commit()

    def transfer_tx(self, from_account_id: int, to_account_id: int, amount: int) -> TransferTxResult:
        """Record a transfer and its two entries in one transaction."""
        with self._transaction() as q:
            transfer = q.create_transfer(from_account_id, to_account_id, amount)
            from_entry = q.create_entry(from_account_id, -amount)
            to_entry = q.create_entry(to_account_id, amount)
        return TransferTxResult(transfer=transfer, from_entry=from_entry, to_entry=to_entry)