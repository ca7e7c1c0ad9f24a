# simplebank

A small bank ledger kept in an SQLite database through the standard library's
`sqlite3` module. It records three kinds of rows:

- **accounts**: an owner, a balance and a currency;
- **entries**: a change of an account's money, negative or positive;
- **transfers**: an amount moved from one account to another.

It has no dependencies outside the standard library.

## Setting up a database

```python
import sqlite3

from simplebank.models import create_schema

connection = sqlite3.connect("bank.db")
create_schema(connection)
```

`create_schema` creates the `accounts`, `entries` and `transfers` tables and
their indexes if they are missing, and turns on foreign-key checks for the
connection: entries and transfers must point at existing accounts, and an
account that entries or transfers point at cannot be deleted.

## Records

`simplebank.models` defines three frozen dataclasses:

- `Account(id, owner, balance, currency, created_at)`
- `Entry(id, account_id, amount, created_at)`
- `Transfer(id, from_account_id, to_account_id, amount, created_at)`

`created_at` is always a `datetime`; a timestamp string without a time zone is
read as UTC.

## Queries

`Queries` wraps a connection and offers one method per query.

```python
from simplebank.queries import NoRowsError, Queries

queries = Queries(connection)

alice = queries.create_account(owner="alice", balance=100, currency="EUR")
bob = queries.create_account(owner="bob", balance=50, currency="EUR")

same = queries.get_account(alice.id)
page = queries.list_accounts(limit=5, offset=0)
richer = queries.update_account(alice.id, balance=200)

entry = queries.create_entry(account_id=alice.id, amount=-10)
entries = queries.list_entries(account_id=alice.id, limit=5, offset=0)

transfer = queries.create_transfer(
    from_account_id=alice.id, to_account_id=bob.id, amount=10
)
transfers = queries.list_transfers(
    from_account_id=alice.id, to_account_id=alice.id, limit=5, offset=0
)

carol = queries.create_account(owner="carol", balance=0, currency="USD")
queries.delete_account(carol.id)
try:
    queries.get_account(carol.id)
except NoRowsError:
    print("carol's account is gone")

connection.commit()
```

- Lists are ordered by id and paged with `limit` and `offset`.
  `list_transfers` returns the transfers whose sender is `from_account_id` or
  whose receiver is `to_account_id`.
- `get_account`, `get_entry`, `get_transfer` and `update_account` raise
  `NoRowsError` (a `LookupError`) when no row has the given id.
- `Queries` does not commit; call `connection.commit()` when you want the
  changes kept.
- `Queries.with_tx(connection)` returns a new `Queries` bound to another
  connection.

## Transfers in one transaction

`Store` is a `Queries` with one more method, `transfer_tx`, which records a
transfer together with its two entries (the negative amount on the sending
account, the positive amount on the receiving one) in one transaction and
commits it:

```python
from simplebank.store import Store, TransactionError

store = Store(connection)
result = store.transfer_tx(from_account_id=alice.id, to_account_id=bob.id, amount=25)

print(result.transfer.amount)    # 25
print(result.from_entry.amount)  # -25
print(result.to_entry.amount)    # 25
```

Calls to `transfer_tx` on one `Store` are serialised by a lock, so the store
can be shared between threads as far as the connection allows. If any step
fails the transaction is rolled back and the error is raised again; if the
rollback itself fails, a `TransactionError` carrying both errors
(`tx_error` and `rollback_error`) is raised instead.

## What it does not do

- `transfer_tx` does not change account balances: `from_account` and
  `to_account` on `TransferTxResult` are always `None`, and the balances stay
  as they were. Use `update_account` if balances must follow the entries.
- Nothing checks that an amount is positive, that the accounts share a
  currency, or that the sender has enough money.
- There is no command-line program or server; the package is a library.

## Test data

`simplebank.randomdata` makes random values for tests and demos:
`random_int(min_value, max_value)` (inclusive on both ends),
`random_string(n)` (lower-case letters), `random_owner()` (six letters),
`random_money()` (0 to 1000) and `random_currency()` (one of EUR, USD, CAD,
RUB).