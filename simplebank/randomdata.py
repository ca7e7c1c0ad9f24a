"""Random values for accounts, used by tests and fixtures."""

import random

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
CURRENCIES = ("EUR", "USD", "CAD", "RUB")


def random_int(min_value: int, max_value: int) -> int:
    """Return a random integer between min_value and max_value, inclusive."""
    return random.randint(min_value, max_value)


def random_string(n: int) -> str:
    """Return a random string of n lower-case letters."""
    return "".join(random.choice(ALPHABET) for _ in range(n))


def random_owner() -> str:
    """Return a random six-letter owner name."""
    return random_string(6)


def random_money() -> int:
    """Return a random amount of money between 0 and 1000."""
    return random_int(0, 1000)


def random_currency() -> str:
    """Return one of the supported currency codes at random."""
    return random.choice(CURRENCIES)