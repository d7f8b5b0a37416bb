"""The older whitespace-separated account file, without holder details."""

from __future__ import annotations

import re
from collections import deque
from typing import Callable, Iterable, TypeVar

from bankdesk.accounts import Account

LEGACY_FILE = "contas.txt"

_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

T = TypeVar("T")


def format_legacy(accounts: Iterable[Account]) -> str:
    """Return the accounts in the older file format."""
    parts = []
    for account in accounts:
        parts.append(
            f"{account.number} {account.agency} {account.balance:.6f} "
            f"{account.withdrawal_count} {account.total_withdrawn:.2f}\n"
        )
        parts.append("".join(f"{value:.2f} " for value in account.withdrawals) + "\n")
    return "".join(parts)


def _take(tokens: deque[str], pattern: re.Pattern[str], convert: Callable[[str], T]) -> T | None:
    if tokens and pattern.fullmatch(tokens[0]):
        return convert(tokens.popleft())
    return None


def parse_legacy(text: str) -> list[Account]:
    """Parse the older format into accounts, in file order.

    Parsing stops at the first incomplete header. Up to the stored count of
    withdrawals is read after each header; they are pushed front-first, so
    they come back reversed.
    """
    tokens = deque(text.split())
    accounts = []
    while tokens:
        number = _take(tokens, _INT, int)
        agency = _take(tokens, _INT, int) if number is not None else None
        balance = _take(tokens, _FLOAT, float) if agency is not None else None
        count = _take(tokens, _INT, int) if balance is not None else None
        total = _take(tokens, _FLOAT, float) if count is not None else None
        if total is None:
            break
        withdrawals: list[float] = []
        for _ in range(count):
            value = _take(tokens, _FLOAT, float)
            if value is None:
                break
            withdrawals.insert(0, value)
        accounts.append(
            Account(
                number=number,
                agency=agency,
                balance=balance,
                withdrawal_count=count,
                total_withdrawn=total,
                withdrawals=withdrawals,
            )
        )
    return accounts