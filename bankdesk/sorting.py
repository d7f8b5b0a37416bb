"""Ordering of accounts for display."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from bankdesk.accounts import Account, BankError


class SortCriterion(Enum):
    BY_NUMBER = "numero"
    BY_TOTAL_WITHDRAWN = "total_sacado"


class TooFewAccountsError(BankError):
    """Raised when there are fewer than two accounts to sort."""

    def __init__(self) -> None:
        super().__init__("Poucas contas para ordenar.")


def sort_accounts(accounts: Iterable[Account], criterion: SortCriterion) -> list[Account]:
    """Return the accounts sorted stably by ``criterion``.

    Account numbers ascend; totals withdrawn descend.
    """
    items = list(accounts)
    if len(items) < 2:
        raise TooFewAccountsError()
    if criterion is SortCriterion.BY_NUMBER:
        return sorted(items, key=lambda a: a.number)
    return sorted(items, key=lambda a: a.total_withdrawn, reverse=True)


def format_sorted(accounts: Iterable[Account], criterion: SortCriterion) -> str:
    """Return the sorted listing as shown to the operator."""
    parts = ["\n==== CONTAS ORDENADAS ===="]
    for account in sort_accounts(accounts, criterion):
        parts.append(
            f"\nConta: {account.number} | Agência: {account.agency}\n"
            f"Saldo: R$ {account.balance:.2f} | Total Sacado: R$ {account.total_withdrawn:.2f}\n"
        )
    return "".join(parts)