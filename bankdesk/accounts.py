"""Bank accounts, their withdrawals and the in-memory registry that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


class BankError(Exception):
    """Base class for errors raised by bank operations."""


class AccountNotFoundError(BankError, LookupError):
    """No account with the given number and agency exists."""

    def __init__(self, number: int, agency: int) -> None:
        super().__init__("Conta não encontrada!")
        self.number = number
        self.agency = agency


class DuplicateAccountError(BankError):
    """An account with the same number and agency already exists."""

    def __init__(self, number: int, agency: int) -> None:
        super().__init__("Conta já existe!")
        self.number = number
        self.agency = agency


class InsufficientFundsError(BankError):
    """The balance is too small for the requested operation."""

    def __init__(self, balance: float, amount: float, message: str = "Saldo insuficiente!") -> None:
        super().__init__(message)
        self.balance = balance
        self.amount = amount


@dataclass
class Account:
    """A bank account identified by its number and agency.

    ``withdrawals`` holds the amounts of past withdrawals, most recent first.
    The count and total are kept as their own fields, as stored on disk.
    """

    number: int
    agency: int
    name: str = ""
    phone: str = ""
    cpf: str = ""
    balance: float = 0.0
    withdrawal_count: int = 0
    total_withdrawn: float = 0.0
    withdrawals: list[float] = field(default_factory=list)

    @property
    def key(self) -> tuple[int, int]:
        return (self.number, self.agency)

    def deposit(self, amount: float) -> float:
        """Add ``amount`` to the balance and return the new balance."""
        self.balance += amount
        return self.balance

    def withdraw(self, amount: float) -> float:
        """Take ``amount`` out of the balance and return the new balance."""
        if self.balance < amount:
            raise InsufficientFundsError(self.balance, amount)
        self.withdrawals.insert(0, amount)
        self.balance -= amount
        self.withdrawal_count += 1
        self.total_withdrawn += amount
        return self.balance

    def describe(self) -> str:
        """Return the report block for this account."""
        lines = [
            f"Conta: {self.number} | Agência: {self.agency}",
            f"Titular: {self.name} | CPF: {self.cpf} | Telefone: {self.phone}",
            f"Saldo: R$ {self.balance:.2f}",
            f"Total de saques: {self.withdrawal_count} | Total sacado: R$ {self.total_withdrawn:.2f}",
        ]
        lines.extend(
            f"  Saque {index}: R$ {value:.2f}"
            for index, value in enumerate(self.withdrawals, start=1)
        )
        return "\n".join(lines) + "\n"


class Bank:
    """Registry of accounts; the most recently added account comes first."""

    def __init__(self) -> None:
        self._accounts: list[Account] = []

    def open_account(self, number: int, agency: int, name: str = "", phone: str = "", cpf: str = "") -> Account:
        """Create a new empty account and register it."""
        account = Account(number=number, agency=agency, name=name, phone=phone, cpf=cpf)
        return self.add(account)

    def add(self, account: Account) -> Account:
        """Register an existing account at the front of the registry."""
        if self.find(account.number, account.agency) is not None:
            raise DuplicateAccountError(account.number, account.agency)
        self._accounts.insert(0, account)
        return account

    def find(self, number: int, agency: int) -> Account | None:
        """Return the matching account, or None."""
        return next(
            (a for a in self._accounts if a.number == number and a.agency == agency),
            None,
        )

    def get(self, number: int, agency: int) -> Account:
        """Return the matching account or raise AccountNotFoundError."""
        account = self.find(number, agency)
        if account is None:
            raise AccountNotFoundError(number, agency)
        return account

    def deposit(self, number: int, agency: int, amount: float) -> Account:
        account = self.get(number, agency)
        account.deposit(amount)
        return account

    def withdraw(self, number: int, agency: int, amount: float) -> Account:
        account = self.get(number, agency)
        account.withdraw(amount)
        return account

    def balance_line(self, number: int, agency: int) -> str:
        account = self.get(number, agency)
        return f"Saldo atual da conta {account.number} (Agência {account.agency}): R$ {account.balance:.2f}"

    def report(self) -> str:
        """Return the full report of every account and its withdrawals."""
        return "".join("\n" + account.describe() for account in self._accounts)

    def clear(self) -> None:
        self._accounts.clear()

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self._accounts))

    def __len__(self) -> int:
        return len(self._accounts)