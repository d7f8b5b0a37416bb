"""Stack of recorded deposits and withdrawals that can be undone."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bankdesk.accounts import Bank, InsufficientFundsError


class UndoError(Exception):
    """Raised when there is nothing left to undo."""

    def __init__(self) -> None:
        super().__init__("Nenhuma operação para desfazer.")


class OperationKind(Enum):
    WITHDRAWAL = "saque"
    DEPOSIT = "deposito"


@dataclass(frozen=True)
class Operation:
    kind: OperationKind
    account: int
    agency: int
    amount: float


class UndoStack:
    """Last-in, first-out history of operations."""

    def __init__(self) -> None:
        self._operations: list[Operation] = []

    def record(self, kind: OperationKind, account: int, agency: int, amount: float) -> Operation:
        operation = Operation(kind, account, agency, amount)
        self._operations.append(operation)
        return operation

    def undo(self, bank: Bank) -> Operation:
        """Revert the most recent operation against ``bank`` and return it.

        The operation leaves the stack even when it cannot be reverted.
        """
        if not self._operations:
            raise UndoError()
        operation = self._operations.pop()
        account = bank.get(operation.account, operation.agency)

        if operation.kind is OperationKind.DEPOSIT:
            if account.balance < operation.amount:
                raise InsufficientFundsError(
                    account.balance,
                    operation.amount,
                    "Não foi possível desfazer o depósito: saldo insuficiente.",
                )
            account.balance -= operation.amount
        else:
            account.balance += operation.amount
            account.withdrawal_count -= 1
            account.total_withdrawn -= operation.amount
            if account.withdrawals:
                account.withdrawals.pop(0)
        return operation

    def clear(self) -> None:
        self._operations.clear()

    def __len__(self) -> int:
        return len(self._operations)