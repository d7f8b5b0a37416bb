import pytest

from bankdesk.accounts import AccountNotFoundError, Bank, InsufficientFundsError
from bankdesk.undo import Operation, OperationKind, UndoError, UndoStack


@pytest.fixture
def bank():
    b = Bank()
    b.open_account(1, 10)
    return b


def test_undo_empty_raises(bank):
    with pytest.raises(UndoError):
        UndoStack().undo(bank)


def test_undo_deposit_restores_balance(bank):
    stack = UndoStack()
    bank.deposit(1, 10, 50.0)
    stack.record(OperationKind.DEPOSIT, 1, 10, 50.0)
    operation = stack.undo(bank)
    assert operation == Operation(OperationKind.DEPOSIT, 1, 10, 50.0)
    assert bank.get(1, 10).balance == pytest.approx(0.0)
    assert len(stack) == 0


def test_undo_withdrawal_restores_state(bank):
    stack = UndoStack()
    bank.deposit(1, 10, 100.0)
    bank.withdraw(1, 10, 40.0)
    stack.record(OperationKind.WITHDRAWAL, 1, 10, 40.0)
    stack.undo(bank)
    account = bank.get(1, 10)
    assert account.balance == pytest.approx(100.0)
    assert account.withdrawal_count == 0
    assert account.total_withdrawn == pytest.approx(0.0)
    assert account.withdrawals == []


def test_undo_is_last_in_first_out(bank):
    stack = UndoStack()
    bank.deposit(1, 10, 30.0)
    stack.record(OperationKind.DEPOSIT, 1, 10, 30.0)
    bank.withdraw(1, 10, 10.0)
    stack.record(OperationKind.WITHDRAWAL, 1, 10, 10.0)
    assert stack.undo(bank).kind is OperationKind.WITHDRAWAL
    assert stack.undo(bank).kind is OperationKind.DEPOSIT
    assert bank.get(1, 10).balance == pytest.approx(0.0)


def test_undo_deposit_with_insufficient_balance_pops(bank):
    stack = UndoStack()
    bank.deposit(1, 10, 20.0)
    stack.record(OperationKind.DEPOSIT, 1, 10, 20.0)
    bank.withdraw(1, 10, 15.0)
    with pytest.raises(InsufficientFundsError):
        stack.undo(bank)
    assert len(stack) == 0
    assert bank.get(1, 10).balance == pytest.approx(5.0)


def test_undo_missing_account_pops(bank):
    stack = UndoStack()
    stack.record(OperationKind.DEPOSIT, 9, 9, 1.0)
    with pytest.raises(AccountNotFoundError):
        stack.undo(bank)
    assert len(stack) == 0


def test_clear():
    stack = UndoStack()
    stack.record(OperationKind.DEPOSIT, 1, 1, 1.0)
    stack.record(OperationKind.WITHDRAWAL, 1, 1, 1.0)
    assert len(stack) == 2
    stack.clear()
    assert len(stack) == 0