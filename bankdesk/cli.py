"""Interactive teller menu over accounts, a service queue and an undo history."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Callable, TextIO

from bankdesk.accounts import (
    AccountNotFoundError,
    Bank,
    DuplicateAccountError,
    InsufficientFundsError,
)
from bankdesk.service_queue import EmptyQueueError, ServiceQueue
from bankdesk.sorting import SortCriterion, TooFewAccountsError, format_sorted
from bankdesk.storage import load, save
from bankdesk.undo import OperationKind, UndoError, UndoStack

MENU = (
    "\n===== MENU =====\n"
    "1. Cadastrar conta\n"
    "2. Realizar saque\n"
    "3. Depositar\n"
    "4. Ver saldo\n"
    "5. Gerar relatório\n"
    "6. Salvar e sair\n"
    "7. Adicionar cliente à fila\n"
    "8. Atender próximo cliente\n"
    "9. Ver fila de atendimento\n"
    "10. Desfazer última operação\n"
    "11. Ordenar por número da conta\n"
    "12. Ordenar por total sacado\n"
    "Escolha: "
)

EXIT_OPTION = 6

_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class _InvalidInput(ValueError):
    """A token did not have the expected form."""


class _Input:
    """Reads whitespace-separated tokens and whole lines from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._line = ""

    def _skip_space(self) -> None:
        while True:
            stripped = self._line.lstrip()
            if stripped:
                self._line = stripped
                return
            line = self._stream.readline()
            if not line:
                self._line = ""
                raise EOFError
            self._line = line

    def token(self) -> str:
        self._skip_space()
        match = re.match(r"\S+", self._line)
        self._line = self._line[match.end():]
        return match.group()

    def integer(self) -> int:
        token = self.token()
        if not _INT.fullmatch(token):
            raise _InvalidInput(token)
        return int(token)

    def number(self) -> float:
        token = self.token()
        if not _FLOAT.fullmatch(token):
            raise _InvalidInput(token)
        return float(token)

    def rest_of_line(self) -> str:
        self._skip_space()
        text = self._line.rstrip("\n")
        self._line = ""
        return text


class _Session:
    def __init__(self, bank: Bank, reader: _Input, out: TextIO, directory: str | Path) -> None:
        self.bank = bank
        self.reader = reader
        self.out = out
        self.directory = directory
        self.queue = ServiceQueue()
        self.history = UndoStack()

    def write(self, text: str) -> None:
        self.out.write(text)

    def prompt(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def ask_account(self) -> tuple[int, int]:
        self.prompt("Número da conta: ")
        number = self.reader.integer()
        self.prompt("Número da agência: ")
        agency = self.reader.integer()
        return number, agency

    def ask_amount(self, text: str) -> float:
        self.prompt(text)
        return self.reader.number()

    def ask_line(self, text: str) -> str:
        self.prompt(text)
        return self.reader.rest_of_line()

    def register(self) -> None:
        number, agency = self.ask_account()
        name = self.ask_line("Nome do titular: ")
        phone = self.ask_line("Telefone: ")
        cpf = self.ask_line("CPF: ")
        try:
            self.bank.open_account(number, agency, name, phone, cpf)
        except DuplicateAccountError as error:
            self.write(f"{error}\n")
        else:
            self.write("conta cadastrada com sucesso!\n")

    def withdraw(self) -> None:
        number, agency = self.ask_account()
        account = self.bank.find(number, agency)
        if account is None:
            self.write("Conta não encontrada!\n")
            return
        amount = self.ask_amount("Valor do saque: R$ ")
        try:
            account.withdraw(amount)
        except InsufficientFundsError:
            self.write("Saldo insuficiente!\n")
            return
        self.write("Saque realizado com sucesso!\n")
        self.write(f"Saldo restante: R$ {account.balance:.2f}\n")
        self.history.record(OperationKind.WITHDRAWAL, number, agency, amount)

    def deposit(self) -> None:
        number, agency = self.ask_account()
        account = self.bank.find(number, agency)
        if account is None:
            self.write("Conta não encontrada!\n")
            return
        amount = self.ask_amount("Valor do depósito: R$ ")
        account.deposit(amount)
        self.write(f"Depósito realizado com sucesso! Saldo atual: R$ {account.balance:.2f}\n")
        self.history.record(OperationKind.DEPOSIT, number, agency, amount)

    def show_balance(self) -> None:
        number, agency = self.ask_account()
        try:
            self.write(self.bank.balance_line(number, agency) + "\n")
        except AccountNotFoundError as error:
            self.write(f"{error}\n")

    def report(self) -> None:
        self.write(self.bank.report())

    def save_and_exit(self) -> None:
        try:
            save(self.bank, self.directory)
        except OSError:
            self.write("Erro ao salvar.\n")
        else:
            self.write("Arquivo salvo com sucesso em contas.txt!\n")
            self.write("Arquivo técnico salvo em contas_raw.txt\n")
        self.bank.clear()
        self.history.clear()

    def enqueue(self) -> None:
        number, agency = self.ask_account()
        customer = self.queue.enqueue(number, agency)
        self.write(f"Cliente da conta {customer.account} (Agência {customer.agency}) entrou na fila.\n")

    def serve(self) -> None:
        try:
            customer = self.queue.dequeue()
        except EmptyQueueError as error:
            self.write(f"{error}\n")
        else:
            self.write(f"Atendendo cliente da conta {customer.account} (Agência {customer.agency}).\n")

    def show_queue(self) -> None:
        self.write(self.queue.render())

    def undo(self) -> None:
        try:
            operation = self.history.undo(self.bank)
        except UndoError as error:
            self.write(f"{error}\n")
        except AccountNotFoundError:
            self.write("Conta da operação não encontrada.\n")
        except InsufficientFundsError as error:
            self.write(f"{error}\n")
        else:
            if operation.kind is OperationKind.DEPOSIT:
                self.write(
                    f"Desfeito depósito de R$ {operation.amount:.2f} na conta "
                    f"{operation.account} (Agência {operation.agency}).\n"
                )
            else:
                self.write(
                    f"Desfeito saque de R$ {operation.amount:.2f} da conta "
                    f"{operation.account} (Agência {operation.agency}).\n"
                )

    def sort_by(self, criterion: SortCriterion) -> None:
        try:
            self.write(format_sorted(self.bank, criterion))
        except TooFewAccountsError as error:
            self.write(f"{error}\n")

    def actions(self) -> dict[int, Callable[[], None]]:
        return {
            1: self.register,
            2: self.withdraw,
            3: self.deposit,
            4: self.show_balance,
            5: self.report,
            6: self.save_and_exit,
            7: self.enqueue,
            8: self.serve,
            9: self.show_queue,
            10: self.undo,
            11: lambda: self.sort_by(SortCriterion.BY_NUMBER),
            12: lambda: self.sort_by(SortCriterion.BY_TOTAL_WITHDRAWN),
        }


def run_menu(bank: Bank, input_stream: TextIO, output_stream: TextIO, directory: str | Path = ".") -> None:
    """Run the teller menu until the save-and-exit option or end of input."""
    session = _Session(bank, _Input(input_stream), output_stream, directory)
    actions = session.actions()
    while True:
        session.prompt(MENU)
        try:
            option = session.reader.integer()
        except EOFError:
            return
        except _InvalidInput:
            session.write("Opção inválida!\n")
            continue
        action = actions.get(option)
        if action is None:
            session.write("Opção inválida!\n")
            continue
        try:
            action()
        except EOFError:
            return
        except _InvalidInput:
            continue
        if option == EXIT_OPTION:
            return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="bankdesk", description="Teller menu for bank accounts.")
    parser.add_argument("--dir", default=".", help="directory holding the account files")
    args = parser.parse_args(argv)

    bank = Bank()
    try:
        load(bank, args.dir)
    except FileNotFoundError:
        print("Arquivo técnico não encontrado.")
    else:
        print("Arquivo técnico carregado com sucesso!")
    run_menu(bank, sys.stdin, sys.stdout, args.dir)
    return 0