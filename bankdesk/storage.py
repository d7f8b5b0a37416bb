"""Saving and loading accounts: a readable table and a pipe-separated raw file."""

from __future__ import annotations

import io
import re
from pathlib import Path
from typing import Iterable

from bankdesk.accounts import Account, Bank

TABLE_FILE = "contas.txt"
RAW_FILE = "contas_raw.txt"

TABLE_HEADER = (
    "Conta     Agencia   Nome                CPF             Telefone        Saldo     Saques  TotalSacado\n"
)
TABLE_RULE = (
    "------------------------------------------------------------------------------------------------------\n"
)

_FLOAT = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_INT = r"[+-]?\d+"
_RAW_HEADER = re.compile(
    rf"\s*({_INT})\|\s*({_INT})\|([^|\n]{{1,99}})\|([^|\n]{{1,19}})\|([^|\n]{{1,19}})"
    rf"\|\s*({_FLOAT})\|\s*({_INT})\|\s*({_FLOAT})"
)
_LEADING_FLOAT = re.compile(_FLOAT)


def format_table(accounts: Iterable[Account]) -> str:
    """Return the human-readable table written to the table file."""
    parts = [TABLE_HEADER, TABLE_RULE]
    for account in accounts:
        parts.append(
            f"{account.number:<10d}{account.agency:<10d}{account.name:<20}"
            f"{account.cpf:<16}{account.phone:<16}{account.balance:<10.2f}"
            f"{account.withdrawal_count:<8d}{account.total_withdrawn:<12.2f}\n"
        )
        parts.append("Saques: " + "".join(f"{value:.2f} " for value in account.withdrawals) + "\n\n")
    return "".join(parts)


def format_raw(accounts: Iterable[Account]) -> str:
    """Return the machine-readable text that ``parse_raw`` reads back."""
    parts = []
    for account in accounts:
        parts.append(
            f"{account.number}|{account.agency}|{account.name}|{account.cpf}|{account.phone}|"
            f"{account.balance:.2f}|{account.withdrawal_count}|{account.total_withdrawn:.2f}\n"
        )
        parts.append("".join(f"{value:.2f} " for value in account.withdrawals) + "\n")
    return "".join(parts)


def _leading_floats(line: str) -> list[float]:
    values = []
    for token in line.split():
        match = _LEADING_FLOAT.match(token)
        if match is None:
            break
        values.append(float(match.group()))
    return values


def parse_raw(text: str) -> list[Account]:
    """Parse raw text into accounts, in file order.

    Blank and malformed header lines are skipped. Each header is followed by a
    line of withdrawal amounts, which are pushed front-first as read, so they
    come back in the reverse of their order on disk. A header with no line
    after it ends the parse.
    """
    accounts = []
    lines = io.StringIO(text)
    for line in lines:
        if line.startswith("\n"):
            continue
        match = _RAW_HEADER.match(line)
        if match is None:
            continue
        withdrawal_line = lines.readline()
        if not withdrawal_line:
            break
        number, agency, name, cpf, phone, balance, count, total = match.groups()
        accounts.append(
            Account(
                number=int(number),
                agency=int(agency),
                name=name,
                phone=phone,
                cpf=cpf,
                balance=float(balance),
                withdrawal_count=int(count),
                total_withdrawn=float(total),
                withdrawals=list(reversed(_leading_floats(withdrawal_line))),
            )
        )
    return accounts


def save(bank: Bank, directory: str | Path = ".") -> tuple[Path, Path]:
    """Write the table file and the raw file into ``directory``."""
    base = Path(directory)
    accounts = list(bank)
    table_path = base / TABLE_FILE
    table_path.write_text(format_table(accounts), encoding="utf-8")
    raw_path = base / RAW_FILE
    raw_path.write_text(format_raw(accounts), encoding="utf-8")
    return table_path, raw_path


def load(bank: Bank, directory: str | Path = ".") -> list[Account]:
    """Read the raw file from ``directory`` into ``bank``.

    Each account is placed in front of those before it. Accounts whose number
    and agency are already registered are skipped. Raises FileNotFoundError
    when there is no raw file.
    """
    text = (Path(directory) / RAW_FILE).read_text(encoding="utf-8")
    added = []
    for account in parse_raw(text):
        if bank.find(account.number, account.agency) is None:
            added.append(bank.add(account))
    return added