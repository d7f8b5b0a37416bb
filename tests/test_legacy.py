import pytest

from bankdesk.accounts import Account
from bankdesk.legacy import format_legacy, parse_legacy


def test_format_legacy_empty_account():
    assert format_legacy([Account(number=1, agency=2, balance=10.0)]) == "1 2 10.000000 0 0.00\n\n"


def test_round_trip_reverses_withdrawals():
    original = Account(
        number=5,
        agency=6,
        balance=12.5,
        withdrawal_count=2,
        total_withdrawn=3.5,
        withdrawals=[2.0, 1.5],
    )
    parsed = parse_legacy(format_legacy([original, Account(number=7, agency=6)]))
    assert [a.key for a in parsed] == [(5, 6), (7, 6)]
    account = parsed[0]
    assert account.balance == pytest.approx(original.balance)
    assert account.withdrawal_count == original.withdrawal_count
    assert account.total_withdrawn == pytest.approx(original.total_withdrawn)
    assert account.withdrawals == list(reversed(original.withdrawals))
    assert account.name == ""


def test_parse_stops_at_malformed_header():
    text = format_legacy([Account(number=1, agency=2)]) + "x y\n" + format_legacy([Account(number=3, agency=4)])
    parsed = parse_legacy(text)
    assert [a.key for a in parsed] == [(1, 2)]


def test_parse_keeps_account_with_missing_withdrawals():
    parsed = parse_legacy("1 2 5.0 3 4.0\n1.00 2.00\n")
    assert len(parsed) == 1
    assert parsed[0].withdrawals == [2.0, 1.0]
    assert parsed[0].withdrawal_count == 3


def test_parse_empty_text():
    assert parse_legacy("") == []