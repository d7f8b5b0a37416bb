import pytest

from bankdesk.accounts import Account
from bankdesk.sorting import SortCriterion, TooFewAccountsError, format_sorted, sort_accounts


def make(number, agency, withdrawn):
    return Account(number, agency, total_withdrawn=withdrawn)


@pytest.fixture
def accounts():
    return [make(3, 1, 5.0), make(1, 2, 20.0), make(2, 3, 5.0), make(4, 4, 10.0)]


def test_sort_by_number_ascending(accounts):
    result = sort_accounts(accounts, SortCriterion.BY_NUMBER)
    numbers = [a.number for a in result]
    assert numbers == sorted(numbers)
    assert len(result) == len(accounts)


def test_sort_by_total_descending_and_stable(accounts):
    result = sort_accounts(accounts, SortCriterion.BY_TOTAL_WITHDRAWN)
    totals = [a.total_withdrawn for a in result]
    assert totals == sorted(totals, reverse=True)
    ties = [a.number for a in result if a.total_withdrawn == 5.0]
    assert ties == [3, 2]


def test_sort_does_not_modify_input(accounts):
    before = [a.number for a in accounts]
    sort_accounts(accounts, SortCriterion.BY_NUMBER)
    assert [a.number for a in accounts] == before


@pytest.mark.parametrize("count", [0, 1])
def test_too_few_accounts(count):
    with pytest.raises(TooFewAccountsError):
        sort_accounts([make(n, 1, 0.0) for n in range(count)], SortCriterion.BY_NUMBER)


def test_format_sorted(accounts):
    text = format_sorted(accounts, SortCriterion.BY_NUMBER)
    assert text.startswith("\n==== CONTAS ORDENADAS ====")
    assert text.count("Conta: ") == len(accounts)
    assert text.index("Conta: 1 |") < text.index("Conta: 4 |")


def test_format_sorted_too_few():
    with pytest.raises(TooFewAccountsError):
        format_sorted([make(1, 1, 0.0)], SortCriterion.BY_TOTAL_WITHDRAWN)