# bankdesk

A small teller-desk banking tool for the terminal. It keeps a set of accounts
(number, agency, holder name, phone and CPF), records deposits and
withdrawals, lets customers wait in a service queue, undoes the most recent
deposit or withdrawal, and lists accounts sorted by account number or by the
total amount withdrawn. Messages on screen are in Portuguese.

## Installing

```
pip install .
```

## Running

```
bankdesk
bankdesk --dir path/to/data
```

On start it reads `contas_raw.txt` from the data directory (the current
directory unless `--dir` is given), if the file is there, then shows a
numbered menu:

1. Register an account (number, agency, holder name, phone, CPF)
2. Withdraw
3. Deposit
4. Show balance
5. Full report of every account and its withdrawals
6. Save and quit
7. Add a customer to the queue
8. Serve the next customer
9. Show the queue
10. Undo the last deposit or withdrawal
11. List accounts sorted by account number
12. List accounts sorted by total withdrawn (largest first)

Option 6 writes two files into the data directory: `contas.txt`, a readable
table, and `contas_raw.txt`, the pipe-separated file read back on the next
start. The menu also ends at the end of input, without saving.

## Using it as a library

```python
from bankdesk.accounts import Bank
from bankdesk.undo import UndoStack, OperationKind
from bankdesk.sorting import SortCriterion, format_sorted
from bankdesk import storage

bank = Bank()
bank.open_account(1001, 1, name="Ana Souza")
bank.open_account(1002, 1, name="Bruno Lima")
bank.deposit(1001, 1, 250.0)

history = UndoStack()
bank.withdraw(1001, 1, 40.0)
history.record(OperationKind.WITHDRAWAL, 1001, 1, 40.0)
history.undo(bank)  # puts the 40.00 back and drops the withdrawal

print(bank.report())
print(format_sorted(bank, SortCriterion.BY_NUMBER))

storage.save(bank, ".")        # writes contas.txt and contas_raw.txt
restored = Bank()
storage.load(restored, ".")    # reads contas_raw.txt
```

Modules:

- `bankdesk.accounts`: `Account`, `Bank` and the errors `BankError`,
  `AccountNotFoundError`, `DuplicateAccountError`, `InsufficientFundsError`.
- `bankdesk.service_queue`: `ServiceQueue` of `Customer` entries;
  `dequeue` on an empty queue raises `EmptyQueueError`.
- `bankdesk.undo`: `UndoStack` of `Operation` records. `undo` raises
  `UndoError` when empty, `AccountNotFoundError` when the account is gone,
  and `InsufficientFundsError` when a deposit can no longer be taken back;
  the operation leaves the stack either way.
- `bankdesk.sorting`: `sort_accounts` and `format_sorted`; fewer than two
  accounts raise `TooFewAccountsError`.
- `bankdesk.storage`: `format_table`, `format_raw`, `parse_raw`, `save`,
  `load`. `load` skips accounts already registered and raises
  `FileNotFoundError` when there is no raw file.
- `bankdesk.legacy`: `format_legacy` and `parse_legacy` for the older
  whitespace-separated file without holder details.
- `bankdesk.cli`: `run_menu` runs the menu over any text streams; `main` is
  the `bankdesk` command.

## Limits

The service queue and the undo history live only in memory; they are not
saved and are lost when the program ends. Saving also clears the accounts
held in memory. The legacy format can be read and written from code, but the
`bankdesk` command neither loads nor writes it.

## Tests

```
pip install .[test]
pytest
```