# stingbank

A small bank that runs in the console. Each account holds a list of
deposits. A deposit earns interest for every full twenty minutes since
it was last updated. The rate depends on the hour of day stored with the
deposit:

| hour of deposit      | factor per period |
|----------------------|-------------------|
| up to 13:30          | 1.2               |
| after 13:30 to 14:00 | 1.5               |
| later                | 1.7               |

Amounts are whole numbers. After each period the amount is rounded down.
A withdrawal takes money from the newest deposits first.

## Installing

```
pip install .
```

## Running

```
stingbank
stingbank --data-dir path/to/dir
```

`--data-dir` selects the directory for the data files. The default is
`datas` in the working directory. The directory is created if it does not
exist.

The program asks for an action and then for an account name. Input is
read as whitespace-separated words, so you can type several answers on
one line.

- `D`: deposit an amount
- `W`: withdraw an amount. If the balance is too low, it prints
  "You brokie" and leaves the account unchanged.
- `C`: print the current balance, interest included
- `exit`: save and quit

Any other action is rejected and the program asks again. An account is
created the first time its name is used. An amount of zero or less is
refused with a message. If the amount is not a whole number, or does not
fit in a signed 32-bit integer, the program saves and stops.

## Data files

The data directory holds three files:

- `bank_data.txt`: the committed data
- `backup_bank_data.txt`: the previous committed data
- `temp_bank_data.txt`: the working copy. It is rewritten after every change.

`exit` commits the working copy: the old data becomes the backup and the
working copy becomes the data file. The same happens when input ends and
when the program gets an interrupt or termination signal (Ctrl+C,
SIGTERM and, where the platform has them, SIGBREAK and SIGHUP).

At start-up, a working copy left over from an earlier run leads to the
question whether to use it. An answer that starts with `Y` copies it over
the data file. Any other answer discards it. If one of the data and
backup files is missing, it is rebuilt from the other. If both are
missing, an empty data file is created.

Each account is stored as its name and its number of deposits. One line
follows for each deposit, holding the amount, the Unix timestamp and the
hour of day:

```
alice 2
100 1700000000 13.25
40 1700003600 14.5
```

## Using it as a library

```python
import time
from stingbank.user import User, InsufficientFunds

u = User("alice")
now = time.time()
u.new_deposit(100, now)
print(u.balance(now + 20 * 60))  # one interest period later: 120 or more
try:
    u.withdraw(1_000_000, now)
except InsufficientFunds as err:
    print("not enough money:", err.balance)
```

- `stingbank.deposit`: `Deposit` (amount, timestamp, hour) with
  `Deposit.now(amount, when=None)`, and `hour_of_day(timestamp)`.
- `stingbank.user`: `User` with `new_deposit`, `apply_interest`,
  `balance`, `withdraw` and `check` (the balance as a string). All take an
  optional `now` timestamp. The module also has `interest_rate(hour)` and
  `InsufficientFunds`.
- `stingbank.file_manager`: `Storage(directory="datas", out=None)`.
  `load(ask=None)` returns the accounts as a dict. `ask` receives the
  start-up question and returns the answer, or None. `save(users)` writes
  the working copy. `safe_save()` commits it and returns False when there
  is no working copy. `format_users` and `parse_users` convert between
  accounts and the text format above. `parse_users` raises `ValueError`
  on malformed text.
- `stingbank.shutdown`: `ShutdownGuard`, which installs the signal
  handlers, reads input and saves exactly once on exit. It raises
  `ExitRequested` when the session must stop.
- `stingbank.interaction`: `interaction_loop`, `handle_deposit`,
  `handle_withdraw`, `handle_check` and `main`.

## Limits

Only one program should use a data directory at a time. The files are
not locked.

## Tests

```
pip install .[test]
pytest
```