"""The interactive teller session."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .file_manager import Storage
from .shutdown import ExitRequested, ShutdownGuard
from .user import InsufficientFunds, User

VALID_ACTIONS = frozenset({"D", "W", "C", "exit"})

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_TRICK_MESSAGE = "Bro, you thought you're smart enough to trick me?"


def _account(users: dict[str, User], account: str) -> User:
    return users.setdefault(account, User(account))


def handle_deposit(
    users: dict[str, User],
    account: str,
    amount: int,
    storage: Storage,
    stdout: TextIO | None = None,
) -> bool:
    """Pay ``amount`` into ``account`` and save; return whether it was accepted."""
    stdout = sys.stdout if stdout is None else stdout
    if amount <= 0:
        stdout.write(_TRICK_MESSAGE + "\n")
        return False
    _account(users, account).new_deposit(amount)
    storage.save(users)
    return True


def handle_withdraw(
    users: dict[str, User],
    account: str,
    amount: int,
    storage: Storage,
    stdout: TextIO | None = None,
) -> bool:
    """Take ``amount`` out of ``account`` and save; return whether it succeeded."""
    stdout = sys.stdout if stdout is None else stdout
    if amount <= 0:
        stdout.write(_TRICK_MESSAGE + "\n")
        return False
    try:
        _account(users, account).withdraw(amount)
    except InsufficientFunds:
        stdout.write("You brokie\n")
        succeeded = False
    else:
        succeeded = True
    storage.save(users)
    return succeeded


def handle_check(
    users: dict[str, User],
    account: str,
    storage: Storage,
    stdout: TextIO | None = None,
) -> str:
    """Show the balance of ``account``, save, and return what was shown."""
    stdout = sys.stdout if stdout is None else stdout
    shown = _account(users, account).check()
    stdout.write(shown + "\n")
    storage.save(users)
    return shown


def _read_amount(
    prompt: str,
    users: dict[str, User],
    guard: ShutdownGuard,
    stdin: TextIO,
    stdout: TextIO,
) -> int:
    text = guard.read(prompt, users, stdin, stdout)
    try:
        value = int(text)
    except ValueError:
        value = None
    if value is None or not _INT_MIN <= value <= _INT_MAX:
        stdout.write("\nexiting...\n")
        guard.finish(users)
        raise ExitRequested
    return value


def interaction_loop(
    users: dict[str, User],
    storage: Storage,
    guard: ShutdownGuard | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Run the teller session until the user exits or input ends."""
    guard = ShutdownGuard(storage) if guard is None else guard
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    try:
        while True:
            if guard.exiting:
                stdout.write("exiting...\n")
                guard.finish(users)
                return

            action = guard.read("Action (D/W/C/exit): ", users, stdin, stdout)
            if action not in VALID_ACTIONS:
                stdout.write("Your invalid action was eaten by a blue stingray!\n")
                continue
            if action == "exit":
                storage.save(users)
                storage.safe_save()
                stdout.write("exiting...\n")
                return

            account = guard.read("Account name: ", users, stdin, stdout)
            if account not in users:
                users[account] = User(account)
                stdout.write(f"New account {account} created!\n")
                storage.save(users)

            if action == "D":
                amount = _read_amount("Deposit amount: ", users, guard, stdin, stdout)
                handle_deposit(users, account, amount, storage, stdout)
            elif action == "W":
                amount = _read_amount("Withdraw amount: ", users, guard, stdin, stdout)
                handle_withdraw(users, account, amount, storage, stdout)
            else:
                handle_check(users, account, storage, stdout)
    except ExitRequested:
        if not guard.saved:
            stdout.write("\nexiting...\n")
            guard.finish(users)


def main(argv: list[str] | None = None) -> int:
    """Load the bank data and start an interactive session."""
    parser = argparse.ArgumentParser(prog="stingbank", description="A tiny interest-bearing bank.")
    parser.add_argument(
        "--data-dir",
        default="datas",
        help="directory holding the bank data files (default: datas)",
    )
    args = parser.parse_args(argv)

    storage = Storage(args.data_dir)
    users = storage.load()
    guard = ShutdownGuard(storage)
    guard.install()
    interaction_loop(users, storage, guard)
    return 0


if __name__ == "__main__":
    sys.exit(main())