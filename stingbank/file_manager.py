"""Persistence of bank data with a temporary working copy and a backup."""

from __future__ import annotations

import contextlib
import shutil
import sys
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from typing import TextIO

from .deposit import Deposit
from .user import User

DATA_NAME = "bank_data.txt"
TEMP_NAME = "temp_bank_data.txt"
BACKUP_NAME = "backup_bank_data.txt"


def format_users(users: Mapping[str, User]) -> str:
    """Render users in the whitespace-separated data file format."""
    lines = []
    for name, user in users.items():
        lines.append(f"{name} {len(user.account)}\n")
        lines.extend(
            f"{deposit.amount} {deposit.timestamp} {deposit.hour:g}\n"
            for deposit in user.account
        )
    return "".join(lines)


def _take(tokens: Iterator[str], convert: Callable[[str], object], what: str):
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError(f"missing {what}") from None
    try:
        return convert(token)
    except ValueError:
        raise ValueError(f"bad {what}: {token!r}") from None


def _iter_users(text: str) -> Iterator[User]:
    tokens = iter(text.split())
    for name in tokens:
        count = _take(tokens, int, f"deposit count for {name}")
        if count < 0:
            raise ValueError(f"negative deposit count for {name}")
        user = User(name)
        for _ in range(count):
            amount = _take(tokens, int, f"deposit amount for {name}")
            timestamp = _take(tokens, int, f"deposit time for {name}")
            hour = _take(tokens, float, f"deposit hour for {name}")
            user.account.append(Deposit(amount, timestamp, hour))
        yield user


def parse_users(text: str) -> dict[str, User]:
    """Parse the data file format; raise ValueError if it is malformed."""
    return {user.name: user for user in _iter_users(text)}


def _ask_stdin(question: str) -> str | None:
    try:
        return input(question + " ")
    except EOFError:
        return None


class Storage:
    """The data, temporary and backup files kept in one directory."""

    def __init__(self, directory: str | Path = "datas", out: TextIO | None = None) -> None:
        self.directory = Path(directory)
        self.data = self.directory / DATA_NAME
        self.temp = self.directory / TEMP_NAME
        self.backup = self.directory / BACKUP_NAME
        self._out = out

    def _say(self, message: str) -> None:
        out = sys.stdout if self._out is None else self._out
        out.write(message + "\n")

    def _check_temp_data(self, ask: Callable[[str], str | None]) -> None:
        if not self.temp.exists():
            return
        answer = ask("Do you want to copy temp data to your current data? (Y/N)")
        if answer is None:
            return
        if answer.strip()[:1] == "Y":
            self._say("Copying")
            shutil.copyfile(self.temp, self.data)
        self.temp.unlink()

    def _check_missing_files(self) -> None:
        has_data = self.data.exists()
        has_backup = self.backup.exists()
        if not has_data and not has_backup:
            self._say("No data found, creating a fresh data file")
            self.data.touch()
        elif not has_data:
            self._say("Data file lost, restoring from backup")
            shutil.copyfile(self.backup, self.data)
        elif not has_backup:
            self._say("Backup lost, recreating it from data")
            shutil.copyfile(self.data, self.backup)

    def _read_temp(self) -> dict[str, User]:
        users: dict[str, User] = {}
        if not self.temp.exists():
            self._say("Temp data file is missing")
            return users
        try:
            for user in _iter_users(self.temp.read_text()):
                users[user.name] = user
        except ValueError:
            self._say("Error: Failed to read complete data")
        else:
            self._say("Reached end of data")
        return users

    def load(self, ask: Callable[[str], str | None] | None = None) -> dict[str, User]:
        """Recover leftover files, start a fresh working copy and return its users.

        ``ask`` is given a yes/no question and returns the answer, or None
        when no answer can be read.
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        self._check_temp_data(ask or _ask_stdin)
        self._check_missing_files()
        shutil.copyfile(self.data, self.temp)
        return self._read_temp()

    def save(self, users: Mapping[str, User]) -> None:
        """Write users to the temporary working copy."""
        self.temp.write_text(format_users(users))

    def safe_save(self) -> bool:
        """Promote the working copy to data, keeping the old data as backup.

        Returns False when there is no working copy to promote.
        """
        if not self.temp.exists():
            self._say("No temp data")
            return False
        with contextlib.suppress(OSError):
            self.backup.unlink()
        with contextlib.suppress(OSError):
            self.data.replace(self.backup)
        self.temp.replace(self.data)
        self._say("Safe saving completed successfully!")
        return True