"""Accounts made of deposits that earn interest over time."""

from __future__ import annotations

import time as _time
from dataclasses import dataclass, field

from .deposit import Deposit, hour_of_day

INTEREST_PERIOD = 20 * 60


def interest_rate(hour: float) -> float:
    """Return the growth factor per period for a deposit made at ``hour``."""
    if hour <= 13.5:
        return 1.2
    if hour <= 14:
        return 1.5
    return 1.7


class InsufficientFunds(Exception):
    """Raised when a withdrawal exceeds the account balance."""

    def __init__(self, balance: int, amount: int) -> None:
        super().__init__(f"cannot withdraw {amount} from a balance of {balance}")
        self.balance = balance
        self.amount = amount


@dataclass
class User:
    """A named account holding a stack of deposits."""

    name: str
    account: list[Deposit] = field(default_factory=list)

    def new_deposit(self, amount: int, now: float | None = None) -> Deposit:
        """Pay ``amount`` in at ``now`` and return the new deposit."""
        deposit = Deposit.now(amount, now)
        self.account.append(deposit)
        return deposit

    def apply_interest(self, now: float | None = None) -> None:
        """Grow every deposit for each full period elapsed since it was last updated."""
        now = _time.time() if now is None else now
        for deposit in self.account:
            periods = int((now - deposit.timestamp) / 60 / 20)
            if periods <= 0:
                continue
            rate = interest_rate(deposit.hour)
            for _ in range(periods):
                deposit.amount = int(deposit.amount * rate)
            deposit.hour = hour_of_day(deposit.timestamp)
            deposit.timestamp = int(now)

    def balance(self, now: float | None = None) -> int:
        """Apply interest and return the total held."""
        self.apply_interest(now)
        return sum(deposit.amount for deposit in self.account)

    def withdraw(self, amount: int, now: float | None = None) -> None:
        """Take ``amount`` out, spending the most recent deposits first."""
        total = self.balance(now)
        if total < amount:
            raise InsufficientFunds(total, amount)
        if total == amount:
            self.account.clear()
            return
        remaining = amount
        while True:
            last = self.account[-1]
            if last.amount > remaining:
                last.amount -= remaining
                return
            remaining -= last.amount
            self.account.pop()

    def check(self, now: float | None = None) -> str:
        """Apply interest and return the balance as shown to the account holder."""
        return str(self.balance(now))