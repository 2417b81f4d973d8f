"""A single timed deposit held in an account."""

from __future__ import annotations

import time as _time
from dataclasses import dataclass


def hour_of_day(timestamp: float) -> float:
    """Return the local time of day of ``timestamp`` as fractional hours."""
    local = _time.localtime(timestamp)
    return local.tm_hour + local.tm_min / 60.0


@dataclass
class Deposit:
    """An amount of money paid in at a given moment."""

    amount: int
    timestamp: int
    hour: float

    @classmethod
    def now(cls, amount: int, when: float | None = None) -> Deposit:
        """Create a deposit made at ``when`` (the current time by default)."""
        stamp = int(_time.time() if when is None else when)
        return cls(amount, stamp, hour_of_day(stamp))