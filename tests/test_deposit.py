import time

import pytest

from stingbank.deposit import Deposit, hour_of_day


def test_now_uses_given_moment():
    deposit = Deposit.now(250, 1_700_000_000)
    assert deposit.amount == 250
    assert deposit.timestamp == 1_700_000_000
    assert deposit.hour == hour_of_day(1_700_000_000)


def test_now_truncates_fractional_timestamp():
    deposit = Deposit.now(5, 1000.9)
    assert deposit.timestamp == 1000


def test_now_defaults_to_current_time():
    before = int(time.time())
    deposit = Deposit.now(1)
    after = int(time.time())
    assert before <= deposit.timestamp <= after


@pytest.mark.parametrize("stamp", [0, 86_399, 1_000_000, 1_700_000_000, 1_700_012_345])
def test_hour_of_day_is_within_a_day(stamp):
    hour = hour_of_day(stamp)
    assert 0 <= hour < 24


@pytest.mark.parametrize("stamp", [0, 1_700_000_000, 1_700_012_345])
def test_hour_of_day_counts_whole_minutes(stamp):
    minutes = hour_of_day(stamp) * 60
    assert abs(minutes - round(minutes)) < 1e-6


def test_deposit_equality():
    assert Deposit(10, 20, 13.5) == Deposit(10, 20, 13.5)
    assert Deposit(10, 20, 13.5) != Deposit(11, 20, 13.5)