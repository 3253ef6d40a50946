"""
Shared fixtures for the ledger tests
"""

import pytest
from datetime import datetime, timezone, timedelta

from simple_banking.config import BankingConfig
from simple_banking.ledger import Ledger


class FakeClock:
    """Controllable clock returning aware UTC datetimes"""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 1, 15, 9, 30, tzinfo=timezone.utc))


@pytest.fixture
def config():
    return BankingConfig()


@pytest.fixture
def ledger(config, clock):
    return Ledger(config, clock=clock)
