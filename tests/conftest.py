"""
Shared fixtures for the risk engine tests.

Provides:
- A seeded random generator so draws repeat across runs
- A fixed evaluation time and schedule start date
"""

import random
from datetime import date, datetime, timezone

import pytest


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator for flag, severity and id draws."""
    return random.Random(20240115)


@pytest.fixture
def now() -> datetime:
    """Fixed evaluation time."""
    return datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def start_date() -> date:
    """Fixed schedule start date."""
    return date(2024, 1, 15)
