from datetime import datetime, timedelta, timezone

import pytest

from app.background.reminders import InMemoryReminderScheduler

FIXED_NOW = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def fake_scheduler():
    return InMemoryReminderScheduler()


@pytest.fixture
def in_one_hour():
    return FIXED_NOW + timedelta(hours=1)


@pytest.fixture
def an_hour_ago():
    return FIXED_NOW - timedelta(hours=1)
