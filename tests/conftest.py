"""Pytest fixtures for payback tests."""
import pytest

from payback.models import CalendarConfig, default_scenario

_ENV_VARS = (
    "PAYBACK_HOURS_PER_DAY",
    "PAYBACK_DAYS_PER_WEEK",
    "PAYBACK_DAYS_PER_MONTH",
    "PAYBACK_MAX_HORIZON_DAYS",
    "PAYBACK_MAX_POINTS_PER_DAY",
    "PAYBACK_CORS_ORIGINS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test against the built-in defaults, whatever the shell exports."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def calendar():
    """8 h/day, 5 days/week, 22 days/month."""
    return CalendarConfig(hours_per_day=8, days_per_week=5, days_per_month=22)


@pytest.fixture
def calendar_30():
    """Same working day and week, 30-day months."""
    return CalendarConfig(hours_per_day=8, days_per_week=5, days_per_month=30)


@pytest.fixture
def scenario():
    return default_scenario()
