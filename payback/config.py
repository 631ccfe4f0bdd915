"""Environment-driven settings: default calendar and API guards."""
import os

from payback.models import CalendarConfig


def _int_env(name: str, default: int) -> int:
    raw = (os.environ.get(name) or "").strip()
    return int(raw) if raw else default


def get_default_calendar() -> CalendarConfig:
    """Calendar used when a request omits one (PAYBACK_HOURS_PER_DAY, _DAYS_PER_WEEK, _DAYS_PER_MONTH)."""
    return CalendarConfig(
        hours_per_day=_int_env("PAYBACK_HOURS_PER_DAY", 8),
        days_per_week=_int_env("PAYBACK_DAYS_PER_WEEK", 5),
        days_per_month=_int_env("PAYBACK_DAYS_PER_MONTH", 22),
    )


def get_max_horizon_days() -> int:
    return _int_env("PAYBACK_MAX_HORIZON_DAYS", 10000)


def get_max_points_per_day() -> int:
    return _int_env("PAYBACK_MAX_POINTS_PER_DAY", 24)


def get_log_level() -> str:
    return (os.environ.get("PAYBACK_LOG_LEVEL") or "INFO").strip().upper()


def get_cors_origins() -> list[str]:
    raw = (os.environ.get("PAYBACK_CORS_ORIGINS") or "").strip()
    if not raw:
        return []
    if raw == "*":
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()]
