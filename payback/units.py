"""Duration unit conversions (pure functions, no I/O)."""
from payback.models import CalendarConfig, DurationUnit

# Fixed, calendar-independent. Display only, never used for work-schedule math.
SECONDS_PER_UNIT = {
    DurationUnit.SECOND: 1.0,
    DurationUnit.MINUTE: 60.0,
    DurationUnit.HOUR: 3600.0,
    DurationUnit.DAY: 86400.0,
    DurationUnit.WEEK: 7 * 86400.0,
    DurationUnit.MONTH: 30 * 86400.0,
    DurationUnit.YEAR: 365 * 86400.0,
}

_SINGULAR = {
    DurationUnit.SECOND: "second",
    DurationUnit.MINUTE: "minute",
    DurationUnit.HOUR: "hour",
    DurationUnit.DAY: "day",
    DurationUnit.WEEK: "week",
    DurationUnit.MONTH: "month",
    DurationUnit.YEAR: "year",
}

# Units an input form offers for each scenario field. Advisory: the engine accepts any unit.
UNIT_CHOICES = {
    "frequency": [DurationUnit.HOUR, DurationUnit.DAY, DurationUnit.WEEK, DurationUnit.MONTH],
    "before_cost": [DurationUnit.SECOND, DurationUnit.MINUTE, DurationUnit.HOUR, DurationUnit.DAY],
    "after_cost": [DurationUnit.SECOND, DurationUnit.MINUTE, DurationUnit.HOUR],
    "investment": [DurationUnit.MINUTE, DurationUnit.HOUR, DurationUnit.DAY],
}


def singular(unit: DurationUnit) -> str:
    return _SINGULAR[unit]


def plural(unit: DurationUnit) -> str:
    return _SINGULAR[unit] + "s"


def hours_per_unit(unit: DurationUnit, calendar: CalendarConfig) -> float:
    """
    Working hours in one unit.
    Day = hours_per_day; Week = hours_per_day * days_per_week;
    Month = hours_per_day * days_per_month; Year = Month * 12.
    """
    h = float(calendar.hours_per_day)
    if unit == DurationUnit.SECOND:
        return 1.0 / 3600.0
    if unit == DurationUnit.MINUTE:
        return 1.0 / 60.0
    if unit == DurationUnit.HOUR:
        return 1.0
    if unit == DurationUnit.DAY:
        return h
    if unit == DurationUnit.WEEK:
        return h * calendar.days_per_week
    if unit == DurationUnit.MONTH:
        return h * calendar.days_per_month
    if unit == DurationUnit.YEAR:
        return h * calendar.days_per_month * 12
    raise ValueError(f"Unknown duration unit: {unit!r}")


def to_seconds(unit: DurationUnit, amount: float) -> float:
    return amount * SECONDS_PER_UNIT[unit]


def to_hours(unit: DurationUnit, amount: float, calendar: CalendarConfig) -> float:
    """Convert amount to working hours. Second/Minute/Hour ignore the calendar."""
    if unit == DurationUnit.SECOND:
        return amount / 60.0 / 60.0
    if unit == DurationUnit.MINUTE:
        return amount / 60.0
    return amount * hours_per_unit(unit, calendar)


def to_occurrences_per_day(unit: DurationUnit, count: float, calendar: CalendarConfig) -> float:
    """
    Normalize "count per unit" to "count per working day".
    Sub-day rates scale up by the working day length; longer units divide by their day count.
    """
    h = float(calendar.hours_per_day)
    if unit == DurationUnit.SECOND:
        return count * 60.0 * 60.0 * h
    if unit == DurationUnit.MINUTE:
        return count * 60.0 * h
    if unit == DurationUnit.HOUR:
        return count * h
    if unit == DurationUnit.DAY:
        return count
    if unit == DurationUnit.WEEK:
        return count / calendar.days_per_week
    if unit == DurationUnit.MONTH:
        return count / calendar.days_per_month
    if unit == DurationUnit.YEAR:
        return count / (calendar.days_per_month * 12.0)
    raise ValueError(f"Unknown duration unit: {unit!r}")
