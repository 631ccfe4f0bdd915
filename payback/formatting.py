"""Human-readable durations and break-even prose."""
import math
from enum import Enum

from payback.models import Achieved, BeyondHorizon, BreakEvenResult, CalendarConfig, DurationUnit, Scenario
from payback.units import to_hours, to_seconds

# Below this many hours (~57.6 s) values are shown in seconds only.
SECONDS_THRESHOLD_HOURS = 0.016
INFINITY_LABEL = "∞"
NAN_LABEL = "n/a"


class Verbosity(str, Enum):
    SHORT = "short"  # 2h 5m
    LONG = "long"  # 2 hours and 5 minutes


def _whole_seconds(hours: float) -> int:
    # Tolerance so 0.29 h is 1044 s, not 1043.
    return int(math.floor(to_seconds(DurationUnit.HOUR, hours) + 1e-6))


def _count(n: int | float, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


def _pair(major: int, major_short: str, major_word: str, minor: int, minor_short: str, minor_word: str, verbosity: Verbosity) -> str:
    if verbosity is Verbosity.SHORT:
        if minor > 0:
            return f"{major}{major_short} {minor}{minor_short}"
        return f"{major}{major_short}"
    if minor > 0:
        return f"{_count(major, major_word)} and {_count(minor, minor_word)}"
    return _count(major, major_word)


def _seconds(hours: float, verbosity: Verbosity) -> str:
    value = round(to_seconds(DurationUnit.HOUR, hours), 2)
    text = f"{value:g}"
    if verbosity is Verbosity.SHORT:
        return f"{text}s"
    return f"{text} second" if value == 1 else f"{text} seconds"


def _minutes_seconds(seconds: int, verbosity: Verbosity) -> str:
    return _pair(seconds // 60, "m", "minute", seconds % 60, "s", "second", verbosity)


def _hours_minutes(seconds: int, verbosity: Verbosity) -> str:
    return _pair(seconds // 3600, "h", "hour", seconds // 60 % 60, "m", "minute", verbosity)


def _days_hours(seconds: int, calendar: CalendarConfig, verbosity: Verbosity) -> str:
    whole_hours = seconds // 3600
    return _pair(
        whole_hours // calendar.hours_per_day, "d", "day",
        whole_hours % calendar.hours_per_day, "h", "hour",
        verbosity,
    )


def format_duration(hours: float, calendar: CalendarConfig, verbosity: Verbosity = Verbosity.SHORT) -> str:
    """
    Render hours with the coarsest sensible breakdown:
    < 0.016 h seconds; < 1 h minutes (+seconds); < one working day hours (+minutes);
    otherwise working days of calendar.hours_per_day (+hours). Values are truncated to whole
    seconds first and the unit is picked from that, so 0.9999999 h reads "1h", not "60m".
    Values too large to count in seconds render as INFINITY_LABEL; NaN as NAN_LABEL.
    """
    verbosity = Verbosity(verbosity)
    if math.isnan(hours):
        return NAN_LABEL
    if hours < 0:
        return "-" + format_duration(-hours, calendar, verbosity)
    if hours < SECONDS_THRESHOLD_HOURS:
        return _seconds(hours, verbosity)
    if not math.isfinite(to_seconds(DurationUnit.HOUR, hours)):
        return INFINITY_LABEL
    seconds = _whole_seconds(hours)
    if seconds < 3600:
        return _minutes_seconds(seconds, verbosity)
    if seconds < calendar.hours_per_day * 3600:
        return _hours_minutes(seconds, verbosity)
    return _days_hours(seconds, calendar, verbosity)


def format_axis_label(hours: float, calendar: CalendarConfig) -> str:
    """
    Tick label for the hours axis; empty for non-positive values.
    Same breakdown as format_duration, so ticks past one working day read in days
    (e.g. "3d 1h") rather than staying in hours and minutes.
    """
    if hours <= 0:
        return ""
    return format_duration(hours, calendar, Verbosity.SHORT)


def format_point_label(day: float, hours: float, calendar: CalendarConfig) -> str:
    """Hover label for a curve point; empty when either coordinate is negative."""
    if day < 0 or hours < 0:
        return ""
    return f"Day: {math.trunc(day)}\nSpent time: {format_duration(hours, calendar, Verbosity.SHORT)}"


def describe_break_even(result: BreakEvenResult, scenario: Scenario, calendar: CalendarConfig) -> list[str]:
    """Plain-English summary lines for a break-even result."""
    horizon = _count(scenario.horizon_days, "day")
    if isinstance(result, BeyondHorizon):
        roi = format_duration(to_hours(DurationUnit.DAY, result.day, calendar), calendar, Verbosity.LONG)
        return [
            f"After {horizon} you would not save time. You will only start to save time after {roi}.",
            "Increase the projection time frame to see the break-even point.",
        ]
    if isinstance(result, Achieved):
        roi = format_duration(to_hours(DurationUnit.DAY, result.day, calendar), calendar, Verbosity.LONG)
        if result.hours_saved_at_horizon <= 0:
            return [f"After {horizon} you would not save time yet. You will start to save time after {roi}."]
        saved = format_duration(result.hours_saved_at_horizon, calendar, Verbosity.LONG)
        return [
            f"After {horizon} you would save {saved}. You will start to save time after {roi}.",
            f"Too busy to improve? Congratulations, after {horizon} you will have wasted {saved}.",
        ]
    return ["It looks like your optimisation will not be worth it, are you sure about the data you entered?"]
