"""Break-even solver: where the after line (investment included) crosses the before line."""
import logging
import math

from payback.cost_model import after_curve, after_start_day, before_curve, daily_cost_hours, investment_hours
from payback.models import Achieved, BeyondHorizon, BreakEvenResult, CalendarConfig, NotWorthIt, Scenario

_LOG = logging.getLogger(__name__)


def compute_break_even(scenario: Scenario, calendar: CalendarConfig) -> BreakEvenResult:
    """
    before: y = a * x
    after:  y = a1 * x + b1, with b1 = investment - a1 * after_start_day
    crossing x = b1 / (a - a1)
    No benefit (a1 >= a) or a crossing at or before day 0 is NotWorthIt, and so is a crossing
    too far out to represent (investment so large its hours overflow).
    """
    a = daily_cost_hours(scenario.before_cost, calendar, scenario.frequency)
    a1 = daily_cost_hours(scenario.after_cost, calendar, scenario.frequency)
    b1 = investment_hours(scenario, calendar) - a1 * after_start_day(scenario, calendar)
    _LOG.debug("break-even lines: a=%s a1=%s b1=%s", a, a1, b1)

    if a1 >= a:
        return NotWorthIt()

    x = b1 / (a - a1)
    y = a * x
    if not (math.isfinite(x) and math.isfinite(y)) or x <= 0 or y <= 0:
        return NotWorthIt()

    horizon = float(scenario.horizon_days)
    if x > horizon:
        return BeyondHorizon(day=x, cost_at_crossing=y)

    saved = before_curve(scenario, calendar)(horizon) - after_curve(scenario, calendar)(horizon)
    return Achieved(day=x, cost_at_crossing=y, hours_saved_at_horizon=saved)
