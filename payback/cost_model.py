"""Cumulative time-spent curves and projections (pure functions)."""
from typing import Callable

from payback.models import CalendarConfig, Curve, CurvePoint, Curves, Duration, Frequency, Scenario
from payback.units import to_hours, to_occurrences_per_day

# A day cannot hold more task time than this; higher rates saturate.
MAX_HOURS_PER_DAY = 24.0

CostFn = Callable[[float], float]


def daily_cost_hours(cost: Duration, calendar: CalendarConfig, frequency: Frequency) -> float:
    """
    hours_per_day = min(24, to_hours(cost) * occurrences_per_day(frequency))
    """
    per_occurrence = to_hours(cost.unit, cost.amount, calendar)
    per_day = to_occurrences_per_day(frequency.unit, frequency.count, calendar)
    return min(MAX_HOURS_PER_DAY, per_occurrence * per_day)


def investment_hours(scenario: Scenario, calendar: CalendarConfig) -> float:
    return to_hours(scenario.investment.unit, scenario.investment.amount, calendar)


def after_start_day(scenario: Scenario, calendar: CalendarConfig) -> float:
    """Day index at which the optimization is fully built and goes live."""
    return investment_hours(scenario, calendar) / calendar.hours_per_day


def before_curve(scenario: Scenario, calendar: CalendarConfig) -> CostFn:
    """Cumulative hours spent without optimizing: a straight line from the origin."""
    a = daily_cost_hours(scenario.before_cost, calendar, scenario.frequency)

    def curve(day: float) -> float:
        return a * day

    return curve


def invest_curve(scenario: Scenario, calendar: CalendarConfig) -> CostFn:
    """
    Hours invested by day t. The effort fills whole working days until exhausted:
    grows at hours_per_day per day, then holds at the total investment.
    """
    total = investment_hours(scenario, calendar)
    h = float(calendar.hours_per_day)

    def curve(day: float) -> float:
        if day <= 0:
            return 0.0
        # total / (h * t) < 1 means the remainder fits in the current day
        if total < h * day:
            return total
        return h * day

    return curve


def after_curve(scenario: Scenario, calendar: CalendarConfig) -> CostFn:
    """
    Cumulative hours once optimized, investment included:
    after(t) = investment + a1 * t - a1 * start, so after(start) == investment.
    Only meaningful for t >= after_start_day.
    """
    total = investment_hours(scenario, calendar)
    start = after_start_day(scenario, calendar)
    a1 = daily_cost_hours(scenario.after_cost, calendar, scenario.frequency)
    baseline = a1 * start

    def curve(day: float) -> float:
        return total + a1 * day - baseline

    return curve


def sample(fn: CostFn, start: float, end: float, points: int) -> list[CurvePoint]:
    """Evaluate fn at `points` evenly spaced days over [start, end], both ends included."""
    if points <= 0:
        return []
    if points == 1:
        return [CurvePoint(day=start, hours=fn(start))]
    step = (end - start) / (points - 1)
    out = []
    for i in range(points):
        day = end if i == points - 1 else start + i * step
        out.append(CurvePoint(day=day, hours=fn(day)))
    return out


def compute_curves(scenario: Scenario, calendar: CalendarConfig, points_per_day: int = 1) -> Curves:
    """
    Sample the before, invest and after curves. Horizon is measured from day 0 for all three,
    so every curve ends by horizon_days: the invest curve is cut at the horizon and the after
    curve is empty when the optimization is not finished within it.
    """
    horizon = float(scenario.horizon_days)
    start = after_start_day(scenario, calendar)

    before_points = sample(before_curve(scenario, calendar), 0.0, horizon, scenario.horizon_days * points_per_day + 1)

    # Always at least 2 points so a near-zero investment still shows a segment.
    invest_end = min(start, horizon)
    invest_points = sample(invest_curve(scenario, calendar), 0.0, invest_end, max(2, int(invest_end * points_per_day)))

    span = horizon - start
    if span < 0:
        after_points = []
    elif span == 0:
        after_points = sample(after_curve(scenario, calendar), start, horizon, 1)
    else:
        after_points = sample(after_curve(scenario, calendar), start, horizon, max(2, int(span * points_per_day) + 1))

    return Curves(
        before=Curve(name="before", points=before_points),
        invest=Curve(name="invested time", points=invest_points),
        after=Curve(name="after", points=after_points),
    )
