"""Tests for the break-even solver."""
import pytest
from pydantic import ValidationError

from payback.break_even import compute_break_even
from payback.cost_model import after_curve, before_curve
from payback.models import Achieved, BeyondHorizon, Duration, DurationUnit, Frequency, NotWorthIt, Scenario


def _scenario(**overrides):
    fields = {
        "before_cost": Duration(amount=40, unit=DurationUnit.SECOND),
        "after_cost": Duration(amount=10, unit=DurationUnit.SECOND),
        "investment": Duration(amount=2, unit=DurationUnit.HOUR),
        "frequency": Frequency(count=20, unit=DurationUnit.HOUR),
        "horizon_days": 90,
    }
    fields.update(overrides)
    return Scenario(**fields)


def test_break_even_within_horizon(calendar, scenario):
    """40 s -> 10 s, 20 times per hour, 2 hours invested: pays off on day ~1.42."""
    result = compute_break_even(scenario, calendar)
    assert isinstance(result, Achieved)
    assert result.outcome == "achieved"
    # a = 160/90, a1 = 40/90, b1 = 2 - a1 / 4
    assert 0 < result.day <= 90
    assert result.day == pytest.approx(1.4166667)
    assert result.hours_saved_at_horizon > 0
    assert result.hours_saved_at_horizon == pytest.approx(160 - (2 + (40 / 90) * 89.75))


def test_crossing_is_on_both_lines(calendar, scenario):
    result = compute_break_even(scenario, calendar)
    assert before_curve(scenario, calendar)(result.day) == pytest.approx(result.cost_at_crossing)
    assert after_curve(scenario, calendar)(result.day) == pytest.approx(result.cost_at_crossing)


@pytest.mark.parametrize("investment", [0.5, 2, 40])
def test_same_cost_not_worth_it(calendar, investment):
    scenario = _scenario(
        after_cost=Duration(amount=40, unit=DurationUnit.SECOND),
        investment=Duration(amount=investment, unit=DurationUnit.HOUR),
    )
    assert isinstance(compute_break_even(scenario, calendar), NotWorthIt)


def test_slower_after_not_worth_it(calendar):
    scenario = _scenario(after_cost=Duration(amount=1, unit=DurationUnit.MINUTE))
    assert compute_break_even(scenario, calendar).outcome == "not_worth_it"


def test_zero_costs_not_worth_it(calendar):
    scenario = _scenario(
        before_cost=Duration(amount=0, unit=DurationUnit.SECOND),
        after_cost=Duration(amount=0, unit=DurationUnit.SECOND),
    )
    assert isinstance(compute_break_even(scenario, calendar), NotWorthIt)


def test_zero_investment_crosses_at_origin(calendar):
    scenario = _scenario(investment=Duration(amount=0, unit=DurationUnit.HOUR))
    assert isinstance(compute_break_even(scenario, calendar), NotWorthIt)


def test_negative_crossing_not_worth_it(calendar):
    """After costs more than a working day per day, so its line starts below zero."""
    scenario = _scenario(
        before_cost=Duration(amount=1, unit=DurationUnit.HOUR),
        after_cost=Duration(amount=30, unit=DurationUnit.MINUTE),
        frequency=Frequency(count=3, unit=DurationUnit.HOUR),
    )
    assert isinstance(compute_break_even(scenario, calendar), NotWorthIt)


def test_beyond_horizon_reports_day(calendar):
    scenario = _scenario(horizon_days=1)
    result = compute_break_even(scenario, calendar)
    assert isinstance(result, BeyondHorizon)
    assert result.day == pytest.approx(1.4166667)
    assert result.day > scenario.horizon_days


def test_large_investment_beyond_horizon(calendar):
    scenario = _scenario(investment=Duration(amount=3, unit=DurationUnit.MONTH))
    result = compute_break_even(scenario, calendar)
    assert result.outcome == "beyond_horizon"
    assert result.day > 90


def test_breaks_even_on_horizon_day(calendar):
    scenario = _scenario(horizon_days=2)
    result = compute_break_even(scenario, calendar)
    assert isinstance(result, Achieved)
    assert result.hours_saved_at_horizon == pytest.approx((120 / 90) * (2 - result.day))


def test_overflowing_investment_not_worth_it(calendar):
    """Investment hours overflow to inf, so the crossing is NaN rather than a day."""
    scenario = _scenario(investment=Duration(amount=1e308, unit=DurationUnit.YEAR))
    assert isinstance(compute_break_even(scenario, calendar), NotWorthIt)


@pytest.mark.parametrize("value", [float("inf"), float("nan")])
def test_non_finite_amounts_rejected(value):
    with pytest.raises(ValidationError):
        Duration(amount=value, unit=DurationUnit.HOUR)
    with pytest.raises(ValidationError):
        Frequency(count=value, unit=DurationUnit.DAY)
