"""Input/output types for the payback engine."""
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class DurationUnit(str, Enum):
    """Closed set of time units accepted for costs, investment and frequency."""
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class CalendarConfig(BaseModel):
    """Working calendar used to turn day/week/month/year into hours."""
    model_config = ConfigDict(frozen=True)

    hours_per_day: int = Field(8, ge=1, le=24, description="Working hours in one day")
    days_per_week: int = Field(5, ge=1, le=7, description="Working days in one week")
    days_per_month: int = Field(22, ge=1, le=31, description="Working days in one month (x12 for a year)")


class Duration(BaseModel):
    """Amount of time expressed in a unit."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    amount: float = Field(..., ge=0)
    unit: DurationUnit


class Frequency(BaseModel):
    """How often the task recurs, e.g. 20 times per hour."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    count: float = Field(..., ge=0)
    unit: DurationUnit


class Scenario(BaseModel):
    """Everything needed to project a task before and after optimizing it."""
    model_config = ConfigDict(frozen=True)

    before_cost: Duration = Field(..., description="Time to perform the task today")
    after_cost: Duration = Field(..., description="Time to perform the task once optimized")
    investment: Duration = Field(..., description="One-time cost to build the optimization")
    frequency: Frequency
    horizon_days: int = Field(..., ge=1, description="Number of days to project, from day 0")


class CurvePoint(BaseModel):
    day: float
    hours: float


class Curve(BaseModel):
    """Sampled cumulative hours spent, by day index."""
    name: str
    points: list[CurvePoint] = Field(default_factory=list)


class Curves(BaseModel):
    before: Curve
    invest: Curve
    after: Curve


class NotWorthIt(BaseModel):
    """After is not cheaper, or the crossing lands at or before day 0."""
    outcome: Literal["not_worth_it"] = "not_worth_it"


class BeyondHorizon(BaseModel):
    """Break-even exists but falls after the projected horizon."""
    outcome: Literal["beyond_horizon"] = "beyond_horizon"
    day: float
    cost_at_crossing: float


class Achieved(BaseModel):
    """Break-even reached within the horizon."""
    outcome: Literal["achieved"] = "achieved"
    day: float
    cost_at_crossing: float
    hours_saved_at_horizon: float  # may be negative in degenerate horizons


BreakEvenResult = Annotated[
    Union[NotWorthIt, BeyondHorizon, Achieved],
    Field(discriminator="outcome"),
]


class AnalyzeRequest(BaseModel):
    """Request body for /v1/curves, /v1/break-even and /v1/analyze."""
    scenario: Scenario
    calendar: Optional[CalendarConfig] = None  # server default when omitted
    points_per_day: int = Field(1, ge=1, description="Curve sampling resolution")


class Labels(BaseModel):
    """Formatted values for display next to the chart."""
    daily_before: str
    daily_after: str
    investment: str
    break_even: Optional[str] = None
    hours_saved_at_horizon: Optional[str] = None


class AnalyzeResponse(BaseModel):
    """Response from /v1/analyze."""
    calendar: CalendarConfig
    curves: Curves
    break_even: BreakEvenResult
    labels: Labels
    summary: list[str] = Field(default_factory=list)


class BreakEvenResponse(BaseModel):
    """Response from /v1/break-even."""
    break_even: BreakEvenResult
    summary: list[str] = Field(default_factory=list)


class FormatRequest(BaseModel):
    """Request body for /v1/format."""
    model_config = ConfigDict(allow_inf_nan=False)

    hours: float
    calendar: Optional[CalendarConfig] = None


class FormatResponse(BaseModel):
    short: str
    long: str
    axis: str


def default_calendar() -> CalendarConfig:
    return CalendarConfig(hours_per_day=8, days_per_week=5, days_per_month=22)


def default_scenario() -> Scenario:
    """40 seconds cut to 10 seconds, 20 times per hour, for 2 hours of work, over 90 days."""
    return Scenario(
        before_cost=Duration(amount=40, unit=DurationUnit.SECOND),
        after_cost=Duration(amount=10, unit=DurationUnit.SECOND),
        investment=Duration(amount=2, unit=DurationUnit.HOUR),
        frequency=Frequency(count=20, unit=DurationUnit.HOUR),
        horizon_days=90,
    )
