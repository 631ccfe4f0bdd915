"""FastAPI routes for the payback engine."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from payback.break_even import compute_break_even
from payback.config import get_cors_origins, get_default_calendar, get_max_horizon_days, get_max_points_per_day
from payback.cost_model import compute_curves, daily_cost_hours, investment_hours
from payback.formatting import Verbosity, describe_break_even, format_axis_label, format_duration
from payback.models import (
    Achieved,
    AnalyzeRequest,
    AnalyzeResponse,
    BeyondHorizon,
    BreakEvenResponse,
    CalendarConfig,
    Curves,
    DurationUnit,
    FormatRequest,
    FormatResponse,
    Labels,
    default_scenario,
)
from payback.observability import RequestLoggingMiddleware, configure_logging, get_metrics_text, record_outcome
from payback.units import UNIT_CHOICES, plural, singular, to_hours

_LOG = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    configure_logging()
    calendar = get_default_calendar()
    _LOG.info(
        "payback ready (default calendar %sh/day, %sd/week, %sd/month)",
        calendar.hours_per_day, calendar.days_per_week, calendar.days_per_month,
    )
    yield


app = FastAPI(
    title="Payback",
    description="Break-even calculator for optimizing a repeated task",
    version="0.1.0",
    lifespan=lifespan,
)
origins = get_cors_origins()
if origins:
    app.add_middleware(CORSMiddleware, allow_origins=origins, allow_credentials=True, allow_methods=["*"], allow_headers=["*"])
app.add_middleware(RequestLoggingMiddleware)


def _calendar(calendar: CalendarConfig | None) -> CalendarConfig:
    return calendar if calendar is not None else get_default_calendar()


def _check_limits(request: AnalyzeRequest) -> None:
    """Reject projections too large to sample in one request."""
    max_days = get_max_horizon_days()
    if request.scenario.horizon_days > max_days:
        raise HTTPException(status_code=422, detail=f"horizon_days must be at most {max_days}.")
    max_ppd = get_max_points_per_day()
    if request.points_per_day > max_ppd:
        raise HTTPException(status_code=422, detail=f"points_per_day must be at most {max_ppd}.")


def _labels(request: AnalyzeRequest, calendar: CalendarConfig, result) -> Labels:
    scenario = request.scenario
    labels = Labels(
        daily_before=format_duration(daily_cost_hours(scenario.before_cost, calendar, scenario.frequency), calendar),
        daily_after=format_duration(daily_cost_hours(scenario.after_cost, calendar, scenario.frequency), calendar),
        investment=format_duration(investment_hours(scenario, calendar), calendar),
    )
    if isinstance(result, (BeyondHorizon, Achieved)):
        labels.break_even = format_duration(to_hours(DurationUnit.DAY, result.day, calendar), calendar, Verbosity.LONG)
    if isinstance(result, Achieved):
        labels.hours_saved_at_horizon = format_duration(result.hours_saved_at_horizon, calendar, Verbosity.LONG)
    return labels


def _do_analyze(request: AnalyzeRequest) -> AnalyzeResponse:
    """Curves, break-even, labels and summary for one scenario."""
    calendar = _calendar(request.calendar)
    curves = compute_curves(request.scenario, calendar, request.points_per_day)
    result = compute_break_even(request.scenario, calendar)
    record_outcome(result.outcome)
    return AnalyzeResponse(
        calendar=calendar,
        curves=curves,
        break_even=result,
        labels=_labels(request, calendar, result),
        summary=describe_break_even(result, request.scenario, calendar),
    )


@app.get("/v1/health")
def health():
    return {"status": "ok", "service": "payback"}


@app.get("/v1/metrics")
def metrics():
    """Prometheus-style metrics (request counts, break-even outcomes, uptime, duration)."""
    return PlainTextResponse(get_metrics_text(), media_type="text/plain; charset=utf-8")


@app.get("/v1/units")
def units():
    """All duration units with labels, plus the units an input form offers per field."""
    return {
        "units": [{"id": u.value, "singular": singular(u), "plural": plural(u)} for u in DurationUnit],
        "choices": {field: [u.value for u in choices] for field, choices in UNIT_CHOICES.items()},
    }


@app.get("/v1/defaults")
def defaults():
    """Starting scenario and the server's default calendar."""
    return {
        "scenario": default_scenario().model_dump(mode="json"),
        "calendar": get_default_calendar().model_dump(),
    }


@app.post("/v1/curves", response_model=Curves)
def curves(request: AnalyzeRequest):
    _check_limits(request)
    return compute_curves(request.scenario, _calendar(request.calendar), request.points_per_day)


@app.post("/v1/break-even", response_model=BreakEvenResponse)
def break_even(request: AnalyzeRequest):
    calendar = _calendar(request.calendar)
    result = compute_break_even(request.scenario, calendar)
    record_outcome(result.outcome)
    return BreakEvenResponse(break_even=result, summary=describe_break_even(result, request.scenario, calendar))


@app.post("/v1/analyze", response_model=AnalyzeResponse)
def analyze(request: AnalyzeRequest):
    """Everything a chart view needs in one call."""
    _check_limits(request)
    return _do_analyze(request)


@app.post("/v1/format", response_model=FormatResponse)
def format_hours(request: FormatRequest):
    calendar = _calendar(request.calendar)
    return FormatResponse(
        short=format_duration(request.hours, calendar, Verbosity.SHORT),
        long=format_duration(request.hours, calendar, Verbosity.LONG),
        axis=format_axis_label(request.hours, calendar),
    )
