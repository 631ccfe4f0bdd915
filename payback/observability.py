"""Logging setup, request logging and in-process metrics for the payback API."""
import logging
import sys
import threading
import time
import uuid
from collections import defaultdict

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from payback.config import get_log_level

_LOG = logging.getLogger(__name__)

# Reset on restart; single-process only.
_request_total: dict[tuple[str, str, int], int] = defaultdict(int)
_outcome_total: dict[str, int] = defaultdict(int)
_outcome_lock = threading.Lock()  # sync endpoints record from the threadpool
_request_duration_sec: list[float] = []
_start_time = time.time()
_MAX_DURATION_SAMPLES = 1000


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach one stdout handler to the package logger (idempotent)."""
    logger = logging.getLogger("payback")
    if logger.handlers:
        return logger
    logger.setLevel(level or get_log_level())
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)
    return logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with X-Request-ID and log method, path, status and duration."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        _request_total[(request.method, request.url.path, response.status_code)] += 1
        _request_duration_sec.append(elapsed)
        if len(_request_duration_sec) > _MAX_DURATION_SAMPLES:
            del _request_duration_sec[:-_MAX_DURATION_SAMPLES]
        _LOG.info(
            "request finished",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": round(elapsed * 1000, 2),
            },
        )
        response.headers["X-Request-ID"] = request_id
        return response


def record_outcome(outcome: str) -> None:
    """Count a break-even outcome (not_worth_it, beyond_horizon, achieved)."""
    with _outcome_lock:
        _outcome_total[outcome] += 1


def get_outcome_counts() -> dict[str, int]:
    with _outcome_lock:
        return dict(_outcome_total)


def get_metrics_text() -> str:
    """Prometheus-style text for GET /v1/metrics."""
    lines = [
        "# HELP payback_uptime_seconds Process uptime in seconds.",
        "# TYPE payback_uptime_seconds gauge",
        f"payback_uptime_seconds {time.time() - _start_time:.2f}",
        "# HELP payback_http_requests_total Total HTTP requests by method, path and status.",
        "# TYPE payback_http_requests_total counter",
    ]
    for (method, path, status), count in sorted(_request_total.items()):
        path = path.replace('"', r"\"")
        lines.append(f'payback_http_requests_total{{method="{method}",path="{path}",status="{status}"}} {count}')
    lines.extend([
        "# HELP payback_break_even_total Break-even results by outcome.",
        "# TYPE payback_break_even_total counter",
    ])
    for outcome, count in sorted(get_outcome_counts().items()):
        lines.append(f'payback_break_even_total{{outcome="{outcome}"}} {count}')
    if _request_duration_sec:
        avg = sum(_request_duration_sec) / len(_request_duration_sec)
        lines.extend([
            "# HELP payback_http_request_duration_seconds Recent request duration (avg).",
            "# TYPE payback_http_request_duration_seconds gauge",
            f"payback_http_request_duration_seconds {avg:.4f}",
        ])
    return "\n".join(lines) + "\n"
