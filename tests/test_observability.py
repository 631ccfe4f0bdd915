"""Tests for in-process metrics."""
from concurrent.futures import ThreadPoolExecutor

from payback.observability import get_metrics_text, get_outcome_counts, record_outcome


def test_record_outcome_from_threads():
    """Sync endpoints run in a threadpool; concurrent increments must not be lost."""
    before = get_outcome_counts().get("beyond_horizon", 0)
    with ThreadPoolExecutor(max_workers=8) as pool:
        for _ in range(8):
            pool.submit(lambda: [record_outcome("beyond_horizon") for _ in range(2000)])
    assert get_outcome_counts()["beyond_horizon"] == before + 8 * 2000


def test_outcomes_in_metrics_text():
    record_outcome("not_worth_it")
    count = get_outcome_counts()["not_worth_it"]
    assert f'payback_break_even_total{{outcome="not_worth_it"}} {count}' in get_metrics_text()
