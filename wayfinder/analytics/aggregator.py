from __future__ import annotations

from collections import Counter
from typing import Any

from .store import SEARCH_EVENT, SHOW_ALL_EVENT


def _rate(count: int, total: int) -> float:
    return round(count / total * 100, 1) if total else 0.0


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == SEARCH_EVENT]
    show_all = [e for e in events if e["type"] == SHOW_ALL_EVENT]
    total = len(searches)

    # Average response time
    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Average results per search and how often nothing matched
    returned = [s.get("results_returned", 0) for s in searches]
    avg_results = round(sum(returned) / total, 1) if total else 0.0
    no_match = sum(1 for r in returned if r == 0)

    # Top months (normalised so "Jun" and "jun" count together)
    month_counter: Counter[str] = Counter()
    for s in searches:
        month = (s.get("month") or "").strip().lower()
        if month:
            month_counter[month] += 1
    top_months = [{"name": n, "count": c} for n, c in month_counter.most_common(10)]

    # Top interests
    interest_counter: Counter[str] = Counter()
    for s in searches:
        for i in s.get("interests", []) or []:
            interest_counter[i] += 1
    top_interests = [{"name": n, "count": c} for n, c in interest_counter.most_common(10)]

    # Budget tier usage
    budget_counter: Counter[str] = Counter()
    for s in searches:
        if s.get("budget"):
            budget_counter[s["budget"]] += 1
    budget_usage = dict(budget_counter)

    # Filter usage rates
    filter_counts = {"budget": 0, "month": 0, "interests": 0}
    for s in searches:
        if s.get("budget"):
            filter_counts["budget"] += 1
        if s.get("month"):
            filter_counts["month"] += 1
        if s.get("interests"):
            filter_counts["interests"] += 1
    filter_usage = {k: _rate(v, total) for k, v in filter_counts.items()}

    return {
        "total_searches": total,
        "total_show_all": len(show_all),
        "avg_response_time_ms": avg_time,
        "avg_results_per_search": avg_results,
        "no_match_rate": _rate(no_match, total),
        "top_months": top_months,
        "top_interests": top_interests,
        "budget_usage": budget_usage,
        "filter_usage": filter_usage,
    }
