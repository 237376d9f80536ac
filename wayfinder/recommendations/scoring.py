from __future__ import annotations

import math
from fractions import Fraction

from .models import Destination, FilterCriteria, ScoreBreakdown

BUDGET_WEIGHT = 30
MONTH_WEIGHT = 30
INTEREST_WEIGHT = 40


def _budget_points(destination: Destination, criteria: FilterCriteria) -> Fraction:
    if criteria.budget is None or criteria.budget == destination.budget:
        return Fraction(BUDGET_WEIGHT)
    return Fraction(0)


def _month_points(destination: Destination, criteria: FilterCriteria) -> Fraction:
    if not criteria.month:
        return Fraction(MONTH_WEIGHT)
    wanted = criteria.month.lower()
    if any(wanted in month.lower() for month in destination.best_months):
        return Fraction(MONTH_WEIGHT)
    return Fraction(0)


def _interest_points(destination: Destination, criteria: FilterCriteria) -> Fraction:
    if not criteria.interests:
        return Fraction(INTEREST_WEIGHT)
    requested = set(criteria.interests)
    matches = sum(1 for tag in set(destination.interests) if tag in requested)
    # Coverage of what the user asked for, not of the destination's own tags
    return Fraction(matches, len(requested)) * INTEREST_WEIGHT


def _round_half_up(value: Fraction) -> int:
    return math.floor(value + Fraction(1, 2))


def score_breakdown(destination: Destination, criteria: FilterCriteria) -> ScoreBreakdown:
    """Return the per-factor contributions for *destination* under *criteria*."""
    return ScoreBreakdown(
        budget=float(_budget_points(destination, criteria)),
        month=float(_month_points(destination, criteria)),
        interests=float(_interest_points(destination, criteria)),
    )


def score(destination: Destination, criteria: FilterCriteria) -> int:
    """Compute the 0-100 match score of a single destination.

    Budget and month are all-or-nothing (30 points each). Interests earn up
    to 40 points in proportion to how many of the requested interests the
    destination offers. Unset criteria always earn full credit.
    """
    total = (
        _budget_points(destination, criteria)
        + _month_points(destination, criteria)
        + _interest_points(destination, criteria)
    )
    return _round_half_up(total)
