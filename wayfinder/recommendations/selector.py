from __future__ import annotations

import logging
from collections.abc import Sequence

from .models import Destination, FilterCriteria, ScoredResult
from .scoring import score, score_breakdown

logger = logging.getLogger(__name__)

# Results must score strictly above this to be recommended
MIN_SCORE = 40

UNSCORED = 0


def select(
    catalog: Sequence[Destination],
    criteria: FilterCriteria,
) -> list[ScoredResult]:
    """Score every destination, drop weak matches and rank the rest.

    Ties keep their catalog order. An empty list means nothing matched and
    is a normal outcome.
    """
    scored: list[tuple[int, ScoredResult]] = []
    for index, destination in enumerate(catalog):
        value = score(destination, criteria)
        if value <= MIN_SCORE:
            continue
        scored.append((index, ScoredResult(
            destination=destination,
            score=value,
            breakdown=score_breakdown(destination, criteria),
        )))

    scored.sort(key=lambda item: (-item[1].score, item[0]))
    logger.debug(
        "Selected %d of %d destinations (budget=%s, month=%r, interests=%s)",
        len(scored),
        len(catalog),
        criteria.budget.value if criteria.budget else None,
        criteria.month,
        [i.value for i in criteria.interests],
    )
    return [result for _, result in scored]


def select_all(catalog: Sequence[Destination]) -> list[ScoredResult]:
    """Return the whole catalog, unscored, in catalog order."""
    return [ScoredResult(destination=d, score=UNSCORED) for d in catalog]
