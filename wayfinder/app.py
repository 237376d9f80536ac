from __future__ import annotations

import calendar
import logging
import time

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_analytics
from .analytics.store import SEARCH_EVENT, SHOW_ALL_EVENT, get_events, record_event
from .config import DEFAULT_APP_CONFIG
from .recommendations.data_store import find_destination, get_catalog
from .recommendations.models import (
    ANY_BUDGET,
    BudgetTier,
    Destination,
    FilterCriteria,
    Interest,
    MetadataResponse,
    ResultOut,
    ViewResponse,
)
from .recommendations.view_state import (
    INITIAL_STATE,
    SearchSubmitted,
    ShowAllRequested,
    ViewController,
    ViewMode,
    ViewState,
    transition,
)

logger = logging.getLogger(__name__)

app = FastAPI(title=DEFAULT_APP_CONFIG.title, version=DEFAULT_APP_CONFIG.version)
app.add_middleware(SessionMiddleware, secret_key=DEFAULT_APP_CONFIG.session_secret)


# ── Session view state ───────────────────────────────────────────────────
# The cookie keeps the mode and the criteria of the last search.  Selection
# is deterministic over a static catalog, so the result set is rebuilt from
# those on each request instead of being stored.


def _restore_state(request: Request) -> ViewState:
    raw = request.session.get("view")
    if not raw:
        return INITIAL_STATE
    try:
        mode = ViewMode(raw["mode"])
        if mode is ViewMode.recommendations:
            criteria = FilterCriteria(**raw["criteria"])
            return transition(INITIAL_STATE, SearchSubmitted(criteria), get_catalog())
        if mode is ViewMode.all:
            return transition(INITIAL_STATE, ShowAllRequested(), get_catalog())
    except (KeyError, TypeError, ValueError):
        logger.warning("Discarding unreadable session view state: %r", raw)
        request.session.pop("view", None)
    return INITIAL_STATE


def _session_mode(request: Request) -> ViewMode:
    raw = request.session.get("view")
    if not isinstance(raw, dict):
        return ViewMode.initial
    try:
        return ViewMode(raw.get("mode", ViewMode.initial.value))
    except ValueError:
        return ViewMode.initial


def _controller_for(request: Request) -> ViewController:
    # Only the mode carries over; the next event recomputes the results
    controller = ViewController(get_catalog(), state=ViewState(mode=_session_mode(request)))

    def _persist(state: ViewState) -> None:
        request.session["view"] = {"mode": state.mode.value}

    controller.subscribe(_persist)
    return controller


def _to_response(state: ViewState) -> ViewResponse:
    scored = state.mode is ViewMode.recommendations
    return ViewResponse(
        mode=state.mode.value,
        headline=state.headline,
        total=len(state.results),
        results=[
            ResultOut(
                destination=r.destination,
                score=r.score if scored else None,
                breakdown=r.breakdown if scored else None,
            )
            for r in state.results
        ],
    )


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata", response_model=MetadataResponse)
def metadata() -> MetadataResponse:
    return MetadataResponse(
        budgets=[ANY_BUDGET] + [b.value for b in BudgetTier],
        interests=[i.value for i in Interest],
        months=list(calendar.month_name)[1:],
    )


@app.get("/destinations", response_model=list[Destination])
def destinations() -> list[Destination]:
    return list(get_catalog())


@app.get("/destinations/{destination_id}", response_model=Destination)
def destination(destination_id: str) -> Destination:
    found = find_destination(destination_id)
    if found is None:
        raise HTTPException(status_code=404, detail="Destination not found")
    return found


# ── View endpoints ───────────────────────────────────────────────────────


@app.get("/view", response_model=ViewResponse)
def current_view(request: Request) -> ViewResponse:
    return _to_response(_restore_state(request))


@app.post("/search", response_model=ViewResponse)
def search(body: FilterCriteria, request: Request) -> ViewResponse:
    start_time = time.time()

    state = _controller_for(request).search(body)
    request.session["view"] = {
        "mode": state.mode.value,
        "criteria": body.model_dump(mode="json"),
    }

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event(SEARCH_EVENT, {
        "budget": body.budget.value if body.budget else None,
        "month": body.month,
        "interests": [i.value for i in body.interests],
        "results_returned": len(state.results),
        "response_time_ms": elapsed_ms,
    })
    return _to_response(state)


@app.post("/show-all", response_model=ViewResponse)
def show_all(request: Request) -> ViewResponse:
    state = _controller_for(request).show_all()
    record_event(SHOW_ALL_EVENT, {"results_returned": len(state.results)})
    return _to_response(state)


# ── Analytics ────────────────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())


def main() -> None:
    """Serve the API with uvicorn.

    Usage:
        wayfinder
        python -m wayfinder.app
    """
    uvicorn.run(app, host=DEFAULT_APP_CONFIG.host, port=DEFAULT_APP_CONFIG.port)


if __name__ == "__main__":
    main()
