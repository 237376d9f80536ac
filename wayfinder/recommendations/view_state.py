"""
View-state machine for a browsing session.

A session is always in one of three modes:

* ``initial``: nothing has been asked yet, no results.
* ``recommendations``: the ranked output of the last search.
* ``all``: the unscored full catalog listing.

``SearchSubmitted`` always moves to ``recommendations`` with a freshly
computed result set, ``ShowAllRequested`` always moves to ``all``.  There
is no terminal state.  ``transition`` is the pure update function;
``ViewController`` wraps it for callers that want to hold the current state
and be notified whenever it changes.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict

from .models import Destination, FilterCriteria, ScoredResult
from .selector import select, select_all

logger = logging.getLogger(__name__)


class ViewMode(str, Enum):
    initial = "initial"
    recommendations = "recommendations"
    all = "all"


class ViewState(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: ViewMode = ViewMode.initial
    results: tuple[ScoredResult, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.results

    @property
    def headline(self) -> str:
        if self.mode is ViewMode.initial:
            return "Select your preferences above to discover your next journey."
        if self.mode is ViewMode.all:
            return "Browsing all available destinations."
        if self.is_empty:
            return "No exact matches found for these specific criteria."
        return f"Found {len(self.results)} destinations perfectly matched to your criteria."


INITIAL_STATE = ViewState()


@dataclass(frozen=True)
class SearchSubmitted:
    criteria: FilterCriteria


@dataclass(frozen=True)
class ShowAllRequested:
    pass


ViewEvent = Union[SearchSubmitted, ShowAllRequested]
Listener = Callable[[ViewState], None]


def transition(
    state: ViewState,
    event: ViewEvent,
    catalog: Sequence[Destination],
) -> ViewState:
    """Return the state that follows *state* once *event* is applied."""
    if isinstance(event, SearchSubmitted):
        results = select(catalog, event.criteria)
        new_state = ViewState(mode=ViewMode.recommendations, results=tuple(results))
    elif isinstance(event, ShowAllRequested):
        new_state = ViewState(mode=ViewMode.all, results=tuple(select_all(catalog)))
    else:
        raise TypeError(f"Unsupported view event: {event!r}")

    logger.debug(
        "View %s -> %s (%d results)",
        state.mode.value,
        new_state.mode.value,
        len(new_state.results),
    )
    return new_state


class ViewController:
    """Holds the current view state and publishes every transition."""

    def __init__(
        self,
        catalog: Sequence[Destination],
        state: ViewState = INITIAL_STATE,
    ) -> None:
        self._catalog = tuple(catalog)
        self._state = state
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ViewState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; the returned callable removes it again."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def dispatch(self, event: ViewEvent) -> ViewState:
        self._state = transition(self._state, event, self._catalog)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def search(self, criteria: FilterCriteria) -> ViewState:
        return self.dispatch(SearchSubmitted(criteria))

    def show_all(self) -> ViewState:
        return self.dispatch(ShowAllRequested())
