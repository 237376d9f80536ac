from __future__ import annotations

import time
from typing import Any

SEARCH_EVENT = "search"
SHOW_ALL_EVENT = "show_all"

_events: list[dict[str, Any]] = []


def record_event(event_type: str, data: dict[str, Any]) -> None:
    """Append a usage event; *data* keys are stored alongside type and time."""
    _events.append({
        **data,
        "type": event_type,
        "timestamp": time.time(),
    })


def get_events(event_type: str | None = None) -> list[dict[str, Any]]:
    if event_type is None:
        return list(_events)
    return [e for e in _events if e["type"] == event_type]


def clear_events() -> None:
    _events.clear()
