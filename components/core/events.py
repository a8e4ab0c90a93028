"""In-process change notifications for store mutations."""

import logging
from datetime import datetime
from typing import Callable, Dict, List, NamedTuple

logger = logging.getLogger(__name__)

__all__ = [
    "event_bus",
    "revision_tracker",
    "TRANSACTIONS_CHANGED",
    "BUDGETS_CHANGED",
    "Event",
    "EventBus",
    "RevisionTracker",
]

TRANSACTIONS_CHANGED = "TRANSACTIONS_CHANGED"
BUDGETS_CHANGED = "BUDGETS_CHANGED"


class Event(NamedTuple):
    name: str
    ts: str
    payload: dict


Handler = Callable[[Event], object]


class EventBus:
    def __init__(self):
        self._subscribers: Dict[str, List[Handler]] = {}

    def subscribe(self, name: str, handler: Handler) -> None:
        self._subscribers.setdefault(name, []).append(handler)

    def unsubscribe(self, name: str, handler: Handler) -> None:
        if handler in self._subscribers.get(name, []):
            self._subscribers[name].remove(handler)

    def publish(self, name: str, payload: dict) -> List[object]:
        """Deliver the event to every subscriber and collect their results."""
        event = Event(name=name, ts=datetime.now().isoformat(), payload=payload)
        logger.debug("Publishing %s %s", name, payload)
        return [handler(event) for handler in list(self._subscribers.get(name, []))]


class RevisionTracker:
    """Counts mutations per collection so views know when to refetch."""

    def __init__(self):
        self.revisions: Dict[str, int] = {
            TRANSACTIONS_CHANGED: 0,
            BUDGETS_CHANGED: 0,
        }

    def __call__(self, event: Event) -> int:
        self.revisions[event.name] = self.revisions.get(event.name, 0) + 1
        return self.revisions[event.name]

    def attach(self, bus: EventBus) -> None:
        for name in self.revisions:
            bus.subscribe(name, self)

    def snapshot(self) -> Dict[str, int]:
        return {
            "transactions": self.revisions[TRANSACTIONS_CHANGED],
            "budgets": self.revisions[BUDGETS_CHANGED],
        }


event_bus = EventBus()
revision_tracker = RevisionTracker()
revision_tracker.attach(event_bus)
