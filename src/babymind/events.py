"""Explicit event channel between the trackers and whoever renders alerts."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, TypeVar
from uuid import UUID

from babymind.models import EntityKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Event:
    baby_id: UUID


@dataclass(frozen=True)
class EntityCompleted(Event):
    entity_id: UUID
    kind: EntityKind
    completed_at: datetime
    points: int = 0


@dataclass(frozen=True)
class AchievementUnlocked(Event):
    label: str


@dataclass(frozen=True)
class ReminderDue(Event):
    reminder_id: UUID
    title: str
    due_at: datetime


E = TypeVar("E", bound=Event)
Handler = Callable[[Any], None]


@dataclass(eq=False)
class Subscription:
    """Handle returned by subscribe(). Close it to stop receiving events."""

    channel: "EventChannel"
    event_type: type[Event]
    handler: Handler
    active: bool = field(default=True)

    def close(self) -> None:
        if self.active:
            self.channel._unsubscribe(self)
            self.active = False

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class EventChannel:
    """Synchronous publish/subscribe. Handlers see events of their type and its subclasses."""

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []

    def subscribe(self, event_type: type[E], handler: Callable[[E], None]) -> Subscription:
        sub = Subscription(self, event_type, handler)
        self._subscriptions.append(sub)
        return sub

    def _unsubscribe(self, sub: Subscription) -> None:
        if sub in self._subscriptions:
            self._subscriptions.remove(sub)

    def publish(self, event: Event) -> int:
        """Deliver to matching subscribers. Returns how many handlers ran successfully."""
        delivered = 0
        for sub in list(self._subscriptions):
            if not isinstance(event, sub.event_type):
                continue
            try:
                sub.handler(event)
                delivered += 1
            except Exception as e:
                logger.exception("Event handler failed for %s: %s", type(event).__name__, e)
        return delivered

    def __len__(self) -> int:
        return len(self._subscriptions)
