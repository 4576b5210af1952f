"""Dated history of completion events. Source of every derived aggregate."""

from collections.abc import Iterator
from dataclasses import dataclass, replace
from datetime import datetime
from uuid import UUID

from babymind.models import EntityKind


@dataclass(frozen=True)
class CompletionEvent:
    entity_id: UUID
    baby_id: UUID
    kind: EntityKind
    completed_at: datetime
    points: int = 0
    standing: bool = True


class CompletionLedger:
    """
    Append-only. Points for an entity are awarded at most once.
    Each entity has at most one standing completion; un-completing retracts it.
    """

    def __init__(self) -> None:
        self._events: list[CompletionEvent] = []
        self._awarded: set[UUID] = set()
        self._standing: dict[UUID, int] = {}

    def record(
        self,
        entity_id: UUID,
        baby_id: UUID,
        kind: EntityKind,
        completed_at: datetime,
        points: int = 0,
    ) -> CompletionEvent:
        if entity_id in self._awarded:
            points = 0
        elif points > 0:
            self._awarded.add(entity_id)
        self.retract(entity_id)
        event = CompletionEvent(entity_id, baby_id, kind, completed_at, points)
        self._standing[entity_id] = len(self._events)
        self._events.append(event)
        return event

    def retract(self, entity_id: UUID) -> CompletionEvent | None:
        """Withdraw the standing completion of an entity. Awarded points are kept."""
        index = self._standing.pop(entity_id, None)
        if index is None:
            return None
        event = replace(self._events[index], standing=False)
        self._events[index] = event
        return event

    def has_awarded(self, entity_id: UUID) -> bool:
        return entity_id in self._awarded

    def is_standing(self, entity_id: UUID) -> bool:
        return entity_id in self._standing

    def events(self, baby_id: UUID, kind: EntityKind | None = None) -> list[CompletionEvent]:
        return [
            e
            for e in self._events
            if e.baby_id == baby_id and (kind is None or e.kind == kind)
        ]

    def __iter__(self) -> Iterator[CompletionEvent]:
        return iter(list(self._events))

    def __len__(self) -> int:
        return len(self._events)
