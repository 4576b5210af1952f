"""Completion tracker - complete / toggle / delete / filter over one store."""

import logging
import threading
from collections.abc import Callable
from contextlib import AbstractContextManager
from datetime import datetime
from typing import Any, Generic, TypeVar
from uuid import UUID

from babymind.events import EntityCompleted, EventChannel
from babymind.models import TrackedEntity
from babymind.tracking.ledger import CompletionLedger
from babymind.tracking.store import CollectionStore

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=TrackedEntity)

# Anything usable in a with block, normally the session's threading.RLock().
LockLike = AbstractContextManager[Any]


class CompletionTracker(Generic[E]):
    """
    Mutates completion state of one baby's entities.
    Unknown ids are a no-op for complete, toggle and delete.
    """

    def __init__(
        self,
        store: CollectionStore[E],
        ledger: CompletionLedger,
        *,
        points_of: Callable[[E], int] | None = None,
        events: EventChannel | None = None,
        lock: LockLike | None = None,
    ) -> None:
        self._store = store
        self._ledger = ledger
        self._points_of = points_of
        self._events = events
        self._lock = lock if lock is not None else threading.RLock()

    @property
    def store(self) -> CollectionStore[E]:
        return self._store

    def complete(self, entity_id: UUID, now: datetime) -> E | None:
        """Mark completed. Completing an already completed entity changes nothing."""
        with self._lock:
            entity = self._store.get(entity_id)
            if entity is None:
                logger.debug("complete: unknown entity %s", entity_id)
                return None
            if entity.is_completed:
                return entity
            return self._mark_completed(entity, now)

    def uncomplete(self, entity_id: UUID) -> E | None:
        with self._lock:
            entity = self._store.get(entity_id)
            if entity is None:
                logger.debug("uncomplete: unknown entity %s", entity_id)
                return None
            if not entity.is_completed:
                return entity
            updated = entity.model_copy(update={"is_completed": False, "completed_at": None})
            self._store.update(updated)
            self._ledger.retract(entity_id)
            return updated

    def toggle(self, entity_id: UUID, now: datetime) -> E | None:
        """Flip completion. Points are only ever awarded on the first completion."""
        with self._lock:
            entity = self._store.get(entity_id)
            if entity is None:
                logger.debug("toggle: unknown entity %s", entity_id)
                return None
            if entity.is_completed:
                return self.uncomplete(entity_id)
            return self._mark_completed(entity, now)

    def delete(self, entity_id: UUID) -> bool:
        """Permanent removal. Earned points stay in the ledger."""
        with self._lock:
            removed = self._store.remove(entity_id)
            if removed is None:
                logger.debug("delete: unknown entity %s", entity_id)
                return False
            return True

    def filter(self, baby_id: UUID, predicate: Callable[[E], bool] | None = None) -> list[E]:
        """Entities of baby_id matching predicate. Scoped before the predicate runs."""
        if baby_id != self._store.baby_id:
            return []
        scoped = self._store.filter(lambda e: e.baby_id == baby_id)
        if predicate is None:
            return scoped
        return [e for e in scoped if predicate(e)]

    def _mark_completed(self, entity: E, now: datetime) -> E:
        updated = entity.model_copy(update={"is_completed": True, "completed_at": now})
        self._store.update(updated)
        points = self._points_of(updated) if self._points_of else 0
        event = self._ledger.record(updated.id, updated.baby_id, updated.kind, now, points)
        if event.points:
            logger.info("Awarded %d points for %s %s", event.points, updated.kind.value, updated.id)
        if self._events is not None:
            self._events.publish(
                EntityCompleted(
                    baby_id=updated.baby_id,
                    entity_id=updated.id,
                    kind=updated.kind,
                    completed_at=now,
                    points=event.points,
                )
            )
        return updated
