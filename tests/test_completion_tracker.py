"""Tests for the collection store and completion tracker.

Test Categories:
- Store ownership
- Idempotent completion and one-time points
- Toggle, delete and unknown ids
- Baby-scoped filtering
- Completion events
- Locking
"""

import threading
from datetime import timedelta
from uuid import uuid4

import pytest
from helpers import NOW, TODAY, make_baby

from babymind.events import EntityCompleted, EventChannel
from babymind.models import Baby, SafetyCategory, SafetyChecklistItem, Task, TaskCategory
from babymind.tracking import CollectionStore, CompletionLedger, CompletionTracker, LockLike

# =============================================================================
# Helpers
# =============================================================================


def make_task(baby: Baby, **overrides) -> Task:
    return Task(
        baby_id=baby.id,
        title=overrides.pop("title", "Feed"),
        category=overrides.pop("category", TaskCategory.FEEDING),
        scheduled_at=overrides.pop("scheduled_at", NOW),
        **overrides,
    )


def task_tracker(
    baby: Baby,
    ledger: CompletionLedger,
    events: EventChannel | None = None,
    lock: LockLike | None = None,
) -> CompletionTracker[Task]:
    return CompletionTracker(
        CollectionStore[Task](baby.id),
        ledger,
        points_of=lambda t: t.points,
        events=events,
        lock=lock,
    )


class CountingLock:
    """Reentrant lock that counts how often it was entered."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self.entered = 0

    def __enter__(self) -> "CountingLock":
        self._lock.acquire()
        self.entered += 1
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._lock.release()


# =============================================================================
# Test Class: store
# =============================================================================


class TestCollectionStore:
    def test_rejects_other_baby(self, baby: Baby) -> None:
        store = CollectionStore[Task](baby.id)
        with pytest.raises(ValueError):
            store.add(make_task(make_baby(name="Other")))

    def test_update_unknown_is_false(self, baby: Baby) -> None:
        store = CollectionStore[Task](baby.id)
        assert store.update(make_task(baby)) is False

    def test_add_get_remove(self, baby: Baby) -> None:
        store = CollectionStore[Task](baby.id)
        task = store.add(make_task(baby))
        assert task.id in store
        assert store.get(task.id) == task
        assert store.remove(task.id) == task
        assert len(store) == 0


# =============================================================================
# Test Class: completion
# =============================================================================


class TestComplete:
    def test_complete_sets_timestamp(self, baby: Baby, ledger: CompletionLedger) -> None:
        tracker = task_tracker(baby, ledger)
        task = tracker.store.add(make_task(baby))
        done = tracker.complete(task.id, NOW)
        assert done is not None
        assert done.is_completed
        assert done.completed_at == NOW

    def test_complete_twice_is_idempotent(self, baby: Baby, ledger: CompletionLedger) -> None:
        tracker = task_tracker(baby, ledger)
        task = tracker.store.add(make_task(baby))
        tracker.complete(task.id, NOW)
        again = tracker.complete(task.id, NOW + timedelta(hours=1))
        assert again is not None
        assert again.completed_at == NOW
        assert len(ledger) == 1
        assert sum(e.points for e in ledger) == 10

    def test_toggle_off_and_on_awards_once(self, baby: Baby, ledger: CompletionLedger) -> None:
        tracker = task_tracker(baby, ledger)
        task = tracker.store.add(make_task(baby))
        tracker.toggle(task.id, NOW)
        off = tracker.toggle(task.id, NOW)
        assert off is not None
        assert not off.is_completed
        assert off.completed_at is None
        tracker.toggle(task.id, NOW + timedelta(minutes=5))
        assert len(ledger) == 2
        assert sum(e.points for e in ledger) == 10
        assert ledger.has_awarded(task.id)

    def test_uncomplete_retracts_standing_completion(self, baby: Baby, ledger: CompletionLedger) -> None:
        tracker = task_tracker(baby, ledger)
        task = tracker.store.add(make_task(baby))
        tracker.complete(task.id, NOW)
        assert ledger.is_standing(task.id)
        tracker.uncomplete(task.id)
        assert not ledger.is_standing(task.id)
        assert [e.standing for e in ledger] == [False]
        assert sum(e.points for e in ledger) == 10
        assert ledger.retract(task.id) is None

    def test_checklist_items_award_no_points(self, baby: Baby, ledger: CompletionLedger) -> None:
        tracker = CompletionTracker(CollectionStore[SafetyChecklistItem](baby.id), ledger)
        item = tracker.store.add(
            SafetyChecklistItem(
                baby_id=baby.id,
                category=SafetyCategory.HOME,
                item="Outlet covers",
                scheduled_at=NOW,
            )
        )
        tracker.toggle(item.id, NOW)
        assert [e.points for e in ledger] == [0]
        assert not ledger.has_awarded(item.id)


# =============================================================================
# Test Class: unknown ids, delete and filter
# =============================================================================


class TestNoOpsAndFilter:
    def test_unknown_ids_are_noops(self, baby: Baby, ledger: CompletionLedger) -> None:
        tracker = task_tracker(baby, ledger)
        missing = uuid4()
        assert tracker.complete(missing, NOW) is None
        assert tracker.toggle(missing, NOW) is None
        assert tracker.uncomplete(missing) is None
        assert tracker.delete(missing) is False
        assert len(ledger) == 0

    def test_delete_keeps_points(self, baby: Baby, ledger: CompletionLedger) -> None:
        tracker = task_tracker(baby, ledger)
        task = tracker.store.add(make_task(baby))
        tracker.complete(task.id, NOW)
        assert tracker.delete(task.id) is True
        assert len(tracker.store) == 0
        assert sum(e.points for e in ledger.events(baby.id)) == 10

    def test_filter_scoped_to_baby(self, baby: Baby, ledger: CompletionLedger) -> None:
        tracker = task_tracker(baby, ledger)
        tracker.store.add(make_task(baby, category=TaskCategory.SLEEP))
        tracker.store.add(make_task(baby, scheduled_at=NOW - timedelta(days=1)))
        assert len(tracker.filter(baby.id)) == 2
        assert tracker.filter(make_baby().id) == []

    def test_filter_predicate(self, baby: Baby, ledger: CompletionLedger) -> None:
        tracker = task_tracker(baby, ledger)
        tracker.store.add(make_task(baby, category=TaskCategory.SLEEP))
        tracker.store.add(make_task(baby, scheduled_at=NOW - timedelta(days=1)))
        today = tracker.filter(baby.id, lambda t: t.scheduled_at.date() == TODAY)
        assert [t.category for t in today] == [TaskCategory.SLEEP]


# =============================================================================
# Test Class: events
# =============================================================================


class TestCompletionEvents:
    def test_entity_completed_published(self, baby: Baby, ledger: CompletionLedger) -> None:
        channel = EventChannel()
        received: list[EntityCompleted] = []
        channel.subscribe(EntityCompleted, received.append)
        tracker = task_tracker(baby, ledger, channel)
        task = tracker.store.add(make_task(baby, points=15))

        tracker.complete(task.id, NOW)
        tracker.complete(task.id, NOW)

        assert len(received) == 1
        assert received[0].entity_id == task.id
        assert received[0].points == 15
        assert received[0].baby_id == baby.id


# =============================================================================
# Test Class: locking
# =============================================================================


class TestLocking:
    def test_any_context_manager_guards_mutations(self, baby: Baby, ledger: CompletionLedger) -> None:
        lock = CountingLock()
        tracker = task_tracker(baby, ledger, lock=lock)
        task = tracker.store.add(make_task(baby))
        tracker.toggle(task.id, NOW)
        tracker.toggle(task.id, NOW)
        tracker.delete(task.id)
        assert lock.entered >= 3
        assert not ledger.is_standing(task.id)
