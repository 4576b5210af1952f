"""Tests for per-baby sessions and the session registry."""

import threading

import pytest
from helpers import NOW, TODAY, make_baby

from babymind.config import Settings
from babymind.errors import BabyNotFound
from babymind.events import AchievementUnlocked, EntityCompleted
from babymind.models import Routine, RoutineType
from babymind.rules import RuleEngine
from babymind.session import BabySession, SessionRegistry


def run_together(count: int, target) -> None:
    """Start `count` threads that call target(index) at the same moment."""
    barrier = threading.Barrier(count)

    def worker(index: int) -> None:
        barrier.wait()
        target(index)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)


class TestBabySession:
    def test_services_share_ledger_and_channel(self, rule_engine: RuleEngine) -> None:
        session = BabySession(make_baby(), rule_engine, now=NOW, settings=Settings())
        completed: list[EntityCompleted] = []
        session.events.subscribe(EntityCompleted, completed.append)

        task = session.tasks.generate_daily_tasks(TODAY)[0]
        session.tasks.complete_task(task.id, NOW)
        session.vaccinations.mark_completed(session.vaccinations.schedule()[0].id, NOW)

        assert len(completed) == 2
        assert len(session.ledger) == 2
        assert session.tasks.progress(TODAY).completed_tasks == 1

    def test_settings_applied(self, rule_engine: RuleEngine) -> None:
        settings = Settings(level_threshold=10)
        session = BabySession(make_baby(), rule_engine, now=NOW, settings=settings)
        task = session.tasks.generate_daily_tasks(TODAY)[0]
        assert session.tasks.complete_task(task.id, NOW).level == task.points // 10 + 1

    def test_seeded_collections(self, rule_engine: RuleEngine) -> None:
        session = BabySession(make_baby(), rule_engine, now=NOW, settings=Settings())
        assert len(session.safety.items()) == 22
        assert len(session.milestones.milestones()) == 19
        assert len(session.vaccinations.schedule()) == 12
        assert len(session.teeth.chart()) == 20
        assert session.illnesses.illnesses() == []
        assert session.medicines.medicines() == []


class TestSessionRegistry:
    def test_open_is_idempotent(self, rule_engine: RuleEngine) -> None:
        registry = SessionRegistry(rule_engine, Settings())
        baby = make_baby()
        first = registry.open(baby, NOW)
        assert registry.open(baby, NOW) is first
        assert registry.get(baby.id) is first
        assert len(registry) == 1

    def test_babies_isolated(self, rule_engine: RuleEngine) -> None:
        registry = SessionRegistry(rule_engine, Settings())
        one = registry.open(make_baby(name="One"), NOW)
        two = registry.open(make_baby(name="Two"), NOW)
        task = one.tasks.generate_daily_tasks(TODAY)[0]
        one.tasks.complete_task(task.id, NOW)
        assert two.tasks.progress(TODAY).total_points == 0
        assert two.tasks.all_tasks() == []

    def test_close_and_missing(self, rule_engine: RuleEngine) -> None:
        registry = SessionRegistry(rule_engine, Settings())
        baby = make_baby()
        registry.open(baby, NOW)
        assert registry.close(baby.id) is True
        assert registry.close(baby.id) is False
        with pytest.raises(BabyNotFound):
            registry.get(baby.id)


class TestConcurrentCompletion:
    def test_same_task_awarded_once(self, rule_engine: RuleEngine) -> None:
        session = BabySession(make_baby(), rule_engine, now=NOW, settings=Settings())
        unlocked: list[str] = []
        session.events.subscribe(AchievementUnlocked, lambda e: unlocked.append(e.label))
        task = session.tasks.generate_daily_tasks(TODAY)[0]

        run_together(8, lambda _: session.tasks.complete_task(task.id, NOW))

        assert len(session.ledger.events(session.baby.id)) == 1
        progress = session.tasks.progress(TODAY)
        assert progress.total_points == task.points
        assert progress.completed_tasks == 1
        assert unlocked == ["First Step"]

    def test_different_tasks_aggregate_consistently(self, rule_engine: RuleEngine) -> None:
        session = BabySession(make_baby(), rule_engine, now=NOW, settings=Settings())
        tasks = session.tasks.generate_daily_tasks(TODAY)

        def complete(index: int) -> None:
            session.tasks.complete_task(tasks[index % len(tasks)].id, NOW)

        run_together(len(tasks) * 2, complete)

        progress = session.tasks.progress(TODAY)
        assert progress.total_points == sum(t.points for t in tasks)
        assert progress.completed_tasks == len(tasks)
        assert len(session.ledger) == len(tasks)

    def test_concurrent_adds_all_stored(self, rule_engine: RuleEngine) -> None:
        session = BabySession(make_baby(), rule_engine, now=NOW, settings=Settings())
        baby_id = session.baby.id

        run_together(
            10,
            lambda i: session.routines.add_routine(
                Routine(baby_id=baby_id, routine_type=RoutineType.NAP, scheduled_at=NOW)
            ),
        )

        assert len(session.routines.routines()) == 10
