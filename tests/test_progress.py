"""Tests for progress aggregation.

Test Categories:
- Streak calculation
- Levels
- Achievements
- Recompute from the ledger
"""

from datetime import date, timedelta
from uuid import uuid4

import pytest
from helpers import TODAY, at, make_baby

from babymind.models import EntityKind
from babymind.tracking import CompletionLedger, ProgressAggregator, current_streak, level_for, longest_streak

DAY_5 = date(2024, 6, 5)


def days(*numbers: int) -> list[date]:
    return [date(2024, 6, n) for n in numbers]


# =============================================================================
# Test Class: streaks
# =============================================================================


class TestStreak:
    def test_gap_before_today_breaks_streak(self) -> None:
        assert current_streak(days(1, 2, 3), DAY_5) == 0

    def test_streak_ending_today(self) -> None:
        assert current_streak(days(1, 2, 3, 4, 5), DAY_5) == 5

    def test_streak_ending_yesterday_still_counts(self) -> None:
        assert current_streak(days(1, 2, 3, 4), DAY_5) == 4

    def test_duplicates_and_future_days_ignored(self) -> None:
        assert current_streak(days(4, 4, 5, 5, 9), DAY_5) == 2

    def test_no_history(self) -> None:
        assert current_streak([], DAY_5) == 0

    def test_longest_streak(self) -> None:
        assert longest_streak(days(1, 2, 3, 7, 8)) == 3
        assert longest_streak([]) == 0


# =============================================================================
# Test Class: levels
# =============================================================================


class TestLevel:
    @pytest.mark.parametrize(
        ("points", "level"),
        [(0, 1), (99, 1), (100, 2), (250, 3)],
    )
    def test_level_from_points(self, points: int, level: int) -> None:
        assert level_for(points) == level

    def test_custom_threshold(self) -> None:
        assert level_for(250, threshold=50) == 6

    def test_threshold_must_be_positive(self, ledger: CompletionLedger) -> None:
        with pytest.raises(ValueError):
            ProgressAggregator(ledger, level_threshold=0)


# =============================================================================
# Test Class: recompute
# =============================================================================


class TestRecompute:
    def test_empty_history(self, ledger: CompletionLedger) -> None:
        baby = make_baby()
        progress = ProgressAggregator(ledger).recompute(baby.id, TODAY)
        assert progress.total_points == 0
        assert progress.level == 1
        assert progress.streak_days == 0
        assert progress.completed_tasks == 0
        assert progress.achievements == []

    def test_points_level_and_first_achievement(self, ledger: CompletionLedger) -> None:
        baby = make_baby()
        for points in (100, 100, 50):
            ledger.record(uuid4(), baby.id, EntityKind.TASK, at(TODAY), points)
        progress = ProgressAggregator(ledger).recompute(baby.id, TODAY)
        assert progress.total_points == 250
        assert progress.level == 3
        assert progress.streak_days == 1
        assert progress.completed_tasks == 3
        assert progress.achievements == ["First Step", "100 Points"]

    def test_seven_day_streak_achievement(self, ledger: CompletionLedger) -> None:
        baby = make_baby()
        for offset in range(7):
            ledger.record(uuid4(), baby.id, EntityKind.TASK, at(TODAY - timedelta(days=offset)), 10)
        progress = ProgressAggregator(ledger).recompute(baby.id, TODAY)
        assert progress.streak_days == 7
        assert "7 Day Streak" in progress.achievements
        assert "30 Day Streak" not in progress.achievements

    def test_future_events_excluded(self, ledger: CompletionLedger) -> None:
        baby = make_baby()
        ledger.record(uuid4(), baby.id, EntityKind.TASK, at(TODAY), 10)
        ledger.record(uuid4(), baby.id, EntityKind.TASK, at(TODAY + timedelta(days=1)), 10)
        progress = ProgressAggregator(ledger).recompute(baby.id, TODAY)
        assert progress.total_points == 10
        assert progress.completed_tasks == 1

    def test_other_kinds_and_babies_ignored(self, ledger: CompletionLedger) -> None:
        baby = make_baby()
        other = make_baby(name="Other")
        ledger.record(uuid4(), baby.id, EntityKind.ROUTINE, at(TODAY), 10)
        ledger.record(uuid4(), other.id, EntityKind.TASK, at(TODAY), 10)
        progress = ProgressAggregator(ledger).recompute(baby.id, TODAY)
        assert progress.total_points == 0
        assert progress.completed_tasks == 0

    def test_recompletion_counts_task_once(self, ledger: CompletionLedger) -> None:
        baby = make_baby()
        task_id = uuid4()
        ledger.record(task_id, baby.id, EntityKind.TASK, at(TODAY), 10)
        ledger.record(task_id, baby.id, EntityKind.TASK, at(TODAY, hour=12), 10)
        progress = ProgressAggregator(ledger).recompute(baby.id, TODAY)
        assert progress.total_points == 10
        assert progress.completed_tasks == 1

    def test_retracted_completion_keeps_points_only(self, ledger: CompletionLedger) -> None:
        baby = make_baby()
        task_id = uuid4()
        ledger.record(task_id, baby.id, EntityKind.TASK, at(TODAY - timedelta(days=1)), 10)
        ledger.record(uuid4(), baby.id, EntityKind.TASK, at(TODAY), 10)
        ledger.retract(task_id)
        progress = ProgressAggregator(ledger).recompute(baby.id, TODAY)
        assert progress.total_points == 20
        assert progress.completed_tasks == 1
        assert progress.streak_days == 1
