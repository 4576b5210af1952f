"""Tests for the upcoming and overdue selectors."""

from dataclasses import dataclass

from babymind.rules import overdue, upcoming


@dataclass
class Item:
    name: str
    due: int
    is_completed: bool = False


def by_due(item: Item) -> int:
    return item.due


ITEMS = [
    Item("d", 9),
    Item("a", 2),
    Item("done", 5, is_completed=True),
    Item("c", 7),
    Item("b", 6),
    Item("old", 1),
]


class TestUpcoming:
    def test_sorted_and_windowed(self) -> None:
        result = upcoming(ITEMS, 2, 3, trigger=by_due)
        assert [i.name for i in result] == ["a", "b", "c"]

    def test_reference_is_inclusive(self) -> None:
        assert upcoming(ITEMS, 9, 3, trigger=by_due)[0].name == "d"

    def test_completed_excluded(self) -> None:
        assert all(i.name != "done" for i in upcoming(ITEMS, 0, 10, trigger=by_due))

    def test_window_larger_than_candidates(self) -> None:
        assert len(upcoming(ITEMS, 0, 50, trigger=by_due)) == 5

    def test_non_positive_window_is_empty(self) -> None:
        assert upcoming(ITEMS, 0, 0, trigger=by_due) == []
        assert upcoming(ITEMS, 0, -1, trigger=by_due) == []

    def test_custom_completed_predicate(self) -> None:
        result = upcoming(ITEMS, 0, 10, trigger=by_due, completed=lambda i: i.due > 5)
        assert [i.name for i in result] == ["old", "a", "done"]


class TestOverdue:
    def test_past_not_completed_oldest_first(self) -> None:
        assert [i.name for i in overdue(ITEMS, 6, trigger=by_due)] == ["old", "a"]

    def test_nothing_overdue_at_start(self) -> None:
        assert overdue(ITEMS, 0, trigger=by_due) == []
