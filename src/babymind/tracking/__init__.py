"""Per-baby collections, completion tracking and progress."""

from babymind.tracking.generator import DailyTaskGenerator, task_key
from babymind.tracking.ledger import CompletionEvent, CompletionLedger
from babymind.tracking.progress import (
    ProgressAggregator,
    current_streak,
    level_for,
    longest_streak,
)
from babymind.tracking.store import CollectionStore
from babymind.tracking.tracker import CompletionTracker, LockLike

__all__ = [
    "CollectionStore",
    "CompletionEvent",
    "CompletionLedger",
    "CompletionTracker",
    "DailyTaskGenerator",
    "LockLike",
    "ProgressAggregator",
    "current_streak",
    "level_for",
    "longest_streak",
    "task_key",
]
