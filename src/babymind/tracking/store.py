"""In-memory collection of one baby's records."""

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar
from uuid import UUID

from babymind.models import BabyRecord

R = TypeVar("R", bound=BabyRecord)


class CollectionStore(Generic[R]):
    """Keyed by record id. Every record belongs to the store's baby."""

    def __init__(self, baby_id: UUID) -> None:
        self.baby_id = baby_id
        self._items: dict[UUID, R] = {}

    def add(self, record: R) -> R:
        if record.baby_id != self.baby_id:
            raise ValueError(
                f"Record {record.id} belongs to baby {record.baby_id}, not {self.baby_id}"
            )
        self._items[record.id] = record
        return record

    def get(self, record_id: UUID) -> R | None:
        return self._items.get(record_id)

    def update(self, record: R) -> bool:
        """Replace an existing record. False if the id is unknown."""
        if record.id not in self._items:
            return False
        if record.baby_id != self.baby_id:
            raise ValueError(
                f"Record {record.id} belongs to baby {record.baby_id}, not {self.baby_id}"
            )
        self._items[record.id] = record
        return True

    def remove(self, record_id: UUID) -> R | None:
        return self._items.pop(record_id, None)

    def filter(self, predicate: Callable[[R], bool] | None = None) -> list[R]:
        return [r for r in self._items.values() if predicate is None or predicate(r)]

    def __iter__(self) -> Iterator[R]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._items
