"""
NoteScore Backend — Ordered In-Memory Collection
==================================================

What:  The container each service owns: an insertion-ordered list of records
       addressed by their `id`.
Why:   Notes and Scores have the same storage needs (scan, append, replace in
       place, remove) so both services share one container type.
How:   A plain list guarded by a threading.Lock. Every find-then-mutate
       sequence runs under the lock, so it stays atomic even if handlers are
       ever moved onto a thread pool.

Complexity:
    All operations are O(n) scans over the list. Collections are small
    (tens of rows), so a positional list keeps ordering trivially correct.
"""

import threading
from typing import Callable, Generic, Iterable, List, Optional, Protocol, Tuple, TypeVar


class Identified(Protocol):
    id: str


T = TypeVar("T", bound=Identified)


class Collection(Generic[T]):
    """
    Insertion-ordered records with unique ids.

    Invariants:
        - ids are unique at all times (append rejects duplicates)
        - replace() keeps the record at the same position
        - remove() never reorders the surviving records
    """

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._items: List[T] = []
        self._lock = threading.Lock()
        for item in items or ():
            self.append(item)

    def __len__(self) -> int:
        return len(self._items)

    def all(self) -> List[T]:
        """Snapshot of every record in current order."""
        with self._lock:
            return list(self._items)

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        """Records matching `predicate`, in current order."""
        with self._lock:
            return [item for item in self._items if predicate(item)]

    def get(self, item_id: str) -> Optional[T]:
        with self._lock:
            index = self._index_of(item_id)
            return None if index is None else self._items[index]

    def append(self, item: T) -> T:
        with self._lock:
            if self._index_of(item.id) is not None:
                raise ValueError(f"Duplicate id '{item.id}'")
            self._items.append(item)
            return item

    def replace(self, item_id: str, update: Callable[[T], T]) -> Optional[Tuple[T, T]]:
        """
        Swap the record with `item_id` for `update(record)` at the same position.

        Returns:
            (previous, current) tuple, or None when the id is unknown.
        """
        with self._lock:
            index = self._index_of(item_id)
            if index is None:
                return None
            previous = self._items[index]
            current = update(previous)
            if current.id != previous.id:
                raise ValueError("Record ids are immutable")
            self._items[index] = current
            return previous, current

    def remove(self, item_id: str) -> Optional[T]:
        """Remove and return the record with `item_id`, or None when unknown."""
        with self._lock:
            index = self._index_of(item_id)
            if index is None:
                return None
            return self._items.pop(index)

    def _index_of(self, item_id: str) -> Optional[int]:
        # Caller must hold the lock.
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None


def contains_ignore_case(value: str, query: str) -> bool:
    """Case-insensitive, unanchored substring test used by both searches."""
    return query.lower() in value.lower()
