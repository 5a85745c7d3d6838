"""An ordered, growable collection with the sorts the process list relies on."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

Compare = Callable[[Any, Any], float]


def _partition(items: list[Any], left: int, right: int, pivot_index: int, compare: Compare) -> int:
    pivot = items[pivot_index]
    items[pivot_index], items[right] = items[right], items[pivot_index]
    store = left
    for i in range(left, right):
        if compare(items[i], pivot) <= 0:
            items[i], items[store] = items[store], items[i]
            store += 1
    items[store], items[right] = items[right], items[store]
    return store


def quick_sort(items: list[Any], compare: Compare) -> None:
    """Sort ``items`` in place with a middle-pivot quicksort (not stable)."""
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        pivot = _partition(items, left, right, (left + right) // 2, compare)
        pending.append((pivot + 1, right))
        pending.append((left, pivot - 1))


def insertion_sort(items: list[Any], compare: Compare) -> None:
    """Sort ``items`` in place with a stable insertion sort."""
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and compare(items[j], current) > 0:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current


class Vector:
    """A list of items with positional editing and a default comparison.

    An owning vector hands nothing back from :meth:`remove`, as the removed
    item is considered disposed of; a non-owning one returns it.
    """

    def __init__(
        self,
        compare: Compare | None = None,
        owner: bool = True,
        items: Iterable[Any] = (),
    ) -> None:
        self.compare = compare
        self.owner = owner
        self._items: list[Any] = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, owner={self.owner})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("vector index out of range")

    def insert(self, index: int, item: Any) -> None:
        """Insert ``item`` at ``index``; indexes past the end append."""
        if index < 0:
            raise IndexError("vector index must not be negative")
        self._items.insert(min(index, len(self._items)), item)

    def take(self, index: int) -> Any:
        """Remove and return the item at ``index``."""
        self._check_index(index)
        return self._items.pop(index)

    def remove(self, index: int) -> Any:
        """Remove the item at ``index``; return it unless the vector owns it."""
        removed = self.take(index)
        return None if self.owner else removed

    def move_up(self, index: int) -> None:
        """Swap the item at ``index`` with the one before it."""
        self._check_index(index)
        if index == 0:
            return
        items = self._items
        items[index], items[index - 1] = items[index - 1], items[index]

    def move_down(self, index: int) -> None:
        """Swap the item at ``index`` with the one after it."""
        self._check_index(index)
        if index == len(self._items) - 1:
            return
        items = self._items
        items[index], items[index + 1] = items[index + 1], items[index]

    def set(self, index: int, item: Any) -> None:
        """Put ``item`` at ``index``, growing the vector when needed.

        Slots skipped over when growing hold ``None``.
        """
        if index < 0:
            raise IndexError("vector index must not be negative")
        if index >= len(self._items):
            self._items.extend([None] * (index - len(self._items) + 1))
        self._items[index] = item

    def add(self, item: Any) -> None:
        """Append ``item``."""
        self._items.append(item)

    def index_of(self, item: Any, compare: Compare) -> int:
        """Index of the first element equal to ``item`` under ``compare``, or -1."""
        for index, other in enumerate(self._items):
            if compare(item, other) == 0:
                return index
        return -1

    def prune(self) -> None:
        """Remove every item."""
        self._items.clear()

    def _require_compare(self) -> Compare:
        if self.compare is None:
            raise TypeError("vector has no comparison function")
        return self.compare

    def quick_sort(self) -> None:
        """Sort with quicksort using the vector's comparison."""
        quick_sort(self._items, self._require_compare())

    def insertion_sort(self) -> None:
        """Sort stably using the vector's comparison."""
        insertion_sort(self._items, self._require_compare())