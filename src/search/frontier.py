"""
Priority frontier for best-first search.

An array-backed binary max-heap driven by the items' own rich comparisons.
``PuzzleState`` inverts its ordering on ``total_cost``, so the "largest"
item, and therefore the one popped first, is the cheapest state.

Ties are not broken by any secondary key. Which of several equal-cost
states pops first is decided purely by the sift rules below, which makes the
search deterministic for a given input.
"""

from typing import Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


class Frontier(Generic[T]):
    """Binary max-heap with hole-based sifting."""

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._data: List[T] = list(items) if items is not None else []
        self._heapify()

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def push(self, item: T) -> None:
        self._data.append(item)
        self._sift_up(0, len(self._data) - 1)

    def pop(self) -> T:
        """Remove and return the greatest item.

        Raises:
            IndexError: If the frontier is empty
        """
        if not self._data:
            raise IndexError("pop from an empty frontier")
        item = self._data.pop()
        if self._data:
            item, self._data[0] = self._data[0], item
            self._sift_down_to_bottom(0)
        return item

    def merge(self, other: "Frontier[T]") -> None:
        """Move every item of ``other`` into this frontier, leaving it empty.

        The larger of the two arrays is kept as the base and the smaller
        one's items are pushed into it in array order.
        """
        if len(self._data) < len(other._data):
            self._data, other._data = other._data, self._data
        incoming, other._data = other._data, []
        for item in incoming:
            self.push(item)

    def _heapify(self) -> None:
        n = len(self._data) // 2
        while n > 0:
            n -= 1
            self._sift_down(n, len(self._data))

    def _sift_up(self, start: int, pos: int) -> int:
        data = self._data
        element = data[pos]
        while pos > start:
            parent = (pos - 1) // 2
            if element <= data[parent]:
                break
            data[pos] = data[parent]
            pos = parent
        data[pos] = element
        return pos

    def _sift_down(self, pos: int, end: int) -> None:
        data = self._data
        element = data[pos]
        child = 2 * pos + 1
        while child < end:
            right = child + 1
            # take the greater child; the right one wins ties
            if right < end and not (data[child] > data[right]):
                child = right
            if element >= data[child]:
                break
            data[pos] = data[child]
            pos = child
            child = 2 * pos + 1
        data[pos] = element

    def _sift_down_to_bottom(self, pos: int) -> None:
        # Push the hole all the way down, then sift the element back up.
        data = self._data
        end = len(data)
        start = pos
        element = data[pos]
        child = 2 * pos + 1
        while child < end:
            right = child + 1
            if right < end and not (data[child] > data[right]):
                child = right
            data[pos] = data[child]
            pos = child
            child = 2 * pos + 1
        data[pos] = element
        self._sift_up(start, pos)
