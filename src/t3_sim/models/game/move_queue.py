"""Per-player queue of live marks, oldest first."""

from typing import Iterable, Iterator, List, Optional


DEFAULT_CAPACITY = 3


class MoveQueue:
    """Fixed-capacity ring buffer of cell indices.

    Pushing onto a full queue overwrites the oldest slot and hands back the
    index that fell out, so callers can clear it from the board.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, indices: Iterable[int] = ()):
        if capacity < 1:
            raise ValueError("MoveQueue capacity must be at least 1")
        self.capacity = capacity
        self._slots: List[Optional[int]] = [None] * capacity
        self._head = 0  # slot holding the oldest index
        self._size = 0
        for idx in indices:
            self.push(idx)

    def _slot(self, offset: int) -> int:
        return (self._head + offset) % self.capacity

    def push(self, idx: int) -> Optional[int]:
        """Append an index as the newest entry.

        Returns:
            The evicted oldest index when the queue was already full, else None.
        """
        if self._size == self.capacity:
            evicted = self._slots[self._head]
            self._slots[self._head] = idx
            self._head = self._slot(1)
            return evicted

        self._slots[self._slot(self._size)] = idx
        self._size += 1
        return None

    def oldest(self) -> Optional[int]:
        """The index that would be evicted next, or None when empty."""
        if self._size == 0:
            return None
        return self._slots[self._head]

    def newest(self) -> Optional[int]:
        if self._size == 0:
            return None
        return self._slots[self._slot(self._size - 1)]

    def remove_last(self, idx: int) -> bool:
        """Remove the most recent occurrence of idx.

        Returns:
            True if an entry was removed.
        """
        for offset in range(self._size - 1, -1, -1):
            if self._slots[self._slot(offset)] == idx:
                # Close the gap by shifting newer entries one slot back
                for k in range(offset, self._size - 1):
                    self._slots[self._slot(k)] = self._slots[self._slot(k + 1)]
                self._slots[self._slot(self._size - 1)] = None
                self._size -= 1
                return True
        return False

    @property
    def is_full(self) -> bool:
        return self._size == self.capacity

    def to_list(self) -> List[int]:
        """Indices oldest-first."""
        return list(self)

    def copy(self) -> "MoveQueue":
        return MoveQueue(self.capacity, self.to_list())

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        for offset in range(self._size):
            yield self._slots[self._slot(offset)]

    def __contains__(self, idx: object) -> bool:
        return any(entry == idx for entry in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MoveQueue):
            return NotImplemented
        return self.capacity == other.capacity and self.to_list() == other.to_list()

    def __repr__(self) -> str:
        return f"MoveQueue(capacity={self.capacity}, indices={self.to_list()})"
