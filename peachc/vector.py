"""A sequence with a peek cursor and savable cursor state."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterable, Iterator


class VectorFlag(enum.IntFlag):
    """Flags that change how a Vector behaves."""

    NONE = 0
    PEEK_DECREMENT = 1


@dataclass(frozen=True)
class _SavedState:
    pindex: int
    count: int
    flags: VectorFlag


class Vector:
    """A list with a peek pointer that can walk forwards or backwards.

    Saving and restoring records only the cursor, the element count and the
    flags; element data is never restored.
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._slots: list[Any] = list(items) if items is not None else []
        self._count = len(self._slots)
        self._pindex = 0
        self.flags = VectorFlag.NONE
        self._saves: list[_SavedState] = []

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[: self._count])

    def __getitem__(self, index: int) -> Any:
        return self._slots[: self._count][index]

    def __repr__(self) -> str:
        return f"Vector({list(self)!r})"

    def _trim(self) -> None:
        del self._slots[self._count :]

    def push(self, item: Any) -> None:
        """Append an item at the end."""
        if self._count < len(self._slots):
            self._slots[self._count] = item
        else:
            self._slots.append(item)
        self._count += 1

    def push_at(self, index: int, item: Any) -> None:
        """Insert an item at index, padding with None past the end."""
        self.insert([item], index)

    def insert(self, other: Iterable[Any], index: int) -> None:
        """Insert all items of other starting at index."""
        if index < 0:
            raise IndexError("vector index out of range")
        items = list(other)
        self._trim()
        if index >= self._count:
            self._slots.extend([None] * (index - self._count))
            self._slots.extend(items)
        else:
            self._slots[index:index] = items
        self._count = len(self._slots)

    def pop(self) -> Any:
        """Remove and return the last item."""
        if self._count == 0:
            raise IndexError("pop from empty vector")
        self._count -= 1
        return self._slots[self._count]

    def pop_at(self, index: int) -> Any:
        """Remove and return the item at index."""
        if not 0 <= index < self._count:
            raise IndexError("vector index out of range")
        self._trim()
        item = self._slots.pop(index)
        self._count -= 1
        return item

    def pop_value(self, value: Any) -> int | None:
        """Remove the first item equal to value; return its index or None."""
        for index, item in enumerate(self):
            if item == value:
                self.pop_at(index)
                return index
        return None

    def peek_pop(self) -> Any:
        """Remove and return the item under the peek pointer."""
        return self.pop_at(self._pindex)

    def pop_last_peek(self) -> Any:
        """Remove and return the item most recently peeked."""
        if self._pindex < 1:
            raise IndexError("no item has been peeked")
        return self.pop_at(self._pindex - 1)

    def peek(self) -> Any:
        """Return the item under the peek pointer and move the pointer."""
        if not 0 <= self._pindex < self._count:
            return None
        item = self._slots[self._pindex]
        if self.flags & VectorFlag.PEEK_DECREMENT:
            self._pindex -= 1
        else:
            self._pindex += 1
        return item

    def peek_no_increment(self) -> Any:
        """Return the item under the peek pointer without moving it."""
        return self.peek_at(self._pindex)

    def peek_at(self, index: int) -> Any:
        """Return the item at index, or None when out of range."""
        if not 0 <= index < self._count:
            return None
        return self._slots[index]

    def peek_back(self) -> None:
        """Step the peek pointer back by one."""
        self._pindex -= 1

    def set_peek_pointer(self, index: int) -> None:
        self._pindex = index

    def set_peek_pointer_end(self) -> None:
        self._pindex = self._count - 1

    @property
    def peek_pointer(self) -> int:
        return self._pindex

    def set_flag(self, flag: VectorFlag) -> None:
        self.flags |= flag

    def unset_flag(self, flag: VectorFlag) -> None:
        self.flags &= ~flag

    def back(self) -> Any:
        """Return the last item; raise IndexError when empty."""
        if self._count == 0:
            raise IndexError("back of empty vector")
        return self._slots[self._count - 1]

    def back_or_none(self) -> Any:
        """Return the last item, or None when empty."""
        if self._count == 0:
            return None
        return self._slots[self._count - 1]

    def empty(self) -> bool:
        return self._count == 0

    def clear(self) -> None:
        self._count = 0

    def current_index(self) -> int:
        """Return the index the next push writes to."""
        return self._count

    def save(self) -> None:
        """Record the cursor, count and flags on the save stack."""
        self._saves.append(_SavedState(self._pindex, self._count, self.flags))

    def restore(self) -> None:
        """Return to the most recently saved state and drop it."""
        if not self._saves:
            raise IndexError("no saved state to restore")
        state = self._saves.pop()
        self._pindex = state.pindex
        self._count = min(state.count, len(self._slots))
        self.flags = state.flags

    def save_purge(self) -> None:
        """Drop the most recently saved state without applying it."""
        if not self._saves:
            raise IndexError("no saved state to purge")
        self._saves.pop()

    def clone(self) -> Vector:
        """Copy the items, peek pointer and flags; saves are not copied."""
        copy = Vector(self)
        copy._pindex = self._pindex
        copy.flags = self.flags
        return copy