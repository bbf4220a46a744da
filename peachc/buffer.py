"""A growable character buffer with a read cursor."""

from __future__ import annotations


class Buffer:
    """Characters written in sequence, readable back one at a time."""

    def __init__(self) -> None:
        self._chars: list[str] = []
        self._rindex = 0

    def __len__(self) -> int:
        return len(self._chars)

    def __repr__(self) -> str:
        return f"Buffer({self.getvalue()!r})"

    def write(self, c: str) -> None:
        """Append characters to the buffer."""
        self._chars.extend(c)

    def printf(self, fmt: str, *args: object) -> None:
        """Append the %-formatted text."""
        self._chars.extend(fmt % args)

    def printf_no_terminator(self, fmt: str, *args: object) -> None:
        """Append the %-formatted text without its final character."""
        self._chars.extend((fmt % args)[:-1])

    def read(self) -> str | None:
        """Return the next unread character, or None when none is left."""
        if self._rindex >= len(self._chars):
            return None
        c = self._chars[self._rindex]
        self._rindex += 1
        return c

    def peek(self) -> str | None:
        """Return the next unread character without consuming it."""
        if self._rindex >= len(self._chars):
            return None
        return self._chars[self._rindex]

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._chars)