"""The compile process: input and output files and reading position."""

from __future__ import annotations

import os
from typing import IO

from peachc.tokens import Pos


class CompileProcess:
    """Holds the files of one compilation and reads the input by character.

    Characters are returned one at a time; ``None`` marks the end of input.
    """

    def __init__(
        self,
        filename: str | os.PathLike[str],
        out_filename: str | os.PathLike[str] | None = None,
        flags: int = 0,
    ) -> None:
        self.flags = flags
        self.filename = os.fspath(filename)
        self.pos = Pos(line=0, col=0, filename=self.filename)
        self._pushed: list[str] = []
        self.cfile: IO[str] = open(self.filename, "r", encoding="latin-1", newline="")
        self.ofile: IO[str] | None = None
        if out_filename is not None:
            try:
                self.ofile = open(out_filename, "w", encoding="utf-8")
            except OSError:
                self.cfile.close()
                raise

    def _getc(self) -> str | None:
        if self._pushed:
            return self._pushed.pop()
        return self.cfile.read(1) or None

    def next_char(self) -> str | None:
        """Consume and return the next character, tracking line and column."""
        self.pos.col += 1
        c = self._getc()
        if c == "\n":
            self.pos.line += 1
            self.pos.col = 1
        return c

    def peek_char(self) -> str | None:
        """Return the next character without consuming it."""
        c = self._getc()
        self.push_char(c)
        return c

    def push_char(self, c: str | None) -> None:
        """Put a character back so that it is read next."""
        if c is not None:
            self._pushed.append(c)

    def close(self) -> None:
        self.cfile.close()
        if self.ofile is not None:
            self.ofile.close()

    def __enter__(self) -> CompileProcess:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()