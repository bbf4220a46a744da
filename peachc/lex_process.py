"""State of one lexical analysis run."""

from __future__ import annotations

from typing import Any, Protocol

from peachc.buffer import Buffer
from peachc.tokens import Pos
from peachc.vector import Vector


class CharSource(Protocol):
    """Anything the lexer can pull characters from."""

    def next_char(self) -> str | None: ...

    def peek_char(self) -> str | None: ...

    def push_char(self, c: str | None) -> None: ...


class LexProcess:
    """Ties a character source to the tokens the lexer collects from it.

    ``private`` holds data owned by the caller that the lexer passes along
    untouched.
    """

    def __init__(self, compiler: CharSource, private: Any = None) -> None:
        self.compiler = compiler
        self.private = private
        self.pos = Pos(line=1, col=1)
        self.current_expression_count = 0
        self.parentheses_buffer: Buffer | None = None
        self._tokens = Vector()

    def next_char(self) -> str | None:
        return self.compiler.next_char()

    def peek_char(self) -> str | None:
        return self.compiler.peek_char()

    def push_char(self, c: str | None) -> None:
        self.compiler.push_char(c)

    def tokens(self) -> Vector:
        """Return the vector the tokens are collected in."""
        return self._tokens