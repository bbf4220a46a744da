"""Source positions and lexical tokens."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


@dataclass
class Pos:
    """A position in a source file."""

    line: int = 1
    col: int = 1
    filename: str | None = None


class TokenType(enum.IntEnum):
    """The kinds of token the lexer produces."""

    IDENTIFIER = 0
    KEYWORD = 1
    OPERATOR = 2
    SYMBOL = 3
    NUMBER = 4
    STRING = 5
    COMMENT = 6
    NEWLINE = 7


@dataclass
class Token:
    """A single lexical token.

    ``whitespace`` is true when whitespace separates this token from the
    next one; ``between_brackets`` holds the text of the bracketed
    expression the token sits in, if any.
    """

    type: TokenType
    flags: int = 0
    value: Any = None
    whitespace: bool = False
    between_brackets: str | None = None