"""Lexical analysis."""

from __future__ import annotations

from peachc.lex_process import LexProcess
from peachc.vector import Vector


class LexError(Exception):
    """Raised when the input cannot be split into tokens."""


def lex(process: LexProcess) -> Vector:
    """Run lexical analysis over the process and return its token vector."""
    return process.tokens()