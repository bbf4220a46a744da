"""Drives a file through the stages of compilation."""

from __future__ import annotations

import os

from peachc.cprocess import CompileProcess
from peachc.lex_process import LexProcess
from peachc.lexer import LexError, lex
from peachc.vector import Vector


class CompileError(Exception):
    """Raised when a file fails to compile."""


def compile_file(
    filename: str | os.PathLike[str],
    out_filename: str | os.PathLike[str] | None = None,
    flags: int = 0,
) -> Vector:
    """Compile a file and return the tokens found in it.

    Raises CompileError when a file cannot be opened or analysis fails.
    """
    try:
        process = CompileProcess(filename, out_filename, flags)
    except OSError as exc:
        raise CompileError(f"cannot open files for {os.fspath(filename)!r}: {exc}") from exc

    with process:
        lex_process = LexProcess(process)
        try:
            return lex(lex_process)
        except LexError as exc:
            raise CompileError(str(exc)) from exc