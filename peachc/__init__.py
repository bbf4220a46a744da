"""Groundwork for a small C compiler: character reading, tokens and a lexing stage."""

__version__ = "0.1.0"
__all__ = ["buffer", "vector", "tokens", "cprocess", "lex_process", "lexer", "compiler", "cli"]