"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

GREETING = "hello world"


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="peachc",
        description="Print the compiler's greeting.",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line, print the greeting and return the exit status."""
    parser = _build_parser()
    parser.parse_args(list(argv) if argv is not None else None)
    sys.stdout.write(f"{GREETING}\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())