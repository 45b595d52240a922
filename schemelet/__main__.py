"""Command-line driver: evaluate a program given inline, in a file, or on stdin."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from schemelet.config import get_log_level, get_recursion_limit
from schemelet.errors import SchemeError
from schemelet.interpreter import Interpreter, run_program
from schemelet.printer import to_string


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="schemelet", description="Evaluate a schemelet program")
    parser.add_argument("file", nargs="?", type=Path, help="Program file (default: read stdin)")
    parser.add_argument("-e", "--expr", help="Program text to evaluate")
    parser.add_argument("--session", action="store_true",
                        help="Evaluate every top-level form in one environment and print each result")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )
    limit = get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    if args.expr is not None:
        program = args.expr
    elif args.file is not None:
        program = args.file.read_text(encoding="utf-8")
    else:
        program = sys.stdin.read()

    try:
        if args.session:
            for value in Interpreter().eval_each(program):
                print(to_string(value))
        else:
            print(run_program(program))
    except SchemeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
