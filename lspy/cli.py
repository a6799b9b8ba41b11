"""Command line entry point: read a program from stdin and print its value."""

from __future__ import annotations

import argparse
import sys
from typing import Any

from lspy.builtins import to_string
from lspy.env import default_environment
from lspy.evaluator import Closure, evaluate
from lspy.reader import parse
from lspy.values import Cons, LispError


def run(source: str) -> Any:
    """Evaluate the first expression in ``source`` in the default environment."""
    expressions = parse(source)
    if not isinstance(expressions, Cons):
        raise LispError("no expression to evaluate")
    return evaluate(expressions.car, default_environment())


def _render(value: Any) -> str:
    if isinstance(value, Closure):
        return "<closure>"
    return to_string(value)


def main(argv: list[str] | None = None) -> int:
    """Read a program from standard input, evaluate it and print the result."""
    parser = argparse.ArgumentParser(
        prog="lspy",
        description="Evaluate the first expression read from standard input.",
    )
    parser.parse_args(argv)
    try:
        result = run(sys.stdin.read())
        sys.stderr.write(_render(result))
    except LispError as error:
        sys.stderr.write(f"error: {error}\n")
        return 1
    sys.stderr.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())