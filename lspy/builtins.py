"""Built-in operations: integer arithmetic, list helpers and printing."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from lspy.values import Builtin, Cons, LispError, Symbol, from_iterable, iterate


def _require_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise LispError(f"expected an integer, got {value!r}")
    return value


def int_add(a: Any, b: Any) -> int:
    """Return ``a + b``."""
    return _require_int(a) + _require_int(b)


def int_sub(a: Any, b: Any) -> int:
    """Return ``a - b``."""
    return _require_int(a) - _require_int(b)


def int_mul(a: Any, b: Any) -> int:
    """Return ``a * b``."""
    return _require_int(a) * _require_int(b)


def int_div(a: Any, b: Any) -> int:
    """Return ``a / b`` with the quotient truncated towards zero."""
    dividend = _require_int(a)
    divisor = _require_int(b)
    if divisor == 0:
        raise LispError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def map_list(fn: Callable[[Any], Any], items: Any) -> Any:
    """Apply ``fn`` to each element of a list and return a new list of results."""
    return from_iterable(fn(item) for item in iterate(items))


def fold(fn: Callable[[Any, Any], Any], init: Any, items: Any) -> Any:
    """Reduce a list from the left, calling ``fn(accumulator, item)``."""
    accumulator = init
    for item in iterate(items):
        accumulator = fn(accumulator, item)
    return accumulator


def reverse(items: Any) -> Any:
    """Return a new list holding the elements of ``items`` in reverse order."""
    result = None
    for item in iterate(items):
        result = Cons(item, result)
    return result


def to_string(value: Any) -> str:
    """Render a value the way the interpreter prints it."""
    if value is None:
        return "()"
    if isinstance(value, Cons):
        parts = [to_string(value.car)]
        rest = value.cdr
        while isinstance(rest, Cons):
            parts.append(to_string(rest.car))
            rest = rest.cdr
        if rest is not None:
            parts.append(".")
            parts.append(to_string(rest))
        return "(" + " ".join(parts) + ")"
    if isinstance(value, bool):
        raise LispError(f"cannot print {value!r}")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Symbol):
        return value.name
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, Builtin):
        return "<builtin>"
    raise LispError(f"cannot print {value!r}")