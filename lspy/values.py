"""Core value types for the interpreter and the primitive pair operations.

Values are represented with plain Python objects:

* the empty list / null is ``None``
* integers are ``int``
* strings are ``str``
* symbols are :class:`Symbol`
* pairs are :class:`Cons`
* built-in operations are :class:`Builtin`
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


class LispError(Exception):
    """Raised when an operation is applied to values it cannot handle."""


@dataclass(frozen=True)
class Symbol:
    """An interned-by-value name, distinct from a string with the same text."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class Cons:
    """A mutable pair; both halves default to null."""

    car: Any = None
    cdr: Any = None


@dataclass(frozen=True)
class Builtin:
    """A named operation implemented in Python."""

    name: str
    fn: Callable[..., Any] = field(compare=True)

    def __call__(self, *args: Any) -> Any:
        return self.fn(*args)


def cons(*args: Any) -> Cons:
    """Build a pair from exactly two values: the car and the cdr."""
    if len(args) != 2:
        raise LispError(f"cons takes 2 arguments, got {len(args)}")
    head, tail = args
    return Cons(head, tail)


def _require_pair(value: Any) -> Cons:
    if not isinstance(value, Cons):
        raise LispError(f"expected a pair, got {value!r}")
    return value


def car(pair: Any) -> Any:
    """Return the first half of a pair."""
    return _require_pair(pair).car


def cdr(pair: Any) -> Any:
    """Return the second half of a pair."""
    return _require_pair(pair).cdr


def set_car(pair: Any, value: Any) -> None:
    """Replace the first half of a pair in place."""
    _require_pair(pair).car = value


def set_cdr(pair: Any, value: Any) -> None:
    """Replace the second half of a pair in place."""
    _require_pair(pair).cdr = value


def is_truthy(value: Any) -> bool:
    """Return the truth value of a Lisp value.

    Null is false, zero is false and the empty string is false; pairs and
    symbols are true.  Built-in operations have no truth value.
    """
    if value is None:
        return False
    if isinstance(value, Builtin):
        raise LispError("a builtin has no truth value")
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        return len(value) > 0
    return True


def from_iterable(items: Iterable[Any], tail: Any = None) -> Any:
    """Build a list from ``items`` terminated by ``tail`` (null by default)."""
    result = tail
    for item in reversed(list(items)):
        result = Cons(item, result)
    return result


def iterate(value: Any) -> Iterator[Any]:
    """Yield the elements of a proper list.

    Raises :class:`LispError` when the list ends in something other than null.
    """
    while value is not None:
        if not isinstance(value, Cons):
            raise LispError(f"expected a proper list, found tail {value!r}")
        yield value.car
        value = value.cdr