"""Lexical environments: chains of scopes binding symbols to values."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from lspy import builtins
from lspy.values import Builtin, LispError, Symbol, car, cdr, cons, set_car, set_cdr


class UnboundSymbolError(LispError):
    """Raised when a symbol has no binding in any enclosing scope."""


def _name(symbol: Any) -> str:
    if isinstance(symbol, Symbol):
        return symbol.name
    if isinstance(symbol, str):
        return symbol
    raise LispError(f"expected a symbol, got {symbol!r}")


class Environment:
    """A scope of bindings with an optional enclosing scope."""

    def __init__(self, parent: Environment | None = None) -> None:
        self.parent = parent
        self._scope: dict[str, Any] = {}

    def _chain(self) -> Iterator[Environment]:
        env: Environment | None = self
        while env is not None:
            yield env
            env = env.parent

    def define(self, symbol: Any, value: Any) -> None:
        """Bind ``symbol`` to ``value`` in this, the innermost, scope."""
        name = _name(symbol)
        self._scope.pop(name, None)
        self._scope[name] = value

    def lookup(self, symbol: Any) -> Any:
        """Return the value bound to ``symbol`` in the nearest scope holding it."""
        name = _name(symbol)
        for env in self._chain():
            if name in env._scope:
                return env._scope[name]
        raise UnboundSymbolError(f"undefined variable: {name}")

    def set(self, symbol: Any, value: Any) -> None:
        """Rebind ``symbol`` in the nearest scope that already binds it."""
        name = _name(symbol)
        for env in self._chain():
            if name in env._scope:
                env._scope[name] = value
                return
        raise UnboundSymbolError(f"undefined variable: {name}")

    def child(self) -> Environment:
        """Return a new empty scope enclosed by this one."""
        return Environment(self)

    def bindings(self) -> list[tuple[Symbol, Any]]:
        """Return this scope's own bindings, most recently defined first."""
        return [(Symbol(name), value) for name, value in reversed(self._scope.items())]


def default_environment() -> Environment:
    """Return a top-level environment holding the built-in operations."""
    env = Environment()
    operations = {
        "+": builtins.int_add,
        "-": builtins.int_sub,
        "*": builtins.int_mul,
        "/": builtins.int_div,
        "cons": cons,
        "car": car,
        "set-car!": set_car,
        "cdr": cdr,
        "set-cdr!": set_cdr,
        "map": builtins.map_list,
        "fold": builtins.fold,
    }
    for name, fn in operations.items():
        env.define(Symbol(name), Builtin(name, fn))
    return env