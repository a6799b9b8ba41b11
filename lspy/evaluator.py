"""Evaluation of Lisp expressions: special forms, closures and application."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lspy.env import Environment
from lspy.values import Builtin, Cons, LispError, Symbol, iterate


@dataclass
class Closure:
    """A procedure created by ``lambda``: parameters, body and defining scope."""

    params: Any
    body: Any
    env: Environment

    def __call__(self, *args: Any) -> Any:
        scope = self.env.child()
        remaining = self.params
        for value in args:
            if not isinstance(remaining, Cons):
                raise LispError("too many arguments passed to procedure")
            name = remaining.car
            if not isinstance(name, Symbol):
                raise LispError(f"parameter must be a symbol, got {name!r}")
            scope.define(name, value)
            remaining = remaining.cdr
        return _evaluate_sequence(self.body, scope)


def _evaluate_sequence(body: Any, env: Environment) -> Any:
    result = None
    for expr in iterate(body):
        result = evaluate(expr, env)
    return result


def _unpack(form: Any, count: int, name: str) -> list[Any]:
    """Return exactly ``count`` operands of a special form."""
    operands = list(iterate(form.cdr))
    if len(operands) != count:
        raise LispError(
            f"{name} takes {count} operand{'s' if count != 1 else ''}, "
            f"got {len(operands)}"
        )
    return operands


def _require_symbol(value: Any, name: str) -> Symbol:
    if not isinstance(value, Symbol):
        raise LispError(f"{name} expects a symbol, got {value!r}")
    return value


def _eval_if(form: Cons, env: Environment) -> Any:
    predicate, consequent, alternate = _unpack(form, 3, "if")
    from lspy.values import is_truthy

    if is_truthy(evaluate(predicate, env)):
        return evaluate(consequent, env)
    return evaluate(alternate, env)


def _eval_quote(form: Cons, env: Environment) -> Any:
    (quoted,) = _unpack(form, 1, "quote")
    return quoted


def _eval_define(form: Cons, env: Environment) -> None:
    symbol, value = _unpack(form, 2, "define")
    env.define(_require_symbol(symbol, "define"), evaluate(value, env))
    return None


def _eval_set(form: Cons, env: Environment) -> None:
    symbol, value = _unpack(form, 2, "set!")
    env.set(_require_symbol(symbol, "set!"), evaluate(value, env))
    return None


def _eval_lambda(form: Cons, env: Environment) -> Closure:
    rest = form.cdr
    if not isinstance(rest, Cons):
        raise LispError("lambda requires a parameter list")
    return Closure(rest.car, rest.cdr, env)


def _eval_begin(form: Cons, env: Environment) -> Any:
    return _evaluate_sequence(form.cdr, env)


_SPECIAL_FORMS: dict[str, Callable[[Cons, Environment], Any]] = {
    "if": _eval_if,
    "quote": _eval_quote,
    "define": _eval_define,
    "set!": _eval_set,
    "lambda": _eval_lambda,
    "begin": _eval_begin,
}


def _apply(procedure: Any, args: list[Any]) -> Any:
    if not isinstance(procedure, (Builtin, Closure)):
        raise LispError(f"cannot call {procedure!r}")
    return procedure(*args)


def evaluate(expr: Any, env: Environment) -> Any:
    """Evaluate ``expr`` in ``env`` and return its value."""
    if isinstance(expr, Symbol):
        return env.lookup(expr)
    if isinstance(expr, Cons):
        head = expr.car
        if isinstance(head, Symbol) and head.name in _SPECIAL_FORMS:
            return _SPECIAL_FORMS[head.name](expr, env)
        values = [evaluate(item, env) for item in iterate(expr)]
        return _apply(values[0], values[1:])
    return expr