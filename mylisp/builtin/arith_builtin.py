"""Arithmetic builtins over double-precision numbers."""

from __future__ import annotations

import math

from mylisp import LispValue
from mylisp.errors import MyLispTypeError, MyLispArityError
from mylisp.types.environment import Environment
from mylisp.types.number import Number


def _numbers(op: str, expr: list[LispValue]) -> list[float]:
    for x in expr:
        if not isinstance(x, Number):
            raise MyLispTypeError(f"All arguments to {op} must be numbers")
    return [x.value for x in expr]


def _divide(a: float, b: float) -> float:
    # IEEE semantics for division by zero
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def add(env: Environment, expr: list[LispValue]) -> Number:
    """Return the sum of all arguments, 0 when there are none."""
    result = 0.0
    for x in _numbers("+", expr):
        result += x
    return Number(result)


def sub(env: Environment, expr: list[LispValue]) -> Number:
    """Subtract every following argument from the first."""
    if not expr:
        raise MyLispArityError("- requires at least 1 argument")
    first, *rest = _numbers("-", expr)
    for x in rest:
        first -= x
    return Number(first)


def mul(env: Environment, expr: list[LispValue]) -> Number:
    """Return the product of all arguments, 1 when there are none."""
    result = 1.0
    for x in _numbers("*", expr):
        result *= x
    return Number(result)


def div(env: Environment, expr: list[LispValue]) -> Number:
    """Divide the first argument by every following one, left to right."""
    if not expr:
        raise MyLispArityError("/ requires at least 1 argument")
    first, *rest = _numbers("/", expr)
    for x in rest:
        first = _divide(first, x)
    return Number(first)


def register(builtins) -> None:
    builtins.update(
        {
            "+": add,
            "-": sub,
            "*": mul,
            "/": div,
        }
    )
