"""List builtins: construction, decomposition and indexing of cell chains.

Nil arguments never reach a builtin (the evaluator drops them while
collecting), so `(car nil)` arrives as a call with no arguments and is
answered with Nil.
"""

from __future__ import annotations

import math

from mylisp import LispValue
from mylisp.errors import MyLispTypeError, MyLispArityError
from mylisp.types import cell
from mylisp.types.cell import LispList
from mylisp.types.environment import Environment
from mylisp.types.nil import Nil
from mylisp.types.number import Number


def cons(env: Environment, expr: list[LispValue]) -> LispList:
    """Prepend the first argument to the second; (cons a) is (cons a nil)."""
    if not expr or len(expr) > 2:
        raise MyLispArityError("cons requires 1 or 2 arguments")
    head = expr[0]
    tail = expr[1] if len(expr) == 2 else Nil
    return cell.cons(head, tail)


def _list_argument(op: str, expr: list[LispValue]) -> LispValue:
    if len(expr) > 1:
        raise MyLispArityError(f"{op} requires exactly 1 argument")
    xs = expr[0] if expr else Nil
    if xs is not Nil and not isinstance(xs, LispList):
        raise MyLispTypeError(f"{op} argument must be a list, got {xs!r}")
    return xs


def car(env: Environment, expr: list[LispValue]) -> LispValue:
    xs = _list_argument("car", expr)
    if xs is Nil:
        return Nil
    return cell.car(xs)


def cdr(env: Environment, expr: list[LispValue]) -> LispValue:
    xs = _list_argument("cdr", expr)
    if xs is Nil:
        return Nil
    return cell.cdr(xs)


def nth(env: Environment, expr: list[LispValue]) -> LispValue:
    """(nth i xs): element i of xs, Nil past the end."""
    if len(expr) != 2:
        raise MyLispArityError("nth requires exactly 2 arguments")
    idx, xs = expr
    if not isinstance(idx, Number) or not math.isfinite(idx.value):
        raise MyLispTypeError(f"nth index must be a number, got {idx!r}")
    index = int(idx.value)
    if index < 0:
        raise MyLispTypeError(f"nth index must not be negative, got {index}")
    if not isinstance(xs, LispList):
        raise MyLispTypeError(f"nth second argument must be a list, got {xs!r}")
    return cell.nth(index, xs)


def list_builtin(env: Environment, expr: list[LispValue]) -> LispValue:
    """Construct a list from the provided arguments, in order."""
    return cell.make_list(expr)


def register(builtins) -> None:
    builtins.update(
        {
            "cons": cons,
            "car": car,
            "cdr": cdr,
            "nth": nth,
            "list": list_builtin,
        }
    )
