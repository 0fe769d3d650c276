"""Builtins that touch the binding table or the running session.

`set`, `get` and `dump` read and write the global binding table; `eval`
re-enters the evaluator; `exit` and `print` talk to the surrounding shell.
`eval` and `exit` need more than `(env, args)`, so `register` binds the
registry and the exit callback into them with functools.partial.
"""
from __future__ import annotations

from functools import partial
from typing import Callable, Optional

from mylisp import LispValue
from mylisp.errors import MyLispTypeError, MyLispArityError
from mylisp.evaluation.evaluator import evaluate
from mylisp.printer import to_str
from mylisp.types.cell import LispList
from mylisp.types.environment import Environment
from mylisp.types.nil import Nil, NilType
from mylisp.types.number import Number
from mylisp.types.symbol import Symbol

# Value kinds `set` accepts. Lists are stored as-is, aliasing their cells.
BINDABLE = (Number, Symbol, NilType, LispList)


def set_builtin(env: Environment, expr: list[LispValue]) -> LispValue:
    """(set 'name value): bind name to value and return the stored value."""
    if len(expr) != 2:
        raise MyLispArityError("set requires exactly 2 arguments: (set 'name value)")
    name, value = expr
    if not isinstance(name, Symbol):
        raise MyLispTypeError(f"set first argument must be a symbol, got {to_str(name)}")
    if not isinstance(value, BINDABLE):
        raise MyLispTypeError(f"set is not supported for {type(value).__name__} values")
    return env.define(name.id, value)


def get_builtin(env: Environment, expr: list[LispValue]) -> LispValue:
    """(get 'name): value bound to name, Nil if unbound."""
    if len(expr) != 1:
        raise MyLispArityError("get requires exactly 1 argument")
    name = expr[0]
    if not isinstance(name, Symbol):
        raise MyLispTypeError(f"get argument must be a symbol, got {to_str(name)}")
    return env.lookup(name.id)


def dump_builtin(env: Environment, expr: list[LispValue]) -> LispValue:
    for name, value in env.bindings():
        print(f"{name}\t{to_str(value, with_type_tag=True)}")
    return Nil


def print_builtin(env: Environment, expr: list[LispValue]) -> LispValue:
    """Print comma-separated representations of args followed by newline; returns Nil.

    Prints nothing at all when there are no arguments.
    """
    if expr:
        print(", ".join(to_str(a) for a in expr))
    return Nil


def eval_builtin(builtins, env: Environment, expr: list[LispValue]) -> LispValue:
    """(eval x): evaluate an already-evaluated value once more as code."""
    if len(expr) > 1:
        raise MyLispArityError("eval expects exactly one argument")
    if not expr:
        return Nil
    return evaluate(expr[0], env, builtins)


def exit_builtin(on_exit: Optional[Callable[[], None]], env: Environment, expr: list[LispValue]) -> LispValue:
    if on_exit is not None:
        on_exit()
    return Nil


def register(builtins, on_exit: Optional[Callable[[], None]] = None) -> None:
    builtins.update(
        {
            "set": set_builtin,
            "get": get_builtin,
            "dump": dump_builtin,
            "print": print_builtin,
            "eval": partial(eval_builtin, builtins),
            "exit": partial(exit_builtin, on_exit),
        }
    )
