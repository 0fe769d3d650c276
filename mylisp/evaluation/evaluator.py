"""Core evaluator for the mylisp interpreter.

Walks a parsed form, the same list-cell value that serves as data, and
returns its value:

- Nil evaluates to Nil; it also ends the walk down an argument chain.
- A list whose head is a Function names a call. Its argument chain is
  walked recursively and the non-Nil results are collected on the way back
  up, then handed to `apply` for resolution and dispatch.
- A list whose head is itself a list evaluates that nested call first; its
  result is the value of this position.
- A list whose head is any other atom yields that atom, which lets data
  built by `quote` or `list` be walked without change.
- `quote` is the only special form.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mylisp import SExpression, LispValue
from mylisp.errors import MyLispEvaluationError
from mylisp.evaluation.apply import apply
from mylisp.evaluation.special_forms import SPECIAL_FORMS
from mylisp.printer import to_str
from mylisp.types.cell import LispList, cdr
from mylisp.types.environment import Environment
from mylisp.types.nil import Nil
from mylisp.types.symbol import Function

if TYPE_CHECKING:
    from mylisp.builtin.registry import BuiltinRegistry

logger = logging.getLogger(__name__)


def evaluate(code: SExpression, env: Environment, builtins: BuiltinRegistry) -> LispValue:
    """Evaluate `code` against a binding table and a builtin registry."""
    return evaluate0(code, env, builtins, [])


def evaluate0(
    code: SExpression,
    env: Environment,
    builtins: BuiltinRegistry,
    collected: list[LispValue],
    depth: int = 0,
) -> LispValue:
    """
    Single evaluation step.

    `collected` is the argument accumulator of the innermost enclosing call;
    values produced while walking an argument chain are appended to it in
    reverse source order.
    """
    if code is Nil:
        return Nil
    if not isinstance(code, LispList):
        raise MyLispEvaluationError(f"Cannot evaluate {to_str(code)}: code must be nil or a list")

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%seval: %s", "  " * depth, to_str(code))

    head = code.cell.head
    if isinstance(head, Function) and head.id in SPECIAL_FORMS:
        return SPECIAL_FORMS[head.id](cdr(code), env, builtins, evaluate)

    result: LispValue = Nil
    if isinstance(head, LispList):
        # Nested call in head position gets its own accumulator
        result = evaluate0(head, env, builtins, [], depth + 1)
    elif not isinstance(head, Function):
        result = head

    if code.cell.tail is not None:
        value = evaluate0(cdr(code), env, builtins, collected, depth + 1)
        if value is not Nil:
            collected.append(value)

    if isinstance(head, Function):
        result = apply(head, collected, env, builtins, depth)
    return result
