"""Application engine for mylisp.

Calls to builtins go through `apply`, which finishes argument collection
for the evaluator:

- The evaluator appends argument values while it unwinds the argument
  chain, so they arrive here in reverse source order. They are read back
  reversed, restoring left-to-right order.
- Every Variable left among the arguments is replaced by its binding in the
  environment (Nil when unbound). Other values pass through untouched.
- The operator name is looked up in the builtin registry and the builtin is
  called with `(env, args)`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mylisp import LispValue
from mylisp.printer import to_str
from mylisp.types.environment import Environment
from mylisp.types.symbol import Function, Variable

if TYPE_CHECKING:
    from mylisp.builtin.registry import BuiltinRegistry

logger = logging.getLogger(__name__)


def resolve(value: LispValue, env: Environment) -> LispValue:
    if isinstance(value, Variable):
        return env.lookup(value.id)
    return value


def resolve_arguments(collected: list[LispValue], env: Environment) -> list[LispValue]:
    """Source-ordered, resolved arguments from a reverse-order accumulator."""
    return [resolve(v, env) for v in reversed(collected)]


def apply(
    head: Function,
    collected: list[LispValue],
    env: Environment,
    builtins: BuiltinRegistry,
    depth: int = 0,
) -> LispValue:
    args = resolve_arguments(collected, env)
    fn = builtins.lookup(head.id)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%scall: (%s)", "  " * depth, " ".join([head.id, *map(to_str, args)]))
    return fn(env, args)
