# Core type aliases for mylisp's data model.
# Code (parsed forms) and runtime values share one representation: the value
# classes in mylisp.types (Nil, Number, Symbol, Variable, Function, LispList).
#
# Naming guidance:
# - SExpression: use in reader/evaluator code for a value being treated as code.
# - LispValue:  use for a value being treated as data (arguments, results).
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Builtin operation: (env, args) -> LispValue
BuiltinFn = Callable[..., LispValue]
# Evaluator function type, handed to special forms
EvaluatorFn = Callable[..., LispValue]

from mylisp.types.nil import Nil  # noqa: E402
from mylisp.reader.parser import parse  # noqa: E402
from mylisp.evaluation.evaluator import evaluate  # noqa: E402
from mylisp.printer import to_str  # noqa: E402
from mylisp.interpreter import Interpreter  # noqa: E402

__all__ = [
    "LispValue",
    "SExpression",
    "BuiltinFn",
    "EvaluatorFn",
    "Nil",
    "parse",
    "evaluate",
    "to_str",
    "Interpreter",
]
