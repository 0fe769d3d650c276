from mylisp import SExpression, LispValue, EvaluatorFn
from mylisp.errors import MyLispArityError
from mylisp.types.cell import iter_elements


def quote_form(
    tail: SExpression, env, builtins, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(quote x): x exactly as parsed, without evaluating it."""
    args = list(iter_elements(tail))
    if len(args) != 1:
        raise MyLispArityError("Quote expects exactly 1 argument")
    return args[0]
