import pytest

from mylisp.errors import MyLispArityError, MyLispEvaluationError, MyLispNameError
from mylisp.reader.parser import parse
from mylisp.types.cell import make_list
from mylisp.types.nil import Nil
from mylisp.types.number import Number
from mylisp.types.symbol import Symbol, Variable


def test_quote_returns_form_unevaluated(run):
    assert run("(quote (+ x 5))") == parse("(+ x 5)")


def test_quote_atoms(run):
    assert run("(quote 'a)") == Symbol("a")
    assert run("(quote 7)") == Number(7)
    assert run("(quote nil)") is Nil


def test_quote_variable_is_resolved_when_passed_on(run):
    # quote leaves x untouched, but the call it is an argument of resolves it
    assert run("(quote x)") == Variable("x")
    run("(set 'x 3)")
    assert run("(list (quote x))") == make_list([Number(3)])


@pytest.mark.parametrize("source", ["(quote)", "(quote 1 2)"])
def test_quote_arity(run, source):
    with pytest.raises(MyLispArityError):
        run(source)


@pytest.mark.parametrize(
    "source",
    [
        "(+ 1 2 3)",
        "(* (+ 1 2) (- 10 4))",
        "(list 1 (list 2 3))",
        "(car (list 'a 'b))",
    ]
)
def test_eval_of_quote_matches_direct_evaluation(run, source):
    assert run(f"(eval (quote {source}))") == run(source)


def test_late_binding(run):
    run("(set 'q (quote (+ x 5)))")
    run("(set 'x 11)")
    assert run("(eval q)") == Number(16)
    run("(set 'x 1)")
    assert run("(eval q)") == Number(6)


def test_quoted_code_is_plain_data(run):
    run("(set 'q (quote (+ 1 2)))")
    assert run("(nth 1 q)") == Number(1)
    assert run("(car (cdr (cdr q)))") == Number(2)


def test_eval_without_argument(run):
    # (eval nil) never receives its nil argument
    assert run("(eval nil)") is Nil


def test_eval_arity(run):
    with pytest.raises(MyLispArityError):
        run("(eval 1 2)")


def test_eval_of_atom_is_rejected(run):
    with pytest.raises(MyLispEvaluationError):
        run("(eval 5)")


def test_eval_of_data_list_yields_its_head(run):
    # a list without an operator is walked without change
    assert run("(eval (list 1 2 3))") == Number(1)


def test_eval_of_quoted_unknown_operator(run):
    with pytest.raises(MyLispNameError):
        run("(eval (quote (1 2)))")
