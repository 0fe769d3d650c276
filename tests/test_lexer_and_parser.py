import pytest
from hypothesis import given, strategies as st

from mylisp.errors import MyLispSyntaxError
from mylisp.printer import to_str
from mylisp.reader.parser import parse, parse_atom
from mylisp.types.cell import LispList, cons, make_list, car
from mylisp.types.nil import Nil
from mylisp.types.number import Number
from mylisp.types.symbol import Function, Symbol, Variable


@pytest.mark.parametrize(
    "token, expected",
    [
        ("nil", Nil),
        ("'a", Symbol("a")),
        ("'hello-world", Symbol("hello-world")),
        ("'", Symbol("")),
        ("123", Number(123)),
        ("-45", Number(-45)),
        ("3.14", Number(3.14)),
        ("1.", Number(1.0)),
        (".5", Number(0.5)),
        ("x", Variable("x")),
        ("x1", Variable("x1")),
        ("+", Variable("+")),
        ("1e5", Variable("1e5")),
        ("Nil", Variable("Nil")),
    ]
)
def test_parse_atom(token, expected):
    assert parse_atom(token) == expected


@pytest.mark.parametrize("token", ["", "-", ".", "1-2", "1.2.3", "--1"])
def test_parse_atom_errors(token):
    with pytest.raises(MyLispSyntaxError):
        parse_atom(token)


def test_symbol_and_variable_differ():
    assert parse_atom("'a") != parse_atom("a")


def test_simple_form():
    form = parse("(+ 1 2)")
    assert form == cons(Function("+"), make_list([Number(1), Number(2)]))
    assert list(form) == [Function("+"), Number(1), Number(2)]


def test_operator_without_arguments():
    form = parse("(dump)")
    assert form == cons(Function("dump"), Nil)
    assert list(form) == [Function("dump")]


def test_operator_is_always_a_function_tag():
    assert car(parse("('a 1)")) == Function("'a")
    assert car(parse("(12 1)")) == Function("12")


def test_nested_lists():
    form = parse("(+ 1 (* 2 3) (- x))")
    op, one, mul, minus = list(form)
    assert op == Function("+")
    assert one == Number(1)
    assert list(mul) == [Function("*"), Number(2), Number(3)]
    assert list(minus) == [Function("-"), Variable("x")]


@pytest.mark.parametrize(
    "source",
    [
        "(+ 1 (* 2 3))",
        "(+\t1\n(* 2 3))",
        "   (+ 1 (* 2 3))   ",
        "(+ 1(* 2 3))",
        "(+ 1 (* 2 3 ))",
        "( + 1 ( * 2 3 ) )",
    ]
)
def test_whitespace_and_tight_parens(source):
    assert parse(source) == parse("(+ 1 (* 2 3))")


def test_form_in_operator_position():
    form = parse("((quote 5) 1)")
    head = car(form)
    assert isinstance(head, LispList)
    assert list(head) == [Function("quote"), Number(5)]
    assert list(form)[1:] == [Number(1)]


def test_only_first_form_is_returned():
    assert parse("(+ 1 2) (* 3 4)") == parse("(+ 1 2)")
    assert parse("(+ 1 2) trailing junk )") == parse("(+ 1 2)")


@pytest.mark.parametrize(
    "source",
    [
        "(+ 1 2",
        "((+ 1 2)",
        ")",
        "())",
        "()",
        "(+ 1 ())",
        "",
        "   ",
        "5",
        "foo (+ 1 2)",
        "(+ 1 -)",
    ]
)
def test_syntax_errors(source):
    with pytest.raises(MyLispSyntaxError):
        parse(source)


# -------------------------------
# Strategies
# -------------------------------
name_strat = st.from_regex(r"[a-z][a-z0-9]{0,5}", fullmatch=True).filter(lambda s: s != "nil")

atom_strat = st.one_of(
    st.integers(min_value=0, max_value=999).map(str),
    name_strat,
    name_strat.map(lambda s: "'" + s),
    st.just("nil"),
)


def _form(op, args):
    return "(" + " ".join([op, *args]) + ")"


form_strat = st.recursive(
    st.builds(_form, name_strat, st.lists(atom_strat, max_size=4)),
    lambda children: st.builds(_form, name_strat, st.lists(st.one_of(atom_strat, children), max_size=4)),
    max_leaves=12,
)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(form_strat)
def test_parse_then_print_roundtrip(source):
    assert to_str(parse(source)) == source


@given(st.text(alphabet="()' ab1.-\n", max_size=40))
def test_parser_only_raises_syntax_errors(source):
    try:
        parse(source)
    except MyLispSyntaxError:
        pass
