from mylisp.types.nil import Nil, NilType
from mylisp.types.number import Number
from mylisp.types.symbol import Name, Symbol, Variable, Function
from mylisp.types.cell import Cell, LispList, cons, car, cdr, make_list, iter_elements, nth
from mylisp.types.environment import Environment

__all__ = [
    "Nil",
    "NilType",
    "Number",
    "Name",
    "Symbol",
    "Variable",
    "Function",
    "Cell",
    "LispList",
    "cons",
    "car",
    "cdr",
    "make_list",
    "iter_elements",
    "nth",
    "Environment",
]
