"""Text rendering of mylisp values.

`to_str` is what the REPL shows for a result:

    nil          nil
    Number       17.8, 2, -0.5
    Symbol       'a
    Variable     x
    Function     +
    LispList     (1 (2 3) 'a)

With `with_type_tag=True` the top-level value is prefixed by its kind
(`[n] [v] [s] [f] [c]`). The tag is for display only and is not readable
back by the parser.
"""

from __future__ import annotations

from io import StringIO

from mylisp import LispValue
from mylisp.errors import MyLispTypeError
from mylisp.types.cell import LispList, iter_elements
from mylisp.types.nil import NilType
from mylisp.types.number import Number
from mylisp.types.symbol import Name


def _write(value: LispValue, buffer: StringIO) -> None:
    match value:
        case NilType():
            buffer.write("nil")
        case Number() | Name():
            buffer.write(str(value))
        case LispList():
            buffer.write("(")
            first = True
            for item in iter_elements(value):
                if not first:
                    buffer.write(" ")
                _write(item, buffer)
                first = False
            buffer.write(")")
        case _:
            raise MyLispTypeError(f"Cannot print value {value!r}")


def type_tag(value: LispValue) -> str:
    tag = getattr(value, "tag", None)
    return f"[{tag}] " if tag else ""


def to_str(value: LispValue, with_type_tag: bool = False) -> str:
    with StringIO() as buffer:
        if with_type_tag:
            buffer.write(type_tag(value))
        _write(value, buffer)
        return buffer.getvalue()
