"""List cells and the operations on chains of them.

A pair is built from two cells: the first cell holds the car and links to
a second cell holding the cdr value. Proper lists keep the rest of the list
as a LispList in that link cell and end with a link holding Nil:

    (1 2)  ==  Cell(1) -> Cell(LispList(Cell(2) -> Cell(Nil)))

A dotted pair keeps a non-list atom in the link instead:

    (cons 1 2)  ==  Cell(1) -> Cell(2)

Cells are frozen and only ever created on top of values that already exist,
so chains can be shared freely between bindings and can never form a cycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from mylisp import LispValue
from mylisp.errors import MyLispPreconditionError
from mylisp.types.nil import Nil


@dataclass(frozen=True, slots=True, repr=False)
class Cell:
    head: LispValue
    tail: Optional[Cell] = None

    def __repr__(self) -> str:
        return f"Cell({self.head!r}{', ...' if self.tail is not None else ''})"


@dataclass(frozen=True, slots=True, repr=False)
class LispList:
    """A non-empty sequence; the empty sequence is always Nil."""

    cell: Cell
    tag = "c"

    def __iter__(self) -> Iterator[LispValue]:
        return iter_elements(self)

    def __repr__(self) -> str:
        return f"LispList({list(self)!r})"


def cons(head: LispValue, tail: LispValue) -> LispList:
    """Prepend `head` to `tail`; the existing tail value is shared, not copied."""
    return LispList(Cell(head, Cell(tail)))


def car(value: LispValue) -> LispValue:
    if not isinstance(value, LispList):
        raise MyLispPreconditionError(f"car of non-list value {value!r}")
    return value.cell.head


def cdr(value: LispValue) -> LispValue:
    """Rest of the chain: Nil for a single element, the cdr as-is otherwise."""
    if not isinstance(value, LispList):
        raise MyLispPreconditionError(f"cdr of non-list value {value!r}")
    link = value.cell.tail
    if link is None:
        return Nil
    return link.head


def make_list(values: Iterable[LispValue]) -> LispValue:
    result: LispValue = Nil
    for v in reversed(list(values)):
        result = cons(v, result)
    return result


def iter_elements(value: LispValue) -> Iterator[LispValue]:
    """Yield the elements of a chain in order.

    Walking stops at a Nil link or a missing tail. A non-list link value
    (the cdr of a dotted pair) is yielded as the final element.
    """
    while isinstance(value, LispList):
        yield value.cell.head
        value = cdr(value)
    if value is not Nil:
        yield value


def nth(index: int, value: LispValue) -> LispValue:
    """Walk `index` steps down the chain; Nil when the chain ends first."""
    if index < 0:
        raise MyLispPreconditionError(f"nth index must be non-negative, got {index}")
    for _ in range(index):
        if not isinstance(value, LispList):
            return Nil
        value = cdr(value)
    if isinstance(value, LispList):
        return car(value)
    # landed on the cdr of a dotted pair (or on Nil past the end)
    return value
