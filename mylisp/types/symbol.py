"""Name-carrying atoms.

Three atom kinds hold a piece of source text and differ only in how the
evaluator treats them:

- Symbol:   a quoted atom (`'a`); inert data, prints with its quote.
- Variable: a bare identifier (`a`); substituted from the binding table
            right before a builtin is called.
- Function: the operator name at the head of a parsed form (`(a ...)`).

A Symbol never equals a Variable or Function with the same text.
"""

from __future__ import annotations
import sys


class Name:
    __slots__ = ("id",)
    tag: str = "?"

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.tag, self.id))

    def __repr__(self):
        return f"{type(self).__name__}({self.id!r})"

    def __str__(self):
        return self.id


class Symbol(Name):
    __slots__ = ()
    tag = "s"

    def __str__(self):
        return f"'{self.id}"


class Variable(Name):
    __slots__ = ()
    tag = "v"


class Function(Name):
    __slots__ = ()
    tag = "f"
