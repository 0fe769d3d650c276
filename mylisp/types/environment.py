"""Global binding table for mylisp.

The Environment maps identifier text to values. There is a single flat
frame: no nesting, no scoping. Entries are overwritten by `set` and never
removed, and looking up a name that was never bound yields Nil.

Values are stored by reference, so binding a list aliases the existing
chain instead of copying it.
"""

from __future__ import annotations

from typing import Iterator

from mylisp import LispValue
from mylisp.errors import MyLispTypeError
from mylisp.types.nil import Nil
from mylisp.types.symbol import Name


def _key(name: str | Name) -> str:
    if isinstance(name, Name):
        return name.id
    if isinstance(name, str):
        return name
    raise MyLispTypeError(f"Cannot bind {name!r}: names must be text")


class Environment:
    """Flat mapping from names to Lisp values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[str, LispValue] = {}

    def define(self, name: str | Name, value: LispValue) -> LispValue:
        """Bind `name` to `value`, replacing any previous binding."""
        self.vars[_key(name)] = value
        return value

    def lookup(self, name: str | Name) -> LispValue:
        """Value bound to `name`, or Nil when it was never bound."""
        return self.vars.get(_key(name), Nil)

    def bindings(self) -> Iterator[tuple[str, LispValue]]:
        """(name, value) pairs in name order."""
        for k in sorted(self.vars):
            yield k, self.vars[k]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, (str, Name)) and _key(name) in self.vars

    def __len__(self) -> int:
        return len(self.vars)
