"""Registry of builtin operations.

Maps operator names to Python callables taking `(env, args)` and returning a
Lisp value. The registry is filled once and then frozen; the evaluator only
ever reads from it.
"""

from __future__ import annotations

from typing import Iterator

from mylisp import BuiltinFn
from mylisp.errors import MyLispNameError, MyLispRegistryError


class BuiltinRegistry:
    __slots__ = ("_builtins", "_frozen")

    def __init__(self):
        self._builtins: dict[str, BuiltinFn] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, name: str, fn: BuiltinFn) -> None:
        if self._frozen:
            raise MyLispRegistryError(f"Cannot register {name}: registry is frozen")
        if name in self._builtins:
            raise MyLispRegistryError(f"Builtin {name} is already registered")
        self._builtins[name] = fn

    def update(self, mapping: dict[str, BuiltinFn]) -> None:
        for name, fn in mapping.items():
            self.register(name, fn)

    def freeze(self) -> BuiltinRegistry:
        self._frozen = True
        return self

    def lookup(self, name: str) -> BuiltinFn:
        try:
            return self._builtins[name]
        except KeyError:
            raise MyLispNameError(f"Unknown function {name}") from None

    def names(self) -> list[str]:
        return sorted(self._builtins)

    def __contains__(self, name: object) -> bool:
        return name in self._builtins

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._builtins)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"<BuiltinRegistry {state} {' '.join(self.names())}>"
