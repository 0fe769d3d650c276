from __future__ import annotations

from typing import Callable, Optional

from mylisp.builtin.registry import BuiltinRegistry
from mylisp.builtin import arith_builtin, list_builtin, env_builtin


def default_registry(on_exit: Optional[Callable[[], None]] = None) -> BuiltinRegistry:
    """A frozen registry holding every builtin.

    `on_exit` is called by `(exit)`; the interpreter passes its own
    shutdown hook here.
    """
    builtins = BuiltinRegistry()
    arith_builtin.register(builtins)
    list_builtin.register(builtins)
    env_builtin.register(builtins, on_exit)
    return builtins.freeze()


__all__ = ["BuiltinRegistry", "default_registry"]
