from __future__ import annotations


class NilType:
    """The empty value: terminator of every chain and the empty sequence."""

    __slots__ = ()
    tag = None

    _instance: NilType | None = None

    def __new__(cls) -> NilType:
        # Single shared instance so `is Nil` checks always hold
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(None)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


Nil = NilType()
