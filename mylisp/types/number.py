from __future__ import annotations

import math


class Number:
    """A 64-bit float value."""

    __slots__ = ("value",)
    tag = "n"

    def __init__(self, value: float):
        self.value = float(value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __float__(self) -> float:
        return self.value

    def __repr__(self):
        return f"Number({self.value!r})"

    def __str__(self):
        v = self.value
        # integral doubles print without a trailing ".0"
        if math.isfinite(v) and v.is_integer() and abs(v) < 1e16:
            return str(int(v))
        return repr(v)
