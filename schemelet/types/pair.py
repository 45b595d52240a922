from __future__ import annotations

from schemelet import LispValue


class Pair:
    """A cons cell holding two values."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        self.car = car
        self.cdr = cdr

    def __eq__(self, other: object) -> bool:
        from schemelet.types.values import is_equal
        return isinstance(other, Pair) and is_equal(self, other)

    __hash__ = None  # mutable, compared structurally

    def __repr__(self) -> str:
        return f"Pair({self.car!r}, {self.cdr!r})"
