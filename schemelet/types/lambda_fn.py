"""User-defined procedure representation for schemelet."""

from __future__ import annotations

from io import StringIO

from schemelet import SExpression
from schemelet.types.symbol import Symbol


class Lambda:
    """A named procedure with positional parameters and a body of forms.

    A Lambda does not capture its defining environment: the body runs in a
    child of whichever environment is active when the procedure is called.
    """

    __slots__ = ("name", "params", "body")

    def __init__(self, name: str, params: list[Symbol], body: list[SExpression]):
        self.name: str = name
        self.params: list[Symbol] = params
        self.body: list[SExpression] = body

    @property
    def arity(self) -> int:
        return len(self.params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lambda):
            return False
        from schemelet.types.values import is_equal
        return (
            self.name == other.name
            and self.params == other.params
            and is_equal(self.body, other.body)
        )

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"(define ({self.name}")
            for p in self.params:
                buffer.write(f" {p}")
            buffer.write(")")
            for form in self.body:
                buffer.write(f" {form!r}")
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Lambda {self.name}/{self.arity}>"
