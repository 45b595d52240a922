"""Display rendering for schemelet values."""

from __future__ import annotations

from schemelet import LispValue
from schemelet.types.lambda_fn import Lambda
from schemelet.types.nil import Nil
from schemelet.types.pair import Pair
from schemelet.types.symbol import Symbol

PROCEDURE_TEXT = "#<procedure>"
NIL_TEXT = "nil"


def to_string(x: LispValue) -> str:
    """Render a value the way results are shown to the user."""
    if isinstance(x, bool):
        return "true" if x else "false"
    if isinstance(x, int):
        return str(x)
    if isinstance(x, Symbol):
        return x.id
    if isinstance(x, Pair):
        return f"({to_string(x.car)} . {to_string(x.cdr)})"
    if isinstance(x, list):
        return "(" + " ".join(to_string(e) for e in x) + ")"
    if x is Nil:
        return NIL_TEXT
    if isinstance(x, Lambda) or callable(x):
        return PROCEDURE_TEXT
    return repr(x)
