"""Core evaluator for the schemelet interpreter.

A plain recursive tree walker: special forms are dispatched before any
operand is evaluated, everything else is procedure application. There is
no tail-call elimination; deep user recursion consumes host stack.
"""

from __future__ import annotations

from schemelet import SExpression, LispValue
from schemelet.errors import IllFormedExpression, NotCallable
from schemelet.evaluation.apply import apply
from schemelet.evaluation.special_forms import SPECIAL_FORMS
from schemelet.printer import to_string
from schemelet.types.environment import Environment
from schemelet.types.pair import Pair
from schemelet.types.symbol import Symbol
from schemelet.types.values import is_procedure, wants_unevaluated_operands


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`, raising SchemeError on the first failure."""
    match expr:
        case Symbol():
            return env.lookup(expr)

        case []:
            raise IllFormedExpression("Ill-formed expression")

        case [head, *tail_args]:
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)

            fn = evaluate(head, env)
            if not is_procedure(fn):
                raise NotCallable(f"Expected function, found {to_string(head)}")

            if wants_unevaluated_operands(fn):
                args = list(tail_args)
            else:
                # Left to right; side effects of earlier operands are visible to later ones
                args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate)

        case Pair():
            raise IllFormedExpression(f"Cannot evaluate pair {to_string(expr)}")

    # --- Booleans, integers, Nil and procedures evaluate to themselves ---
    return expr
