"""Application engine for schemelet.

Centralizes procedure application so the evaluator and the `apply` native
share one set of rules:
- Natives are Python callables invoked as fn(env, args) with the caller's env.
- Lambdas require exact arity and run in a child of the caller's env.
"""

from schemelet import LispValue, EvaluatorFn
from schemelet.errors import ArityMismatch, NotCallable
from schemelet.types.environment import Environment
from schemelet.types.lambda_fn import Lambda
from schemelet.types.nil import Nil


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a user-defined procedure.

    The parameter scope is spawned from `caller_env`, not from wherever the
    Lambda was defined, so free variables in the body resolve dynamically.
    Body forms are evaluated in order; the last value is returned, or Nil
    for an empty body.
    """
    if len(args) != fn.arity:
        raise ArityMismatch(fn.name, fn.arity)

    call_env = caller_env.spawn_child()
    for param, arg in zip(fn.params, args):
        call_env.define(param, arg)

    result: LispValue = Nil
    for form in fn.body:
        result = evaluate_fn(form, call_env)
    return result


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a native callable to already-prepared args."""
    if isinstance(head, Lambda):
        return apply_lambda(head, args, env, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        raise NotCallable(f"Cannot apply non-function {head!r}")
