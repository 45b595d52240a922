from schemelet import EvaluatorFn
from schemelet import SExpression, LispValue
from schemelet.errors import InvalidArgumentCount, NonBooleanCondition, TooManyIfBranches
from schemelet.types.environment import Environment
from schemelet.types.nil import Nil


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if condition then)
    (if condition then else)
    The condition must evaluate to a boolean. A false condition with no
    else branch yields nil.
    """
    if len(tail) < 2:
        raise InvalidArgumentCount("if requires a condition and a then-expression")

    condition, *branches = tail
    cond = evaluate_fn(condition, env)
    if not isinstance(cond, bool):
        raise NonBooleanCondition("First argument to 'if' must be a boolean")

    if cond:
        return evaluate_fn(branches[0], env)
    if len(branches) == 2:
        return evaluate_fn(branches[1], env)
    if len(branches) > 2:
        raise TooManyIfBranches("Too many arguments to 'if'")
    return Nil
