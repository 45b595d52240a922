import logging

from schemelet import EvaluatorFn
from schemelet import SExpression, LispValue
from schemelet.errors import IllFormedDefine, InvalidDefineTarget, NonSymbolInParameterList
from schemelet.types.environment import Environment
from schemelet.types.lambda_fn import Lambda
from schemelet.types.nil import Nil
from schemelet.types.symbol import Symbol

logger = logging.getLogger(__name__)


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name)                  binds name to nil
    (define name value)            binds name to the evaluated value
    (define (name param...) body...)  binds name to a Lambda
    Bindings always go into `env`, the scope the form is evaluated in.
    """
    if not tail:
        raise IllFormedDefine("define takes 2 arguments")

    target, *body = tail
    match target:
        case Symbol():
            if len(body) > 1:
                raise IllFormedDefine("Ill formed define!")
            value = evaluate_fn(body[0], env) if body else Nil
            logger.debug("define variable %s", target)
            env.define(target, value)
        case [Symbol() as name, *params]:
            for p in params:
                if not isinstance(p, Symbol):
                    raise NonSymbolInParameterList(f"Non-symbol in define arg list: {p!r}")
            logger.debug("define function %s/%d", name, len(params))
            env.define(name, Lambda(name.id, list(params), list(body)))
        case _:
            raise InvalidDefineTarget("First argument to define must be a symbol or list")
    return Nil
