from __future__ import annotations
import logging

from schemelet import LispValue
from schemelet.builtin.env_builtin import standard_env
from schemelet.errors import SchemeError
from schemelet.evaluation.evaluator import evaluate
from schemelet.printer import to_string
from schemelet.reader.parser import parse, parse_all, tokenize
from schemelet.types.environment import Environment
from schemelet.types.nil import Nil

logger = logging.getLogger(__name__)


def run_program(program: str) -> str:
    """Read the first form of `program`, evaluate it in a fresh root
    environment and return its display string.

    Tokens after the first complete form are ignored. Raises SchemeError.
    """
    env = standard_env()
    tokens = tokenize(program)
    logger.debug("run_program: %d tokens", len(tokens))
    try:
        ast = parse(tokens)
        result = evaluate(ast, env)
    except SchemeError as e:
        logger.debug("run_program failed: %s", e)
        raise
    return to_string(result)


class Interpreter:
    """
    Orchestrates reading and evaluating schemelet code.
    Keeps one root Environment across calls so definitions persist.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else standard_env()

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form in `code`; return the last value."""
        result: LispValue = Nil
        for expr in parse_all(tokenize(code)):
            result = evaluate(expr, self.env)
        return result

    def eval_each(self, code: str) -> list[LispValue]:
        """Evaluate every top-level form in `code`, returning each result."""
        return [evaluate(expr, self.env) for expr in parse_all(tokenize(code))]
