import pytest

from schemelet.builtin.env_builtin import standard_env
from schemelet.evaluation.evaluator import evaluate
from schemelet.reader.parser import parse_all, tokenize


@pytest.fixture
def env():
    """Fresh root environment with the native catalog loaded."""
    return standard_env()


@pytest.fixture
def eval_source(env):
    """Evaluate every form in a source string against `env`, returning the last value."""
    def _eval(source: str):
        result = None
        for form in parse_all(tokenize(source)):
            result = evaluate(form, env)
        return result
    return _eval
