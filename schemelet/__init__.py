# Core type aliases for the schemelet data model.
# Plain Python objects (bool, int, list) represent both parsed syntax and
# runtime values; Symbol, Pair, Lambda and Nil cover the remaining kinds.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type passed to special forms and the apply engine
EvaluatorFn = Callable[..., LispValue]
