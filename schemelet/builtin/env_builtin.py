"""Native procedures for the schemelet root environment.

Every native has the signature fn(env, args) -> value and raises a
SchemeError subclass on failure. `env` is the caller's environment, which
`apply` and `begin` use to keep evaluating in the caller's context.
"""
from __future__ import annotations

from functools import reduce

from schemelet import LispValue
from schemelet.errors import DivisionByZero, InvalidArgumentCount
from schemelet.evaluation.apply import apply as apply_engine
from schemelet.evaluation.evaluator import evaluate
from schemelet.types.environment import Environment
from schemelet.types.pair import Pair
from schemelet.types.symbol import Symbol
from schemelet.types.values import (
    as_int,
    as_list,
    as_pair_parts,
    as_procedure,
    checked_int,
    is_eq,
    is_equal,
    is_integer,
    unevaluated_operands,
)


def _expect_count(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        raise InvalidArgumentCount(f"Invalid number of operands to {name} {len(args)}")


def _binary_ints(name: str, args: list[LispValue]) -> tuple[int, int]:
    _expect_count(name, args, 2)
    return as_int(args[0]), as_int(args[1])


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> int:
    """Sum of the integer arguments; anything else is skipped."""
    return checked_int(sum(a for a in args if is_integer(a)))


def mul(env: Environment, args: list[LispValue]) -> int:
    """Product of the integer arguments; anything else is skipped."""
    return checked_int(reduce(lambda a, b: a * b, (a for a in args if is_integer(a)), 1))


def sub(env: Environment, args: list[LispValue]) -> int:
    a, b = _binary_ints("subtract", args)
    return checked_int(a - b)


def div(env: Environment, args: list[LispValue]) -> int:
    """Integer division truncating toward zero."""
    a, b = _binary_ints("divide", args)
    if b == 0:
        raise DivisionByZero("Division by zero")
    q = abs(a) // abs(b)
    return checked_int(q if (a < 0) == (b < 0) else -q)


def absolute(env: Environment, args: list[LispValue]) -> int:
    _expect_count("abs", args, 1)
    return checked_int(abs(as_int(args[0])))


def gt(env: Environment, args: list[LispValue]) -> bool:
    a, b = _binary_ints(">", args)
    return a > b


def lt(env: Environment, args: list[LispValue]) -> bool:
    a, b = _binary_ints("<", args)
    return a < b


def gte(env: Environment, args: list[LispValue]) -> bool:
    a, b = _binary_ints(">=", args)
    return a >= b


def lte(env: Environment, args: list[LispValue]) -> bool:
    a, b = _binary_ints("<=", args)
    return a <= b


def num_equals(env: Environment, args: list[LispValue]) -> bool:
    a, b = _binary_ints("=", args)
    return a == b


# -------------------------------
# Pairs and lists
# -------------------------------
def cons(env: Environment, args: list[LispValue]) -> Pair:
    _expect_count("cons", args, 2)
    return Pair(args[0], args[1])


def car(env: Environment, args: list[LispValue]) -> LispValue:
    """First element of a Pair or non-empty list."""
    if len(args) != 1:
        raise InvalidArgumentCount("CAR expects 1 argument")
    return as_pair_parts(args[0], "CAR")[0]


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    """Second half of a Pair, or a new list of all but the first element."""
    if len(args) != 1:
        raise InvalidArgumentCount("CDR expects 1 argument")
    return as_pair_parts(args[0], "CDR")[1]


def list_builtin(env: Environment, args: list[LispValue]) -> list[LispValue]:
    return list(args)


def append(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """Concatenate list arguments into one new list."""
    result: list[LispValue] = []
    for item in args:
        result.extend(as_list(item))
    return result


def is_list(env: Environment, args: list[LispValue]) -> bool:
    _expect_count("list?", args, 1)
    return isinstance(args[0], list)


# -------------------------------
# Equality
# -------------------------------
def eq(env: Environment, args: list[LispValue]) -> bool:
    """Booleans and integers compare by value, everything else by identity."""
    _expect_count("eq?", args, 2)
    return is_eq(args[0], args[1])


def equal(env: Environment, args: list[LispValue]) -> bool:
    _expect_count("equal?", args, 2)
    return is_equal(args[0], args[1])


# -------------------------------
# Control
# -------------------------------
def apply(env: Environment, args: list[LispValue]) -> LispValue:
    """(apply f a b ... lst) calls f with a, b, ... followed by lst's elements."""
    if len(args) < 2:
        raise InvalidArgumentCount(f"Invalid number of operands to apply {len(args)}")
    fn = as_procedure(args[0])
    call_args = list(args[1:-1]) + as_list(args[-1])
    return apply_engine(fn, call_args, env, evaluate)


@unevaluated_operands
def begin(env: Environment, args: list[LispValue]) -> LispValue:
    """Evaluate each operand form in the caller's env and return the last value."""
    if not args:
        raise InvalidArgumentCount("Begin requires at least one argument")
    result = None
    for form in args:
        result = evaluate(form, env)
    return result


def register(env: Environment) -> None:
    """Register all native procedures and boolean constants into `env`."""
    env.update(
        {
            Symbol("+"): add,
            Symbol("*"): mul,
            Symbol("-"): sub,
            Symbol("/"): div,
            Symbol(">"): gt,
            Symbol("<"): lt,
            Symbol(">="): gte,
            Symbol("<="): lte,
            Symbol("="): num_equals,
            Symbol("abs"): absolute,
            Symbol("append"): append,
            Symbol("apply"): apply,
            Symbol("begin"): begin,
            Symbol("car"): car,
            Symbol("cdr"): cdr,
            Symbol("cons"): cons,
            Symbol("eq?"): eq,
            Symbol("equal?"): equal,
            Symbol("list"): list_builtin,
            Symbol("list?"): is_list,
        }
    )
    env.define(Symbol("true"), True)
    env.define(Symbol("false"), False)


def standard_env() -> Environment:
    """A fresh root environment with the native catalog installed."""
    env = Environment()
    register(env)
    return env
