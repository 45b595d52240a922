"""Kind tests, typed accessors and equality for schemelet values.

Value kinds map onto Python objects:

    Boolean   -> bool
    Integer   -> int (signed 32-bit range)
    Symbol    -> Symbol
    Pair      -> Pair
    Sequence  -> list
    Procedure -> Lambda, or a Python callable fn(env, args)
    Unit      -> Nil

`bool` is a subclass of `int`, so every integer test excludes booleans.
"""

from __future__ import annotations

from typing import Callable

from schemelet import LispValue
from schemelet.errors import (
    ExpectedPair,
    IntegerOverflow,
    NotAList,
    NotAnInteger,
    NotCallable,
    SchemeTypeError,
)
from schemelet.types.lambda_fn import Lambda
from schemelet.types.pair import Pair
from schemelet.types.symbol import Symbol

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

_OPERANDS_FLAG = "_schemelet_unevaluated_operands"


def unevaluated_operands(fn: Callable) -> Callable:
    """Mark a native procedure as receiving its operand forms unevaluated."""
    setattr(fn, _OPERANDS_FLAG, True)
    return fn


def wants_unevaluated_operands(fn: LispValue) -> bool:
    return getattr(fn, _OPERANDS_FLAG, False)


# --- kind tests ---

def is_boolean(x: LispValue) -> bool:
    return isinstance(x, bool)


def is_integer(x: LispValue) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def is_symbol(x: LispValue) -> bool:
    return isinstance(x, Symbol)


def is_sequence(x: LispValue) -> bool:
    return isinstance(x, list)


def is_procedure(x: LispValue) -> bool:
    # Symbol, Pair and Nil are never callable, so callable() is enough for natives
    return isinstance(x, Lambda) or callable(x)


def in_int_range(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


def checked_int(n: int) -> int:
    """Return `n` if it fits in a signed 32-bit integer, else raise IntegerOverflow."""
    if not in_int_range(n):
        raise IntegerOverflow(f"Integer overflow: {n}")
    return n


# --- typed accessors ---

def as_int(x: LispValue) -> int:
    if not is_integer(x):
        raise NotAnInteger("Not an int")
    return x


def as_list(x: LispValue) -> list[LispValue]:
    if not isinstance(x, list):
        raise NotAList("Not a list")
    return x


def as_symbol(x: LispValue) -> Symbol:
    if not isinstance(x, Symbol):
        raise SchemeTypeError("Not a symbol")
    return x


def as_procedure(x: LispValue) -> LispValue:
    if not is_procedure(x):
        raise NotCallable("Not a callable")
    return x


def as_pair_parts(x: LispValue, op: str) -> tuple[LispValue, LispValue]:
    """Split a Pair or a non-empty Sequence into (first, rest)."""
    if isinstance(x, Pair):
        return x.car, x.cdr
    if isinstance(x, list) and x:
        return x[0], x[1:]
    raise ExpectedPair(f"{op} expects a pair")


# --- equality ---

def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep structural equality; kinds must match exactly (true is not 1)."""
    if a is b:
        return True
    if type(a) != type(b):
        return False
    if isinstance(a, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Pair):
        return is_equal(a.car, b.car) and is_equal(a.cdr, b.cdr)
    if isinstance(a, Lambda):
        return a == b
    if callable(a):
        # Natives are equal only when they are the same routine
        return False
    return a == b


def is_eq(a: LispValue, b: LispValue) -> bool:
    """Identity-like comparison: value equality for booleans and integers,
    object identity for every other kind."""
    if is_boolean(a) or is_integer(a):
        return type(a) == type(b) and a == b
    return a is b
