"""
  schemelet reader: tokenizer and parser

- Tokens are produced by padding '(' and ')' with spaces, separating a
  quote mark from what follows it, then splitting on whitespace.
- The parser consumes tokens destructively from the front of a list:

    - ( ... )   -> Python list
    - '( ... )  -> [Symbol('list'), ...]   (a call to `list`, not a quote)
    - integers  -> int, when the token is a base-10 signed 32-bit literal
    - otherwise -> Symbol
"""

from __future__ import annotations

import re
from typing import Iterator

from schemelet import SExpression
from schemelet.errors import (
    EmptyProgram,
    ExpectedOpenParenAfterQuote,
    MissingCloseParen,
    UnexpectedCloseParen,
)
from schemelet.types.symbol import Symbol
from schemelet.types.values import in_int_range

INT_RE = re.compile(r"[+-]?[0-9]+\Z")

LIST_SYMBOL = Symbol("list")


def tokenize(source: str) -> list[str]:
    """Split source text into a flat list of tokens."""
    spaced = source.replace("(", " ( ").replace(")", " ) ").replace("'", "' ")
    return spaced.split()


def make_atom(token: str) -> SExpression:
    if INT_RE.match(token):
        value = int(token)
        if in_int_range(value):
            return value
    return Symbol(token)


def read_list(tokens: list[str]) -> list[SExpression]:
    """Read elements up to and including the matching ')'."""
    items: list[SExpression] = []
    while True:
        if not tokens:
            raise MissingCloseParen("Missing right paren")
        if tokens[0] == ")":
            tokens.pop(0)
            return items
        items.append(parse(tokens))


def parse(tokens: list[str]) -> SExpression:
    """Read one form from the front of `tokens`, removing what it consumes."""
    if not tokens:
        raise EmptyProgram("Empty program")

    token = tokens.pop(0)
    if token == "(":
        return read_list(tokens)
    if token == "'":
        if not tokens or tokens.pop(0) != "(":
            raise ExpectedOpenParenAfterQuote("Expected ( after quote")
        return [LIST_SYMBOL, *read_list(tokens)]
    if token == ")":
        raise UnexpectedCloseParen("Unexpected right paren")
    return make_atom(token)


def parse_all(tokens: list[str]) -> Iterator[SExpression]:
    """Yield successive top-level forms until `tokens` is exhausted."""
    while tokens:
        yield parse(tokens)


def read(source: str) -> SExpression:
    """Tokenize `source` and parse its first form; trailing tokens are ignored."""
    return parse(tokenize(source))
