"""Runtime environment for schemelet.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. The root scope holds the native procedure
catalog; every procedure call spawns one child scope for its parameters.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from schemelet import LispValue
from schemelet.errors import SchemeTypeError, UndefinedSymbol
from schemelet.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any local binding.

        Same-named bindings in outer frames are shadowed, not modified.
        """
        if not isinstance(name, Symbol):
            raise SchemeTypeError(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Return the value bound to `name`, innermost frame first.

        Raises UndefinedSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise UndefinedSymbol(name)
        return env.vars[name]

    def spawn_child(self) -> Environment:
        """Create an empty scope whose parent is this one."""
        return Environment(outer=self)

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
