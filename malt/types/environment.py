"""Runtime environment for malt.

The Environment stores bindings of Symbols to reduced forms and supports
nested scopes via an `outer` link. Frames are shared by reference: several
child frames and closures may hold the same outer frame, and a frame lives
as long as anything refers to it.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from malt import LispValue
from malt.errors import MaltTypeError, UnboundSymbolError
from malt.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Environment:
    """Hierarchical mapping from Symbols to values, searched innermost-first."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        bindings: Mapping[Symbol, LispValue] | None = None,
    ):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        if bindings:
            self.update(bindings)

    def define(self, name: Symbol, value: LispValue) -> LispValue:
        """Bind `name` to `value` in this frame and return the value.

        Raises MaltTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MaltTypeError(f"Cannot define {name} as a symbol")
        logger.debug("define %s in frame %#x", name, id(self))
        self.vars[name] = value
        return value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def search(self, symbol: Symbol) -> LispValue:
        """Return the value bound to `symbol` in the nearest enclosing frame.

        Raises UnboundSymbolError if no frame in the chain binds it.
        """
        env = self.find(symbol)
        if env is None:
            raise UnboundSymbolError(symbol)
        return env.vars[symbol]

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def depth(self) -> int:
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n
