"""Callable values: user function definitions and the builtin operators."""

from __future__ import annotations

from enum import Enum
from io import StringIO

from sprig.types.symbol import Symbol


class FunctionDefinition:
    """A named function with positional parameters, a body, and the index of
    the frame it was defined in (its lexical scope)."""

    __slots__ = ("name", "params", "body", "scope")

    def __init__(self, name: Symbol, params: tuple[Symbol, ...], body, scope: int = 0):
        self.name: Symbol = name
        self.params: tuple[Symbol, ...] = tuple(params)
        self.body = body
        self.scope: int = scope

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(define [")
            buffer.write(" ".join(str(s) for s in (self.name, *self.params)))
            buffer.write("] ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<fn {self.name}/{self.arity}>"


class Builtin(Enum):
    """Operators implemented natively. Values are the names they are bound to."""

    ADD = "+"
    SUB = "-"
    GT = ">"
    EQ = "="
    PRINTLN = "println"

    @property
    def symbol(self) -> Symbol:
        return Symbol(self.value)

    def __repr__(self) -> str:
        return f"<builtin {self.value}>"


# Closed set of things that may appear in operator position.
Callee = Builtin | FunctionDefinition
