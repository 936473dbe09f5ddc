"""Expression tree for the Sprig evaluator.

The tree is a closed set of frozen dataclasses. `Symbol` (from
sprig.types.symbol) is itself the Symbol node, so a bare name is already a
valid expression.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from sprig.types.symbol import Symbol


@dataclass(frozen=True)
class Literal:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Call:
    operator: Expression
    operands: tuple[Expression, ...] = ()

    def __str__(self) -> str:
        parts = [str(self.operator), *(str(o) for o in self.operands)]
        return f"({' '.join(parts)})"


@dataclass(frozen=True)
class If:
    condition: Expression
    then_branch: Expression
    else_branch: Expression

    def __str__(self) -> str:
        return f"(if {self.condition} {self.then_branch} {self.else_branch})"


class CatchAll:
    """Marker placed in a cond clause's test position; always matches."""

    __slots__ = ()

    def __repr__(self):
        return ":else"


ELSE = CatchAll()


@dataclass(frozen=True)
class CondClause:
    test: Union[Expression, CatchAll]
    result: Expression

    @property
    def is_catch_all(self) -> bool:
        return self.test is ELSE


@dataclass(frozen=True)
class Cond:
    clauses: tuple[CondClause, ...]

    def __str__(self) -> str:
        body = " ".join(f"{c.test!s} {c.result!s}" for c in self.clauses)
        return f"(cond {body})"


@dataclass(frozen=True)
class Definition:
    name: Symbol
    params: tuple[Symbol, ...]
    body: Expression

    def __str__(self) -> str:
        signature = " ".join(str(s) for s in (self.name, *self.params))
        return f"(define [{signature}] {self.body})"


@dataclass(frozen=True)
class Do:
    body: tuple[Expression, ...] = ()

    def __str__(self) -> str:
        return f"({' '.join(['do', *(str(e) for e in self.body)])})"


Expression = Union[Literal, Symbol, Call, If, Cond, Definition, Do]

EXPRESSION_TYPES = (Literal, Symbol, Call, If, Cond, Definition, Do)
