"""
  Syntax analyzer: s-expression data -> Expression tree.

Sprig has no text reader. Hosts hand over forms as Python data:

    - integers      -> Literal
    - Symbol        -> Symbol (a name)
    - list / tuple  -> special form or Call
    - Expression    -> passed through unchanged

Special forms are dispatched through SPECIAL_FORMS, keyed by head symbol.
"""

from __future__ import annotations

from typing import Callable, Iterable

from sprig import SExpression
from sprig.errors import SprigSyntaxError
from sprig.types.expression import (
    ELSE,
    EXPRESSION_TYPES,
    Call,
    Cond,
    CondClause,
    Definition,
    Do,
    Expression,
    If,
    Literal,
)
from sprig.types.symbol import Symbol

CATCH_ALL_MARKERS = frozenset({Symbol(":else"), Symbol("else")})


def _is_compound(form: SExpression) -> bool:
    return isinstance(form, (list, tuple))


def analyze_if(tail: list[SExpression]) -> If:
    if len(tail) != 3:
        raise SprigSyntaxError("if requires a condition, a then-branch and an else-branch")
    condition, then_branch, else_branch = (analyze(f) for f in tail)
    return If(condition, then_branch, else_branch)


def analyze_cond(tail: list[SExpression]) -> Cond:
    if len(tail) % 2:
        raise SprigSyntaxError("cond requires test/result pairs")
    clauses = []
    for test, result in zip(tail[::2], tail[1::2]):
        if isinstance(test, Symbol) and test in CATCH_ALL_MARKERS:
            clauses.append(CondClause(ELSE, analyze(result)))
        else:
            clauses.append(CondClause(analyze(test), analyze(result)))
    return Cond(tuple(clauses))


def analyze_define(tail: list[SExpression]) -> Definition:
    """(define [name params...] body...) -- several body forms become a `do`."""
    if len(tail) < 2:
        raise SprigSyntaxError("define requires a signature and a body")
    signature, *body = tail
    if not _is_compound(signature) or not signature:
        raise SprigSyntaxError(f"define signature must be [name params...], got {signature!r}")
    name, *params = signature
    for s in (name, *params):
        if not isinstance(s, Symbol):
            raise SprigSyntaxError(f"define expects symbols in its signature, got {s!r}")
    if len(set(params)) != len(params):
        raise SprigSyntaxError(f"duplicate parameter names in definition of {name}")
    if len(body) == 1:
        body_expr = analyze(body[0])
    else:
        body_expr = Do(tuple(analyze(f) for f in body))
    return Definition(name, tuple(params), body_expr)


def analyze_do(tail: list[SExpression]) -> Do:
    return Do(tuple(analyze(f) for f in tail))


SPECIAL_FORMS: dict[Symbol, Callable[[list[SExpression]], Expression]] = {
    Symbol("if"): analyze_if,
    Symbol("cond"): analyze_cond,
    Symbol("define"): analyze_define,
    Symbol("do"): analyze_do,
}


def analyze(form: SExpression) -> Expression:
    """Turn one piece of form data into an Expression."""
    if isinstance(form, EXPRESSION_TYPES):
        return form
    if isinstance(form, bool):
        raise SprigSyntaxError(f"Booleans are not Sprig values: {form!r}")
    if isinstance(form, int):
        return Literal(form)
    if _is_compound(form):
        if not form:
            raise SprigSyntaxError("Cannot analyze an empty form")
        head, *tail = form
        if isinstance(head, Symbol) and head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail)
        return Call(analyze(head), tuple(analyze(f) for f in tail))
    raise SprigSyntaxError(f"Unsupported form {form!r}")


def analyze_all(forms: Iterable[SExpression]) -> list[Expression]:
    return [analyze(f) for f in forms]
