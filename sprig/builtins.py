"""Built-in operators for the Sprig runtime environment.

Each implementation takes the calling environment and the list of already
evaluated arguments, the same calling convention for every builtin.
"""
from __future__ import annotations

import logging
from typing import Callable

from sprig import Value
from sprig.errors import ArityMismatch, TypeMismatch
from sprig.types.environment import Environment
from sprig.types.function import Builtin
from sprig.types.symbol import Symbol
from sprig.types.unit import Unit

logger = logging.getLogger(__name__)

TRUE = 1
FALSE = 0


def _require_ints(op: str, args: list[Value]) -> None:
    for arg in args:
        # bool is an int subclass but never a Sprig value
        if not isinstance(arg, int) or isinstance(arg, bool):
            raise TypeMismatch(f"All arguments to {op} must be integers, got {arg!r}")


def _require_arity(op: str, args: list[Value], n: int) -> None:
    if len(args) != n:
        raise ArityMismatch(f"{op} requires exactly {n} arguments, got {len(args)}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[Value]) -> int:
    _require_ints("+", args)
    return sum(args)


def sub(env: Environment, args: list[Value]) -> int:
    if not args:
        raise ArityMismatch("- requires at least 1 argument")
    _require_ints("-", args)
    if len(args) == 1:
        return -args[0]
    result = args[0]
    for x in args[1:]:
        result -= x
    return result


# -------------------------------
# Comparison
# -------------------------------
def gt(env: Environment, args: list[Value]) -> int:
    _require_arity(">", args, 2)
    _require_ints(">", args)
    return TRUE if args[0] > args[1] else FALSE


def eq(env: Environment, args: list[Value]) -> int:
    _require_arity("=", args, 2)
    _require_ints("=", args)
    return TRUE if args[0] == args[1] else FALSE


# -------------------------------
# Output
# -------------------------------
def println(env: Environment, args: list[Value]) -> Value:
    line = " ".join(str(a) if isinstance(a, int) else repr(a) for a in args)
    env.output.write(line + "\n")
    return Unit


BUILTINS: dict[Builtin, Callable[[Environment, list[Value]], Value]] = {
    Builtin.ADD: add,
    Builtin.SUB: sub,
    Builtin.GT: gt,
    Builtin.EQ: eq,
    Builtin.PRINTLN: println,
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    env.update({b.symbol: b for b in Builtin})
    env.update({
        Symbol("true"): TRUE,
        Symbol("false"): FALSE,
    })
    logger.debug("registered %d builtins", len(BUILTINS))
