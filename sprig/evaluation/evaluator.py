"""Core evaluator for the Sprig interpreter.

Plain recursive evaluation over the Expression tree: no trampolining, so
recursion depth is bounded by the host stack and a RecursionError is left to
propagate.
"""

from __future__ import annotations

import logging

from sprig import Value
from sprig.errors import SprigSyntaxError
from sprig.evaluation.apply import apply
from sprig.evaluation.special_forms import if_form, cond_form, define_form, do_form
from sprig.types.environment import Environment
from sprig.types.expression import Expression, Literal, Call, If, Cond, Definition, Do
from sprig.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: Expression, env: Environment) -> Value:
    """Reduce `expr` to a value under `env`."""
    if env.arena.trace:
        logger.debug("eval [frame %d] %s", env.index, expr)

    match expr:
        case Literal(value=value):
            return value

        case Symbol():
            return env.lookup(expr)

        case Call(operator=operator, operands=operands):
            # Operator first, then operands left to right; no short-circuit.
            head = evaluate(operator, env)
            args = [evaluate(operand, env) for operand in operands]
            return apply(head, args, env, evaluate)

        case If():
            return if_form(expr, env, evaluate)

        case Cond():
            return cond_form(expr, env, evaluate)

        case Definition():
            return define_form(expr, env, evaluate)

        case Do():
            return do_form(expr, env, evaluate)

    raise SprigSyntaxError(f"Cannot evaluate {expr!r}; analyze form data first")
