"""Application engine for Sprig.

A Call's operator value is resolved exactly once into the closed Callee
variant (Builtin or FunctionDefinition); anything else is NotCallable.
"""

import logging

from sprig import Value, EvaluatorFn
from sprig.builtins import BUILTINS
from sprig.errors import ArityMismatch, NotCallable
from sprig.types.environment import Environment
from sprig.types.function import Builtin, FunctionDefinition

logger = logging.getLogger(__name__)


def apply_function(
    fn: FunctionDefinition,
    args: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Apply a user function.

    Binds `args` positionally in a fresh frame whose parent is the frame the
    function was defined in, evaluates the body there, then releases the frame.
    """
    if len(args) != fn.arity:
        raise ArityMismatch(
            f"{fn.name} expects {fn.arity} argument(s), got {len(args)}"
        )
    call_env = env.child(parent=fn.scope)
    call_env.update(dict(zip(fn.params, args)))
    logger.debug("call %s%r in frame %d", fn.name, tuple(args), call_env.index)
    result = evaluate_fn(fn.body, call_env)
    call_env.release(result)
    return result


def apply(
    head: Value,
    args: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Apply either a Builtin or a FunctionDefinition, else raise NotCallable."""
    match head:
        case Builtin():
            return BUILTINS[head](env, args)
        case FunctionDefinition():
            return apply_function(head, args, env, evaluate_fn)
        case _:
            raise NotCallable(f"Cannot apply non-function {head!r}")
