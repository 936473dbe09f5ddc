from sprig import EvaluatorFn, Value
from sprig.errors import TypeMismatch
from sprig.types.environment import Environment
from sprig.types.expression import If


def is_true(value: Value, form: str) -> bool:
    """Non-zero integers are true, zero is false; anything else is a type error."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeMismatch(f"{form} test must be an integer, got {value!r}")
    return value != 0


def if_form(node: If, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    cond = evaluate_fn(node.condition, env)
    if is_true(cond, "if"):
        return evaluate_fn(node.then_branch, env)
    return evaluate_fn(node.else_branch, env)
