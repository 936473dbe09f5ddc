from sprig import EvaluatorFn, Value
from sprig.types.environment import Environment
from sprig.types.expression import Do
from sprig.types.unit import Unit


def do_form(node: Do, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    result: Value = Unit
    for expr in node.body:
        result = evaluate_fn(expr, env)
    return result
