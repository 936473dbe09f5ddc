from sprig import EvaluatorFn, Value
from sprig.errors import NonExhaustiveCond
from sprig.evaluation.special_forms.if_form import is_true
from sprig.types.environment import Environment
from sprig.types.expression import Cond


def cond_form(node: Cond, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    (cond test1 result1 test2 result2 ... :else default)
    Tests run in order; the first one that holds wins and later clauses are
    never evaluated, even when their tests are identical.
    """
    for clause in node.clauses:
        if clause.is_catch_all or is_true(evaluate_fn(clause.test, env), "cond"):
            return evaluate_fn(clause.result, env)
    raise NonExhaustiveCond(f"No cond clause matched in {node}")
