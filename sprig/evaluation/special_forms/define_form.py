import logging

from sprig import EvaluatorFn, Value
from sprig.types.environment import Environment
from sprig.types.expression import Definition
from sprig.types.function import FunctionDefinition
from sprig.types.unit import Unit

logger = logging.getLogger(__name__)


def define_form(node: Definition, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    (define [name params...] body)
    Binds name in the current frame only. The body is not evaluated here.
    """
    fn = FunctionDefinition(node.name, node.params, node.body, scope=env.index)
    env.define(node.name, fn)
    logger.debug("defined %r in frame %d", fn, env.index)
    return Unit
