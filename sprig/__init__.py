# Core type aliases for Sprig's data model.
# Integers are plain Python ints; every other runtime value is one of the
# small classes in sprig.types (Unit, FunctionDefinition, Builtin).
#
# Naming guidance:
# - SExpression: host-supplied form data (ints, Symbols, nested lists) before analysis.
# - Value:       what the evaluator produces.

from typing import Any, Callable

# Runtime value alias
Value = Any
# Form data handed over by the host, prior to analysis
SExpression = Any

# Evaluator function type, passed into special forms
EvaluatorFn = Callable[..., Value]
