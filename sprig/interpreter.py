from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Iterable, TextIO

from sprig import SExpression, Value, config
from sprig.builtins import register
from sprig.errors import SprigError
from sprig.evaluation.evaluator import evaluate
from sprig.syntax.analyzer import analyze
from sprig.types.environment import Arena, Environment, Frame
from sprig.types.symbol import Symbol

logger = logging.getLogger(__name__)


@dataclass
class Outcome:
    """Result of one top-level form: a value, or the error it failed with."""

    form: SExpression
    value: Value = None
    error: SprigError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Interpreter:
    """
    Evaluates top-level forms against a persistent global frame.
    Definitions made at top level are visible to later forms.
    """

    # Class-level defaults to avoid env-variable coupling in tests.
    # None means "read from sprig.config".
    DefaultHaltOnError: bool | None = None
    DefaultTrace: bool | None = None

    def __init__(self, output: TextIO | None = None, *, trace: bool | None = None):
        # None: resolve sys.stdout at evaluation time
        self.output = output
        if trace is None:
            trace = self.DefaultTrace if self.DefaultTrace is not None else config.trace_enabled()
        self.trace: bool = trace
        self.globals: Frame = Frame()
        register(Environment(Arena(self.globals)))

    def environment(self) -> Environment:
        """A fresh arena rooted at the global frame, for one top-level evaluation."""
        output = self.output if self.output is not None else sys.stdout
        return Environment(Arena(self.globals, output=output, trace=self.trace))

    def eval(self, form: SExpression) -> Value:
        """Analyze and evaluate one top-level form. Errors propagate."""
        return evaluate(analyze(form), self.environment())

    def run(self, forms: Iterable[SExpression], halt_on_error: bool | None = None) -> list[Outcome]:
        """Evaluate forms in order, recording one Outcome per evaluated form.

        With halt_on_error the first failing form ends the run; otherwise the
        failure is recorded and evaluation continues with the next form.
        """
        if halt_on_error is None:
            halt_on_error = (
                self.DefaultHaltOnError
                if self.DefaultHaltOnError is not None
                else config.halt_on_error()
            )
        outcomes: list[Outcome] = []
        for form in forms:
            try:
                value = self.eval(form)
            except SprigError as ex:
                outcomes.append(Outcome(form, error=ex))
                if halt_on_error:
                    logger.error("halting: %s: %s", type(ex).__name__, ex)
                    break
                logger.warning("continuing after %s: %s", type(ex).__name__, ex)
                continue
            outcomes.append(Outcome(form, value=value))
        return outcomes

    def lookup(self, name: str | Symbol) -> Value:
        """Look up a name in the global frame."""
        symbol = name if isinstance(name, Symbol) else Symbol(name)
        return Environment(Arena(self.globals)).lookup(symbol)


#  Example use-age:
if __name__ == "__main__":
    config.configure_logging()
    S = Symbol
    program = [
        [S("define"), [S("math"), S("a"), S("b"), S("c"), S("d")],
            [S("+"), S("a"), [S("-"), S("b"), S("c")], S("d")]],
        [S("math"), 1, 2, 3, [S("math"), 1, 2, 3, 4]],
        [S("if"), [S(">"), 4, [S("math"), 1, 2, 3, 4]],
            [S("add"), 1, 2],
            [S("println"), 3]],
        [S("cond"),
            [S("="), 1, 2], [S("this"), S("wont"), S("run")],
            [S("="), 1, 2], [S("this"), S("will"), S("run")],
            S(":else"), [S("println"), 1]],
    ]
    interp = Interpreter()
    for outcome in interp.run(program, halt_on_error=False):
        result = outcome.value if outcome.ok else f"{type(outcome.error).__name__}: {outcome.error}"
        print(analyze(outcome.form), "=>", result)
