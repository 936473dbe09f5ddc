"""Runtime environment for Sprig.

Frames are stored in an `Arena` and refer to their enclosing frame by index
rather than by pointer. An `Environment` is a lightweight handle (arena plus
frame index) that the evaluator threads through recursion.

Lifetimes:
- Frame 0 of every arena is the session's global frame, shared across arenas.
- One arena is created per top-level evaluation and dropped when it finishes.
- A call pushes a frame and releases it when the call returns, unless the
  returned value is a function whose scope lives at or above that frame.
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import Optional, TextIO

from sprig import Value
from sprig.errors import UnboundName, SprigSyntaxError
from sprig.types.function import FunctionDefinition
from sprig.types.symbol import Symbol


class Frame:
    """One scope: a table of bindings and the index of its parent frame."""

    __slots__ = ("vars", "parent")

    def __init__(self, parent: Optional[int] = None):
        self.vars: dict[Symbol, Value] = {}
        self.parent: int | None = parent

    def __repr__(self) -> str:
        return f"Frame(parent={self.parent}, vars={list(map(str, self.vars))})"


class Arena:
    """Frames owned by one top-level evaluation, addressed by index."""

    __slots__ = ("frames", "output", "trace")

    def __init__(self, root: Frame | None = None, output: TextIO | None = None, trace: bool = False):
        self.frames: list[Frame] = [root if root is not None else Frame()]
        self.output: TextIO = output if output is not None else sys.stdout
        self.trace: bool = trace

    def __len__(self) -> int:
        return len(self.frames)

    def __getitem__(self, index: int) -> Frame:
        return self.frames[index]

    def push(self, parent: int) -> int:
        """Append a new frame chained to `parent` and return its index."""
        self.frames.append(Frame(parent))
        return len(self.frames) - 1

    def release(self, index: int, result: Value = None) -> None:
        """Drop frame `index` and everything above it.

        Kept when `result` is a function defined at or above `index`: that
        function's scope chain still needs those frames.
        """
        if index == 0:
            return
        if isinstance(result, FunctionDefinition) and result.scope >= index:
            return
        del self.frames[index:]


class Environment:
    """Handle onto one frame of an arena."""

    __slots__ = ("arena", "index")

    def __init__(self, arena: Arena | None = None, index: int = 0):
        self.arena: Arena = arena if arena is not None else Arena()
        self.index: int = index

    @property
    def frame(self) -> Frame:
        return self.arena[self.index]

    @property
    def output(self) -> TextIO:
        return self.arena.output

    def define(self, name: Symbol, value: Value) -> None:
        """Bind `name` in this frame only; enclosing frames are never touched."""
        if not isinstance(name, Symbol):
            raise SprigSyntaxError(f"Cannot define {name!r} as a symbol")
        self.frame.vars[name] = value

    def update(self, mapping: dict[Symbol, Value]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def find(self, name: Symbol) -> Optional[int]:
        """Index of the nearest frame in the chain that binds `name`."""
        index: int | None = self.index
        while index is not None:
            frame = self.arena[index]
            if name in frame.vars:
                return index
            index = frame.parent
        return None

    def lookup(self, name: Symbol) -> Value:
        """Look up `name` innermost scope first.

        Raises UnboundName if no frame in the chain binds it.
        """
        index = self.find(name)
        if index is None:
            raise UnboundName(f"Cannot lookup unbound symbol {name}")
        return self.arena[index].vars[name]

    def child(self, parent: int | None = None) -> Environment:
        """Push a new frame chained to `parent` (default: this frame)."""
        index = self.arena.push(self.index if parent is None else parent)
        return Environment(self.arena, index)

    def release(self, result: Value = None) -> None:
        self.arena.release(self.index, result)

    def _write_vars(self, frame: Frame, buffer: StringIO) -> None:
        """Write a frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in frame.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(self.frame, buffer)
            if self.frame.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        index: int | None = self.index
        while index is not None:
            frame = self.arena[index]
            with StringIO() as buffer:
                buffer.write(f"#{index} ")
                self._write_vars(frame, buffer)
                chain.append(buffer.getvalue())
            index = frame.parent
        return f"<Environment chain: {' -> '.join(chain)}>"
