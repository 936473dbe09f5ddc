from __future__ import annotations


class UnitType:
    """The unit/void value, returned by `println` and `define`."""

    __slots__ = ()

    def __repr__(self): return "nil"

    def __eq__(self, other):
        return isinstance(other, UnitType)

    def __hash__(self):
        return hash(UnitType)


Unit = UnitType()
