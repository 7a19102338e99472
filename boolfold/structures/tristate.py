"""
Three-valued results of the static analyses.

Both the boolean evaluation and the purity analysis can fail to come to a conclusion.
Instead of encoding this as None, the results are enums with an explicit unknown member.
Converting them to a python bool raises a TypeError, so unknown can never be mistaken for false.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional


class BoolValue(Enum):
    """The statically known value of a boolean expression."""

    true = "true"
    false = "false"
    unknown = "unknown"

    def __bool__(self):
        raise TypeError(f"{self!r} cannot be directly converted to a boolean value.")

    def __invert__(self) -> BoolValue:
        """Negate the value, unknown stays unknown."""
        if self is BoolValue.unknown:
            return self
        return BoolValue.false if self is BoolValue.true else BoolValue.true

    def __xor__(self, other: BoolValue) -> BoolValue:
        if not (self.is_known and other.is_known):
            return BoolValue.unknown
        return BoolValue.from_bool(self is not other)

    @classmethod
    def from_bool(cls, value: bool) -> BoolValue:
        return cls.true if value else cls.false

    @property
    def is_known(self) -> bool:
        """Check whether the value is true or false."""
        return self is not BoolValue.unknown

    def to_bool(self) -> Optional[bool]:
        """Return the python bool of a known value, None otherwise."""
        if self is BoolValue.unknown:
            return None
        return self is BoolValue.true


class PurityValue(Enum):
    """Whether evaluating an expression is free of side effects and can not fail."""

    pure = "pure"
    impure = "impure"
    unknown = "unknown"

    def __bool__(self):
        raise TypeError(f"{self!r} cannot be directly converted to a boolean value.")

    @classmethod
    def all_of(cls, values: Iterable[PurityValue]) -> PurityValue:
        """
        Reduce the purity of the parts of an expression to the purity of the whole.

        The result is pure if all values are pure, impure if at least one value is impure and unknown otherwise.
        Unknown values are substituted with both pure and impure, if both substitutions agree the result is certain.
        """
        values = list(values)
        unknowns_pure = all(value is not PurityValue.impure for value in values)
        unknowns_impure = all(value is PurityValue.pure for value in values)
        if unknowns_pure != unknowns_impure:
            return cls.unknown
        return cls.pure if unknowns_pure else cls.impure


def may_discard(purity: PurityValue) -> bool:
    """Check whether an expression of the given purity can be dropped without changing the program."""
    return purity is PurityValue.pure
