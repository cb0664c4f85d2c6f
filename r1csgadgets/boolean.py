"""Boolean variables with equality, comparison, selection and bit conversion."""

from __future__ import annotations

from typing import Any, ClassVar

from .allocated import AllocatedBool
from .gadgets import CmpGadget, EqGadget, ToBitsGadget
from .logic import BooleanBase
from .r1cs import (
    AssignmentMissing,
    ConstraintSystem,
    LinearCombination,
    Unsatisfiable,
    Variable,
    combine_cs,
)


def _require(cs: ConstraintSystem | None) -> ConstraintSystem:
    if cs is None:
        raise AssignmentMissing("no constraint system to enforce the constraint in")
    return cs


class Boolean(BooleanBase, CmpGadget, EqGadget, ToBitsGadget):
    """A boolean in a constraint system, either a constant or a zero/one variable."""

    TRUE: ClassVar["Boolean"]
    FALSE: ClassVar["Boolean"]

    @classmethod
    def _cast(cls, value: BooleanBase) -> Boolean:
        allocated = value.allocated
        if allocated is not None:
            return cls(allocated)
        return cls(value.value())

    def is_eq(self, other: Boolean) -> Boolean:
        """Return a boolean that is true iff both values are equal."""
        return ~(self ^ other)

    def conditional_enforce_equal(self, other: Boolean, should_enforce: Boolean) -> None:
        """Enforce ``self == other`` when ``should_enforce`` is true.

        Raises ``Unsatisfiable`` for two differing constants.
        """
        left, right = self._const(), other._const()
        if left is not None and right is not None:
            if left == right:
                return
            raise Unsatisfiable("two different constant booleans cannot be equal")
        # a == b  <=>  a - b == 0
        difference = other.lc() - self.lc()
        if should_enforce._const() is False:
            return
        cs = _require(combine_cs(self.cs(), other.cs(), should_enforce.cs()))
        cs.enforce_constraint(difference, should_enforce.lc(), LinearCombination())

    def conditional_enforce_not_equal(
        self, other: Boolean, should_enforce: Boolean
    ) -> None:
        """Enforce ``self != other`` when ``should_enforce`` is true.

        Raises ``Unsatisfiable`` for two equal constants.
        """
        left, right = self._const(), other._const()
        if left is not None and right is not None:
            if left != right:
                return
            raise Unsatisfiable("two equal constant booleans cannot differ")
        # a != b  <=>  a + b == 1
        total = self.lc() + other.lc()
        if should_enforce._const() is False:
            return
        cs = _require(combine_cs(self.cs(), other.cs(), should_enforce.cs()))
        cs.enforce_constraint(
            total, should_enforce.lc(), LinearCombination({Variable.ONE: 1})
        )

    def select(self, first: Any, second: Any) -> Any:
        """Return ``first`` if this boolean is true, else ``second``."""
        return type(first).conditionally_select(self, first, second)

    @classmethod
    def conditionally_select(
        cls, cond: Boolean, true_value: Boolean, false_value: Boolean
    ) -> Boolean:
        """Return ``true_value`` if ``cond`` holds, else ``false_value``."""
        cond_const = cond._const()
        if cond_const is True:
            return true_value
        if cond_const is False:
            return false_value
        if false_value._const() is False:
            return cls._cast(cond & true_value)
        if true_value._const() is False:
            return cls._cast(~cond & false_value)
        if true_value._const() is True:
            return cls._cast(cond | false_value)
        if false_value._const() is True:
            return cls._cast(~cond | true_value)

        cs = _require(cond.cs())
        result = cls(
            AllocatedBool.new_witness_without_booleanity_check(
                cs,
                lambda: true_value.value() if cond.value() else false_value.value(),
            )
        )
        # c * (a - b) = r - b; r is boolean whenever a, b and c are.
        cs.enforce_constraint(
            cond.lc(),
            true_value.lc() - false_value.lc(),
            result.lc() - false_value.lc(),
        )
        return result

    def is_ge(self, other: Boolean) -> Boolean:
        """Return a boolean for ``self >= other``, i.e. ``self | !other``."""
        return self | ~other

    def to_bits_le(self) -> list[Boolean]:
        """Return this boolean as a single little-endian bit."""
        return [self]


Boolean.TRUE = Boolean.constant(True)
Boolean.FALSE = Boolean.constant(False)