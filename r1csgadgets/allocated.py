"""Allocated boolean variables constrained to be zero or one."""

from __future__ import annotations

from typing import Any, Callable

from .alloc import AllocationMode, AllocVar
from .r1cs import AssignmentMissing, ConstraintSystem, Variable


def bool_to_field(value: Any) -> int:
    """Map a boolean to the field element zero or one."""
    return 1 if value else 0


class AllocatedBool(AllocVar):
    """A constraint-system variable guaranteed to hold either zero or one.

    Prefer ``Boolean``, which also handles constants and offers more
    operations.
    """

    __slots__ = ("_variable", "cs")

    def __init__(self, variable: Variable, cs: ConstraintSystem | None) -> None:
        self._variable = variable
        self.cs = cs

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AllocatedBool):
            return NotImplemented
        return self._variable == other._variable and self.cs is other.cs

    def __hash__(self) -> int:
        return hash((self._variable, id(self.cs)))

    def __repr__(self) -> str:
        return f"AllocatedBool(variable={self._variable!r}, cs={self.cs!r})"

    def value(self) -> bool:
        """Return the value assigned to this variable."""
        if self.cs is None:
            if self._variable == Variable.ONE:
                return True
            if self._variable == Variable.ZERO:
                return False
            raise AssignmentMissing(f"no constraint system holds {self._variable}")
        value = self.cs.assigned_value(self._variable)
        if value == 0:
            return False
        if value == 1:
            return True
        raise RuntimeError(f"incorrect value assigned to a boolean: {value}")

    def variable(self) -> Variable:
        """Return the underlying constraint-system variable."""
        return self._variable

    @classmethod
    def new_witness_without_booleanity_check(
        cls, cs: ConstraintSystem, f: Callable[[], Any]
    ) -> AllocatedBool:
        """Allocate a witness without constraining it to be boolean."""
        variable = cs.new_witness_variable(lambda: bool_to_field(f()))
        return cls(variable, cs)

    @classmethod
    def new_variable(
        cls, cs: ConstraintSystem | None, f: Callable[[], Any], mode: AllocationMode
    ) -> AllocatedBool:
        """Allocate a variable in ``mode``, constraining it to be boolean."""
        if mode == AllocationMode.CONSTANT:
            variable = Variable.ONE if f() else Variable.ZERO
            return cls(variable, cs)
        if cs is None:
            raise AssignmentMissing("a constraint system is needed to allocate a variable")
        produce = lambda: bool_to_field(f())  # noqa: E731
        if mode == AllocationMode.INPUT:
            variable = cs.new_input_variable(produce)
        else:
            variable = cs.new_witness_variable(produce)
        # (1 - a) * a = 0 forces a into {0, 1}.
        cs.enforce_constraint(Variable.ONE - variable, variable, Variable.ZERO - Variable.ZERO)
        return cls(variable, cs)

    def _require_cs(self) -> ConstraintSystem:
        if self.cs is None:
            raise AssignmentMissing("this boolean is not attached to a constraint system")
        return self.cs

    def _new_result(self, compute: Callable[[], bool]) -> AllocatedBool:
        return AllocatedBool.new_witness_without_booleanity_check(self._require_cs(), compute)

    def not_(self) -> AllocatedBool:
        """Return the negation; no constraints are added."""
        cs = self._require_cs()
        variable = cs.new_lc(Variable.ONE - self._variable)
        return AllocatedBool(variable, cs)

    def xor(self, b: AllocatedBool) -> AllocatedBool:
        """Return ``self XOR b``."""
        result = self._new_result(lambda: self.value() ^ b.value())
        # (a + a) * b = a + b - c
        self._require_cs().enforce_constraint(
            self._variable + self._variable,
            b._variable,
            self._variable + b._variable - result._variable,
        )
        return result

    def and_(self, b: AllocatedBool) -> AllocatedBool:
        """Return ``self AND b``."""
        result = self._new_result(lambda: self.value() & b.value())
        # a * b = c
        self._require_cs().enforce_constraint(self._variable, b._variable, result._variable)
        return result

    def or_(self, b: AllocatedBool) -> AllocatedBool:
        """Return ``self OR b``."""
        result = self._new_result(lambda: self.value() | b.value())
        # (1 - a) * (1 - b) = 1 - c
        self._require_cs().enforce_constraint(
            Variable.ONE - self._variable,
            Variable.ONE - b._variable,
            Variable.ONE - result._variable,
        )
        return result

    def and_not(self, b: AllocatedBool) -> AllocatedBool:
        """Return ``self AND (NOT b)``."""
        result = self._new_result(lambda: self.value() and not b.value())
        # a * (1 - b) = c
        self._require_cs().enforce_constraint(
            self._variable,
            Variable.ONE - b._variable,
            result._variable,
        )
        return result

    def nor(self, b: AllocatedBool) -> AllocatedBool:
        """Return ``(NOT self) AND (NOT b)``."""
        result = self._new_result(lambda: not (self.value() or b.value()))
        # (1 - a) * (1 - b) = c
        self._require_cs().enforce_constraint(
            Variable.ONE - self._variable,
            Variable.ONE - b._variable,
            result._variable,
        )
        return result