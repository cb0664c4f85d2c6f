"""Boolean variables: constants or allocated bits, with logical operators."""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from .alloc import AllocationMode, AllocVar
from .allocated import AllocatedBool
from .gadgets import R1CSVar
from .r1cs import ConstraintSystem, LinearCombination, Variable

_B = TypeVar("_B", bound="BooleanBase")


class BooleanBase(R1CSVar, AllocVar):
    """A boolean that is either a constant or an allocated zero/one variable.

    Operations involving at least one constant create no variables or
    constraints.
    """

    def __init__(self, value: bool | AllocatedBool) -> None:
        if not isinstance(value, (bool, AllocatedBool)):
            raise TypeError(
                f"expected a bool or an AllocatedBool, got {type(value).__name__}"
            )
        self._inner = value

    @property
    def allocated(self) -> AllocatedBool | None:
        """The underlying allocated variable, or ``None`` for a constant."""
        inner = self._inner
        return inner if isinstance(inner, AllocatedBool) else None

    def _const(self) -> bool | None:
        inner = self._inner
        return inner if isinstance(inner, bool) else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BooleanBase):
            return NotImplemented
        return self._inner == other._inner

    def __hash__(self) -> int:
        return hash(self._inner)

    def __repr__(self) -> str:
        name = type(self).__name__
        if isinstance(self._inner, bool):
            return f"{name}.constant({self._inner})"
        return f"{name}({self._inner!r})"

    @classmethod
    def constant(cls: type[_B], value: bool) -> _B:
        """Return a constant boolean; no variables or constraints are created."""
        return cls(bool(value))

    @classmethod
    def constant_vec_from_bytes(cls: type[_B], values: Iterable[int]) -> list[_B]:
        """Return the little-endian bits of each byte as constants."""
        return [cls(bool((byte >> i) & 1)) for byte in values for i in range(8)]

    def lc(self) -> LinearCombination:
        """Return the linear combination that stands for this boolean."""
        allocated = self.allocated
        if allocated is not None:
            return LinearCombination({allocated.variable(): 1})
        if self._inner:
            return LinearCombination({Variable.ONE: 1})
        return LinearCombination()

    def cs(self) -> ConstraintSystem | None:
        """Return the constraint system, or ``None`` for a constant."""
        allocated = self.allocated
        return allocated.cs if allocated is not None else None

    def value(self) -> bool:
        """Return the boolean value."""
        allocated = self.allocated
        if allocated is not None:
            return allocated.value()
        return bool(self._inner)

    @classmethod
    def new_variable(
        cls: type[_B],
        cs: ConstraintSystem | None,
        f: Callable[[], Any],
        mode: AllocationMode,
    ) -> _B:
        """Allocate a boolean in ``mode``; constants allocate nothing."""
        if mode == AllocationMode.CONSTANT:
            return cls(bool(f()))
        return cls(AllocatedBool.new_variable(cs, f, mode))

    def __invert__(self: _B) -> _B:
        const = self._const()
        if const is not None:
            return type(self)(not const)
        return type(self)(self.allocated.not_())

    def __and__(self: _B, other: object) -> _B:
        if not isinstance(other, BooleanBase):
            return NotImplemented
        left, right = self._const(), other._const()
        if left is False or right is False:
            return type(self)(False)
        if left is True:
            return type(self)(other._inner)
        if right is True:
            return type(self)(self._inner)
        return type(self)(self.allocated.and_(other.allocated))

    def __or__(self: _B, other: object) -> _B:
        if not isinstance(other, BooleanBase):
            return NotImplemented
        left, right = self._const(), other._const()
        if left is False:
            return type(self)(other._inner)
        if right is False:
            return type(self)(self._inner)
        if left is True or right is True:
            return type(self)(True)
        return type(self)(self.allocated.or_(other.allocated))

    def __xor__(self: _B, other: object) -> _B:
        if not isinstance(other, BooleanBase):
            return NotImplemented
        left, right = self._const(), other._const()
        if left is False:
            return type(self)(other._inner)
        if right is False:
            return type(self)(self._inner)
        if left is True:
            return ~type(self)(other._inner)
        if right is True:
            return ~self
        return type(self)(self.allocated.xor(other.allocated))

    def nand(self: _B, other: BooleanBase) -> _B:
        """Return ``NOT (self AND other)``."""
        return ~(self & other)