"""Common interfaces for constraint-system gadgets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable

from .r1cs import ConstraintSystem, combine_cs


def _true() -> Any:
    from .boolean import Boolean

    return Boolean.constant(True)


class R1CSVar(ABC):
    """A variable living in (or constant with respect to) a constraint system."""

    @abstractmethod
    def cs(self) -> ConstraintSystem | None:
        """Return the constraint system, or ``None`` for a constant."""

    @abstractmethod
    def value(self) -> Any:
        """Return the assigned value."""

    def is_constant(self) -> bool:
        """Return whether the variable is a constant."""
        return self.cs() is None


def sequence_cs(variables: Iterable[R1CSVar]) -> ConstraintSystem | None:
    """Return the first constraint system used by any of ``variables``."""
    return combine_cs(*(v.cs() for v in variables))


def sequence_is_constant(variables: Iterable[R1CSVar]) -> bool:
    """Return whether all of ``variables`` are constants."""
    return sequence_cs(variables) is None


class EqGadget(ABC):
    """Constraints that check two variables for equality."""

    @abstractmethod
    def is_eq(self, other: Any) -> Any:
        """Return a boolean variable that is true iff the values are equal."""

    def is_neq(self, other: Any) -> Any:
        """Return a boolean variable that is true iff the values differ."""
        return ~self.is_eq(other)

    def conditional_enforce_equal(self, other: Any, should_enforce: Any) -> None:
        """Enforce equality when ``should_enforce`` is true."""
        self.is_eq(other).conditional_enforce_equal(_true(), should_enforce)

    def enforce_equal(self, other: Any) -> None:
        """Enforce that both values are equal."""
        self.conditional_enforce_equal(other, _true())

    def conditional_enforce_not_equal(self, other: Any, should_enforce: Any) -> None:
        """Enforce inequality when ``should_enforce`` is true."""
        self.is_neq(other).conditional_enforce_equal(_true(), should_enforce)

    def enforce_not_equal(self, other: Any) -> None:
        """Enforce that the values differ."""
        self.conditional_enforce_not_equal(other, _true())


class CmpGadget(R1CSVar):
    """Constraints that compare two variables."""

    def is_gt(self, other: Any) -> Any:
        """Return a boolean variable for ``self > other``."""
        return other.is_lt(self)

    @abstractmethod
    def is_ge(self, other: Any) -> Any:
        """Return a boolean variable for ``self >= other``."""

    def is_lt(self, other: Any) -> Any:
        """Return a boolean variable for ``self < other``."""
        return ~self.is_ge(other)

    def is_le(self, other: Any) -> Any:
        """Return a boolean variable for ``self <= other``."""
        return other.is_ge(self)


class ToBitsGadget(ABC):
    """Conversion to a bit-wise representation."""

    @abstractmethod
    def to_bits_le(self) -> list[Any]:
        """Return the canonical little-endian bits."""

    def to_non_unique_bits_le(self) -> list[Any]:
        """Return possibly non-canonical little-endian bits."""
        return self.to_bits_le()

    def to_bits_be(self) -> list[Any]:
        """Return the canonical big-endian bits."""
        return self.to_bits_le()[::-1]

    def to_non_unique_bits_be(self) -> list[Any]:
        """Return possibly non-canonical big-endian bits."""
        return self.to_non_unique_bits_le()[::-1]