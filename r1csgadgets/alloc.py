"""Allocation of high-level variables in a constraint system."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Callable, Iterable, Iterator

from .r1cs import ConstraintSystem


class AllocationMode(IntEnum):
    """How a variable is allocated, ordered ``CONSTANT < INPUT < WITNESS``."""

    CONSTANT = 0
    INPUT = 1
    WITNESS = 2

    def max(self, other: AllocationMode) -> AllocationMode:
        """Return the larger of the two modes."""
        return self if self >= other else other


class AllocVar(ABC):
    """A type that can be allocated in a constraint system."""

    @classmethod
    @abstractmethod
    def new_variable(
        cls, cs: ConstraintSystem | None, f: Callable[[], Any], mode: AllocationMode
    ) -> Any:
        """Allocate a new variable whose value is produced by ``f``."""

    @classmethod
    def new_constant(cls, cs: ConstraintSystem | None, value: Any) -> Any:
        """Allocate a constant; no variables or constraints are created."""
        return cls.new_variable(cs, lambda: value, AllocationMode.CONSTANT)

    @classmethod
    def new_input(cls, cs: ConstraintSystem | None, f: Callable[[], Any]) -> Any:
        """Allocate a public input."""
        return cls.new_variable(cs, f, AllocationMode.INPUT)

    @classmethod
    def new_witness(cls, cs: ConstraintSystem | None, f: Callable[[], Any]) -> Any:
        """Allocate a private witness."""
        return cls.new_variable(cs, f, AllocationMode.WITNESS)


def alloc_sequence(
    element_cls: type,
    cs: ConstraintSystem | None,
    f: Callable[[], Iterable[Any]],
    mode: AllocationMode,
) -> list[Any]:
    """Allocate every value produced by ``f`` as an ``element_cls``."""
    return [
        element_cls.new_variable(cs, lambda v=value: v, mode) for value in f()
    ]


def modes() -> Iterator[AllocationMode]:
    """Yield every allocation mode, constant first."""
    yield from (AllocationMode.CONSTANT, AllocationMode.INPUT, AllocationMode.WITNESS)


def combination(values: Iterable[Any]) -> Iterator[tuple[AllocationMode, Any]]:
    """Pair each value with every allocation mode in turn."""
    for value in values:
        for mode in modes():
            yield mode, value