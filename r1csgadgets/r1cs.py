"""Rank-1 constraint systems over a prime field."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Iterator, Mapping, Union


class SynthesisError(Exception):
    """Raised when constraints cannot be synthesized."""


class Unsatisfiable(SynthesisError):
    """Raised when a constraint can never hold."""


class AssignmentMissing(SynthesisError):
    """Raised when a value needed during synthesis is unavailable."""


class VariableKind(Enum):
    """The kinds of variable a constraint system knows about."""

    ZERO = "zero"
    ONE = "one"
    INSTANCE = "instance"
    WITNESS = "witness"
    SYMBOLIC = "symbolic"


@dataclass(frozen=True)
class Variable:
    """A handle on a value held by a constraint system."""

    kind: VariableKind
    index: int = 0

    ONE: ClassVar["Variable"]
    ZERO: ClassVar["Variable"]

    def __add__(self, other: Terms) -> LinearCombination:
        return LinearCombination({self: 1}) + other

    def __sub__(self, other: Terms) -> LinearCombination:
        return LinearCombination({self: 1}) - other

    def __neg__(self) -> LinearCombination:
        return LinearCombination({self: -1})

    def __mul__(self, scalar: int) -> LinearCombination:
        return LinearCombination({self: scalar})

    __rmul__ = __mul__


Variable.ONE = Variable(VariableKind.ONE)
Variable.ZERO = Variable(VariableKind.ZERO)


class LinearCombination:
    """A sum of variables, each scaled by an integer coefficient."""

    __slots__ = ("_terms",)

    def __init__(self, terms: Mapping[Variable, int] | None = None) -> None:
        self._terms: dict[Variable, int] = {}
        for variable, coeff in (terms or {}).items():
            self._accumulate(variable, coeff)

    def _accumulate(self, variable: Variable, coeff: int) -> None:
        if variable.kind is VariableKind.ZERO:
            return
        total = self._terms.get(variable, 0) + coeff
        if total == 0:
            self._terms.pop(variable, None)
        else:
            self._terms[variable] = total

    def _combined(self, other: object, sign: int) -> LinearCombination:
        other_lc = _coerce(other)
        result = LinearCombination(self._terms)
        for variable, coeff in other_lc:
            result._accumulate(variable, sign * coeff)
        return result

    def __add__(self, other: Terms) -> LinearCombination:
        if not isinstance(other, (LinearCombination, Variable)):
            return NotImplemented
        return self._combined(other, 1)

    def __radd__(self, other: Terms) -> LinearCombination:
        if not isinstance(other, (LinearCombination, Variable)):
            return NotImplemented
        return _coerce(other)._combined(self, 1)

    def __sub__(self, other: Terms) -> LinearCombination:
        if not isinstance(other, (LinearCombination, Variable)):
            return NotImplemented
        return self._combined(other, -1)

    def __rsub__(self, other: Terms) -> LinearCombination:
        if not isinstance(other, (LinearCombination, Variable)):
            return NotImplemented
        return _coerce(other)._combined(self, -1)

    def __neg__(self) -> LinearCombination:
        return LinearCombination({v: -c for v, c in self._terms.items()})

    def __mul__(self, scalar: int) -> LinearCombination:
        if not isinstance(scalar, int):
            return NotImplemented
        return LinearCombination({v: c * scalar for v, c in self._terms.items()})

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[tuple[Variable, int]]:
        return iter(list(self._terms.items()))

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Variable):
            other = LinearCombination({other: 1})
        if not isinstance(other, LinearCombination):
            return NotImplemented
        return self._terms == other._terms

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = " + ".join(f"{c}*{v.kind.value}[{v.index}]" for v, c in self._terms.items())
        return f"LinearCombination({inner or '0'})"

    def evaluate(self, assignment: Callable[[Variable], int], modulus: int) -> int:
        """Return the value of the combination modulo ``modulus``.

        ``assignment`` maps each non-constant variable to its value; the
        constant variable ``Variable.ONE`` always evaluates to one.
        """
        total = 0
        for variable, coeff in self._terms.items():
            value = 1 if variable.kind is VariableKind.ONE else assignment(variable)
            total += coeff * value
        return total % modulus


Terms = Union[LinearCombination, Variable]


def _coerce(value: object) -> LinearCombination:
    if isinstance(value, LinearCombination):
        return value
    if isinstance(value, Variable):
        return LinearCombination({value: 1})
    raise TypeError(f"cannot use {type(value).__name__} as a linear combination")


class ConstraintSystem:
    """Collects variables and constraints of the form ``a * b = c``."""

    def __init__(self, modulus: int) -> None:
        if modulus < 2:
            raise ValueError("the field modulus must be at least 2")
        self.modulus = modulus
        self._instance: list[int] = []
        self._witness: list[int] = []
        self._symbolic: list[LinearCombination] = []
        self._symbolic_values: dict[int, int] = {}
        self._constraints: list[tuple[LinearCombination, LinearCombination, LinearCombination]] = []

    def __repr__(self) -> str:
        return (
            f"ConstraintSystem(modulus={self.modulus}, inputs={len(self._instance)}, "
            f"witnesses={len(self._witness)}, constraints={len(self._constraints)})"
        )

    def _to_field(self, value: int | bool) -> int:
        return int(value) % self.modulus

    def new_input_variable(self, f: Callable[[], int | bool]) -> Variable:
        """Allocate a public input whose value is produced by ``f``."""
        value = self._to_field(f())
        self._instance.append(value)
        return Variable(VariableKind.INSTANCE, len(self._instance) - 1)

    def new_witness_variable(self, f: Callable[[], int | bool]) -> Variable:
        """Allocate a private witness whose value is produced by ``f``."""
        value = self._to_field(f())
        self._witness.append(value)
        return Variable(VariableKind.WITNESS, len(self._witness) - 1)

    def new_lc(self, lc: Terms) -> Variable:
        """Return a variable that stands for the linear combination ``lc``."""
        self._symbolic.append(_coerce(lc))
        return Variable(VariableKind.SYMBOLIC, len(self._symbolic) - 1)

    def enforce_constraint(self, a: Terms, b: Terms, c: Terms) -> None:
        """Add the constraint ``a * b = c``."""
        self._constraints.append((_coerce(a), _coerce(b), _coerce(c)))

    def assigned_value(self, variable: Variable) -> int:
        """Return the field value assigned to ``variable``."""
        kind = variable.kind
        try:
            if kind is VariableKind.ZERO:
                return 0
            if kind is VariableKind.ONE:
                return 1
            if kind is VariableKind.INSTANCE:
                return self._instance[variable.index]
            if kind is VariableKind.WITNESS:
                return self._witness[variable.index]
            cached = self._symbolic_values.get(variable.index)
            if cached is None:
                lc = self._symbolic[variable.index]
                cached = lc.evaluate(self.assigned_value, self.modulus)
                self._symbolic_values[variable.index] = cached
            return cached
        except IndexError:
            raise AssignmentMissing(f"no value assigned to {variable}") from None

    def _evaluate(self, lc: LinearCombination) -> int:
        return lc.evaluate(self.assigned_value, self.modulus)

    def which_is_unsatisfied(self) -> int | None:
        """Return the index of the first violated constraint, or ``None``."""
        for position, (a, b, c) in enumerate(self._constraints):
            if (self._evaluate(a) * self._evaluate(b) - self._evaluate(c)) % self.modulus:
                return position
        return None

    def is_satisfied(self) -> bool:
        """Return whether every constraint holds for the assigned values."""
        return self.which_is_unsatisfied() is None

    def num_constraints(self) -> int:
        """Return the number of constraints enforced so far."""
        return len(self._constraints)


def combine_cs(*args: ConstraintSystem | None) -> ConstraintSystem | None:
    """Return the first constraint system given, ignoring ``None``."""
    return next((cs for cs in args if cs is not None), None)