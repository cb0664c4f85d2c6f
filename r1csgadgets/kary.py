"""Many-operand AND, NAND and OR over boolean variables."""

from __future__ import annotations

from functools import reduce
from operator import and_, or_
from typing import Sequence

from .boolean import Boolean
from .gadgets import sequence_cs
from .logic import BooleanBase
from .r1cs import LinearCombination, Variable


def _as_boolean(bit: BooleanBase) -> Boolean:
    if isinstance(bit, Boolean):
        return bit
    allocated = bit.allocated
    if allocated is not None:
        return Boolean(allocated)
    return Boolean.constant(bit.value())


def _require_bits(bits: Sequence[BooleanBase]) -> list[Boolean]:
    result = [_as_boolean(bit) for bit in bits]
    if not result:
        raise ValueError("at least one bit is required")
    return result


def _sum_differs_from(bits: Sequence[Boolean], target: int) -> Boolean:
    """Return a boolean that is true iff the field sum of ``bits`` is not ``target``."""
    cs = sequence_cs(bits)
    if cs is None:
        return Boolean.constant(sum(bit.value() for bit in bits) != target)

    modulus = cs.modulus
    difference = LinearCombination({Variable.ONE: -target})
    for bit in bits:
        difference = difference + bit.lc()

    def diff_value() -> int:
        return (sum(int(bit.value()) for bit in bits) - target) % modulus

    is_not_equal = Boolean.new_witness(cs, lambda: diff_value() != 0)

    def multiplier_value() -> int:
        value = diff_value()
        return pow(value, -1, modulus) if value else 1

    multiplier = cs.new_witness_variable(multiplier_value)
    # (sum - target) * multiplier = is_not_equal
    cs.enforce_constraint(difference, multiplier, is_not_equal.lc())
    # (sum - target) * (1 - is_not_equal) = 0
    cs.enforce_constraint(
        difference, Variable.ONE - is_not_equal.lc(), LinearCombination()
    )
    return is_not_equal


def kary_and(bits: Sequence[BooleanBase]) -> Boolean:
    """Return ``bits[0] & bits[1] & ... & bits[-1]``."""
    values = _require_bits(bits)
    if len(values) <= 3:
        return _as_boolean(reduce(and_, values))
    # All bits are one iff their sum equals their number.
    return ~_sum_differs_from(values, len(values))


def kary_nand(bits: Sequence[BooleanBase]) -> Boolean:
    """Return ``!(bits[0] & bits[1] & ... & bits[-1])``."""
    return ~kary_and(bits)


def enforce_kary_nand(bits: Sequence[BooleanBase]) -> None:
    """Enforce that at least one element of ``bits`` is false."""
    kary_and(bits).enforce_equal(Boolean.FALSE)


def kary_or(bits: Sequence[BooleanBase]) -> Boolean:
    """Return ``bits[0] | bits[1] | ... | bits[-1]``."""
    values = _require_bits(bits)
    if len(values) <= 3:
        return _as_boolean(reduce(or_, values))
    # Some bit is one iff their sum is not zero.
    return _sum_differs_from(values, 0)