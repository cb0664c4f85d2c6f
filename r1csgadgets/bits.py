"""Range checks on little-endian bit vectors and equality of sequences."""

from __future__ import annotations

from typing import Sequence

from .boolean import Boolean
from .gadgets import sequence_cs, sequence_is_constant
from .kary import enforce_kary_nand, kary_and
from .r1cs import AssignmentMissing, Unsatisfiable


def enforce_in_field_le(bits: Sequence[Boolean], modulus: int | None = None) -> None:
    """Enforce that ``bits``, read as a little-endian integer, is below ``modulus``.

    ``modulus`` defaults to the field modulus of the bits' constraint system.
    """
    if modulus is None:
        cs = sequence_cs(bits)
        if cs is None:
            raise AssignmentMissing("a modulus is needed for constant bits")
        modulus = cs.modulus
    if modulus % 2 != 1:
        raise ValueError("the modulus must be odd")
    # bits < p  <=>  bits <= p - 1
    run = enforce_smaller_or_equal_than_le(bits, modulus - 1)
    # p - 1 is even, so the element ends in a run of zeros.
    if run:
        raise ValueError("the modulus must be odd")


def enforce_smaller_or_equal_than_le(
    bits: Sequence[Boolean], element: int
) -> list[Boolean]:
    """Enforce that ``bits`` is at most ``element``, both as little-endian integers.

    Returns the trailing run of bits matched against ones of ``element``.
    """
    if element < 0:
        raise ValueError("the element must not be negative")
    element_bits = [c == "1" for c in bin(element)[2:]] if element else []
    big_endian = list(reversed(bits))

    last_run = Boolean.constant(True)
    current_run: list[Boolean] = []

    excess = len(bits) - len(element_bits)
    if excess > 0:
        or_result = Boolean.constant(False)
        for should_be_zero in bits[len(element_bits):]:
            or_result |= should_be_zero
        or_result.enforce_equal(Boolean.constant(False))
        big_endian = big_endian[excess:]

    for element_bit, bit in zip(element_bits, big_endian):
        if element_bit:
            current_run.append(bit)
            continue
        if current_run:
            current_run.append(last_run)
            last_run = kary_and(current_run)
            current_run = []
        # If the run so far is all ones, this bit must be zero.
        enforce_kary_nand([last_run, bit])

    return current_run


def _check_lengths(left: Sequence[Boolean], right: Sequence[Boolean]) -> None:
    if len(left) != len(right):
        raise ValueError(
            f"sequences differ in length: {len(left)} and {len(right)}"
        )


def sequence_is_eq(left: Sequence[Boolean], right: Sequence[Boolean]) -> Boolean:
    """Return a boolean that is true iff the sequences are element-wise equal."""
    _check_lengths(left, right)
    if not left:
        raise ValueError("sequences must not be empty")
    return kary_and([a.is_eq(b) for a, b in zip(left, right)])


def sequence_is_neq(left: Sequence[Boolean], right: Sequence[Boolean]) -> Boolean:
    """Return a boolean that is true iff some elements differ."""
    return ~sequence_is_eq(left, right)


def sequence_conditional_enforce_equal(
    left: Sequence[Boolean], right: Sequence[Boolean], condition: Boolean
) -> None:
    """Enforce element-wise equality when ``condition`` is true."""
    _check_lengths(left, right)
    for a, b in zip(left, right):
        a.conditional_enforce_equal(b, condition)


def sequence_enforce_equal(left: Sequence[Boolean], right: Sequence[Boolean]) -> None:
    """Enforce element-wise equality."""
    sequence_conditional_enforce_equal(left, right, Boolean.constant(True))


def sequence_conditional_enforce_not_equal(
    left: Sequence[Boolean], right: Sequence[Boolean], should_enforce: Boolean
) -> None:
    """Enforce that some elements differ when ``should_enforce`` is true.

    Raises ``Unsatisfiable`` when both the comparison and the condition are
    constant and the sequences are equal.
    """
    _check_lengths(left, right)
    some_are_different = sequence_is_neq(left, right)
    pair = [some_are_different, should_enforce]
    if sequence_is_constant(pair):
        if not some_are_different.value():
            raise Unsatisfiable("constant sequences are equal")
        return
    cs = sequence_cs(pair)
    cs.enforce_constraint(
        some_are_different.lc(), should_enforce.lc(), should_enforce.lc()
    )


def sequence_enforce_not_equal(
    left: Sequence[Boolean], right: Sequence[Boolean]
) -> None:
    """Enforce that some elements differ."""
    sequence_conditional_enforce_not_equal(left, right, Boolean.constant(True))