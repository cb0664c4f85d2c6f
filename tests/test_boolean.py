import pytest

from r1csgadgets.alloc import AllocationMode, combination
from r1csgadgets.boolean import Boolean
from r1csgadgets.r1cs import ConstraintSystem, Unsatisfiable, combine_cs

FR_MODULUS = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001

UNARY_CASES = list(combination([False, True]))
BINARY_CASES = [
    (mode_a, a, mode_b, b)
    for mode_a, a in combination([False, True])
    for mode_b, b in combination([False, True])
]


def make_pair(mode_a, a, mode_b, b):
    cs = ConstraintSystem(FR_MODULUS)
    var_a = Boolean.new_variable(cs, lambda: a, mode_a)
    var_b = Boolean.new_variable(cs, lambda: b, mode_b)
    return var_a, var_b


def expected_mode(both_constant):
    return AllocationMode.CONSTANT if both_constant else AllocationMode.WITNESS


@pytest.mark.parametrize("mode_a,a,mode_b,b", BINARY_CASES)
def test_eq(mode_a, a, mode_b, b):
    va, vb = make_pair(mode_a, a, mode_b, b)
    cs = combine_cs(va.cs(), vb.cs())
    both_constant = va.is_constant() and vb.is_constant()
    computed = va.is_eq(vb)
    expected = Boolean.new_variable(
        cs, lambda: va.value() == vb.value(), expected_mode(both_constant)
    )
    assert expected.value() == computed.value() == (a == b)
    expected.enforce_equal(computed)
    if not both_constant:
        assert cs.is_satisfied()


@pytest.mark.parametrize("mode_a,a,mode_b,b", BINARY_CASES)
def test_neq(mode_a, a, mode_b, b):
    va, vb = make_pair(mode_a, a, mode_b, b)
    cs = combine_cs(va.cs(), vb.cs())
    both_constant = va.is_constant() and vb.is_constant()
    computed = va.is_neq(vb)
    expected = Boolean.new_variable(
        cs, lambda: va.value() != vb.value(), expected_mode(both_constant)
    )
    assert expected.value() == computed.value() == (a != b)
    expected.enforce_equal(computed)
    if not both_constant:
        assert cs.is_satisfied()


@pytest.mark.parametrize("mode_a,a,mode_b,b", BINARY_CASES)
def test_neq_and_eq_consistency(mode_a, a, mode_b, b):
    va, vb = make_pair(mode_a, a, mode_b, b)
    cs = combine_cs(va.cs(), vb.cs())
    both_constant = va.is_constant() and vb.is_constant()
    is_neq = va.is_neq(vb)
    is_eq = va.is_eq(vb)
    expected_is_neq = Boolean.new_variable(
        cs, lambda: va.value() != vb.value(), expected_mode(both_constant)
    )
    assert expected_is_neq.value() == is_neq.value()
    assert expected_is_neq.value() != is_eq.value()
    expected_is_neq.enforce_equal(is_neq)
    expected_is_neq.enforce_equal(~is_eq)
    expected_is_neq.enforce_not_equal(is_eq)
    if not both_constant:
        assert cs.is_satisfied()


@pytest.mark.parametrize("mode,a", UNARY_CASES)
def test_enforce_eq_and_enforce_neq_consistency(mode, a):
    cs = ConstraintSystem(FR_MODULUS)
    va = Boolean.new_variable(cs, lambda: a, mode)
    not_a = ~va
    va.enforce_equal(va)
    not_a.enforce_equal(not_a)
    va.enforce_not_equal(not_a)
    not_a.enforce_not_equal(va)
    assert not_a.value() == (not a)
    if not va.is_constant():
        assert cs.is_satisfied()


@pytest.mark.parametrize("mode_a,a,mode_b,b", BINARY_CASES)
def test_eq_soundness(mode_a, a, mode_b, b):
    va, vb = make_pair(mode_a, a, mode_b, b)
    cs = combine_cs(va.cs(), vb.cs())
    both_constant = va.is_constant() and vb.is_constant()
    computed = va.is_eq(vb)
    expected = Boolean.new_variable(
        cs, lambda: va.value() != vb.value(), expected_mode(both_constant)
    )
    assert expected.value() != computed.value()
    expected.enforce_not_equal(computed)
    if not both_constant:
        assert cs.is_satisfied()


@pytest.mark.parametrize("mode_a,a,mode_b,b", BINARY_CASES)
def test_neq_soundness(mode_a, a, mode_b, b):
    va, vb = make_pair(mode_a, a, mode_b, b)
    cs = combine_cs(va.cs(), vb.cs())
    both_constant = va.is_constant() and vb.is_constant()
    computed = va.is_neq(vb)
    expected = Boolean.new_variable(
        cs, lambda: va.value() == vb.value(), expected_mode(both_constant)
    )
    assert expected.value() != computed.value()
    expected.enforce_not_equal(computed)
    if not both_constant:
        assert cs.is_satisfied()


@pytest.mark.parametrize("cond_value", [True, False])
@pytest.mark.parametrize("mode_a,a,mode_b,b", BINARY_CASES)
def test_select(mode_a, a, mode_b, b, cond_value):
    va, vb = make_pair(mode_a, a, mode_b, b)
    cs = combine_cs(va.cs(), vb.cs())
    both_constant = va.is_constant() and vb.is_constant()
    mode = expected_mode(both_constant)
    expected = Boolean.new_variable(
        cs, lambda: va.value() if cond_value else vb.value(), mode
    )
    cond = Boolean.new_variable(cs, lambda: cond_value, mode)
    computed = cond.select(va, vb)
    assert expected.value() == computed.value() == (a if cond_value else b)
    expected.enforce_equal(computed)
    if not both_constant:
        assert cs.is_satisfied()


def test_constant_mismatch_is_unsatisfiable():
    with pytest.raises(Unsatisfiable):
        Boolean.TRUE.enforce_equal(Boolean.FALSE)


def test_constant_match_enforce_not_equal_is_unsatisfiable():
    with pytest.raises(Unsatisfiable):
        Boolean.FALSE.enforce_not_equal(Boolean.FALSE)


def test_enforce_equal_on_different_witnesses_is_unsatisfied():
    cs = ConstraintSystem(FR_MODULUS)
    a = Boolean.new_witness(cs, lambda: True)
    b = Boolean.new_witness(cs, lambda: False)
    a.enforce_equal(b)
    assert not cs.is_satisfied()


def test_enforce_not_equal_on_equal_witnesses_is_unsatisfied():
    cs = ConstraintSystem(FR_MODULUS)
    a = Boolean.new_witness(cs, lambda: True)
    b = Boolean.new_witness(cs, lambda: True)
    a.enforce_not_equal(b)
    assert not cs.is_satisfied()


def test_false_condition_adds_no_constraint():
    cs = ConstraintSystem(FR_MODULUS)
    a = Boolean.new_witness(cs, lambda: True)
    b = Boolean.new_witness(cs, lambda: False)
    before = cs.num_constraints()
    a.conditional_enforce_equal(b, Boolean.FALSE)
    a.conditional_enforce_not_equal(a, Boolean.FALSE)
    assert cs.num_constraints() == before
    assert cs.is_satisfied()


def test_false_witness_condition_relaxes_equality():
    cs = ConstraintSystem(FR_MODULUS)
    a = Boolean.new_witness(cs, lambda: True)
    b = Boolean.new_witness(cs, lambda: False)
    cond = Boolean.new_witness(cs, lambda: False)
    a.conditional_enforce_equal(b, cond)
    assert cs.is_satisfied()


@pytest.mark.parametrize(
    "a,b,ge",
    [(False, False, True), (True, False, True), (False, True, False), (True, True, True)],
)
def test_comparisons(a, b, ge):
    cs = ConstraintSystem(FR_MODULUS)
    va = Boolean.new_witness(cs, lambda: a)
    vb = Boolean.new_witness(cs, lambda: b)
    assert va.is_ge(vb).value() is ge
    assert va.is_lt(vb).value() is (not ge)
    assert va.is_le(vb).value() is (a <= b)
    assert va.is_gt(vb).value() is (a > b)
    assert cs.is_satisfied()


def test_select_with_constant_condition_returns_operand():
    cs = ConstraintSystem(FR_MODULUS)
    a = Boolean.new_witness(cs, lambda: True)
    b = Boolean.new_witness(cs, lambda: False)
    assert Boolean.TRUE.select(a, b) is a
    assert Boolean.FALSE.select(a, b) is b


def test_select_result_is_boolean_instance():
    cs = ConstraintSystem(FR_MODULUS)
    cond = Boolean.new_witness(cs, lambda: False)
    a = Boolean.new_witness(cs, lambda: True)
    result = cond.select(a, Boolean.FALSE)
    assert isinstance(result, Boolean)
    assert result.value() is False


def test_bits():
    cs = ConstraintSystem(FR_MODULUS)
    a = Boolean.new_witness(cs, lambda: True)
    assert a.to_bits_le() == [a]
    assert a.to_bits_be() == [a]
    assert Boolean.TRUE.to_non_unique_bits_le() == [Boolean.constant(True)]


def test_true_and_false_constants():
    assert Boolean.TRUE.value() is True
    assert Boolean.FALSE.value() is False
    assert Boolean.TRUE == Boolean.constant(True)
    assert Boolean.TRUE.is_constant()