# r1csgadgets

Boolean gadgets for building rank-1 constraint systems (R1CS) over a prime field.

A constraint system collects variables and constraints of the form `a * b = c`. The variables are the constant one, public inputs and private witnesses. `a`, `b` and `c` are linear combinations of those variables. Gadgets are high-level values, such as booleans, that allocate their own variables and constraints. Every variable gets its value at the moment it is allocated. You can then check whether that assignment satisfies every constraint.

## Installation

```
pip install r1csgadgets
```

The package has no runtime dependencies.

## Quick start

```python
from r1csgadgets.r1cs import ConstraintSystem
from r1csgadgets.boolean import Boolean
from r1csgadgets.kary import kary_and

# The scalar field modulus of BLS12-381.
MODULUS = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001

cs = ConstraintSystem(MODULUS)

a = Boolean.new_witness(cs, lambda: True)
b = Boolean.new_witness(cs, lambda: False)

(a ^ b).enforce_equal(Boolean.TRUE)
(a & b).enforce_equal(Boolean.FALSE)
(a | b).enforce_equal(Boolean.TRUE)
(~a).enforce_equal(b)

cond = Boolean.new_witness(cs, lambda: True)
cond.select(a, b).enforce_equal(Boolean.TRUE)

kary_and([a, b, a]).enforce_equal(Boolean.FALSE)

assert cs.is_satisfied()
print(cs.num_constraints())
```

## What is inside

### `r1csgadgets.r1cs`

- `ConstraintSystem(modulus)`:
  - allocates variables with `new_input_variable`, `new_witness_variable` and `new_lc`;
  - adds constraints with `enforce_constraint(a, b, c)`;
  - reads values back with `assigned_value`;
  - checks the assignment with `is_satisfied()` and `which_is_unsatisfied()`, which returns the index of the first constraint that fails, or `None`;
  - counts constraints with `num_constraints()`.
- `Variable` has the special variables `Variable.ONE` and `Variable.ZERO`.
- `LinearCombination` supports `+`, `-`, unary `-`, scaling by an integer and `evaluate`.
- Errors: `SynthesisError`, and its subclasses `Unsatisfiable` and `AssignmentMissing`.
- `combine_cs(*args)` returns the first constraint system that is not `None`.

### `r1csgadgets.alloc`

- `AllocationMode`: one of `CONSTANT`, `INPUT` or `WITNESS`, ordered in that sequence, with `max`.
- The `AllocVar` base class, with `new_variable`, `new_constant`, `new_input` and `new_witness`.
- `alloc_sequence(element_cls, cs, f, mode)` allocates each value that `f` returns.
- `modes()` and `combination(values)` iterate over every allocation mode.

### `r1csgadgets.gadgets`

- The interfaces `R1CSVar`, `EqGadget`, `CmpGadget` and `ToBitsGadget`.
- `sequence_cs` and `sequence_is_constant` work on groups of variables.

### `r1csgadgets.allocated`

- `AllocatedBool`: a variable constrained to be 0 or 1.
- Its operations are `not_`, `xor`, `and_`, `or_`, `and_not` and `nor`.

### `r1csgadgets.logic`

- `BooleanBase`: a constant or an allocated bit.
- It supports the operators `~`, `&`, `|` and `^`, and `nand`.
- It provides `constant`, `constant_vec_from_bytes` and `lc`.

### `r1csgadgets.boolean`

- `Boolean` adds the following to `BooleanBase`:
  - equality: `is_eq`, `is_neq`, `enforce_equal`, `enforce_not_equal` and their conditional forms;
  - comparison: `is_ge`, `is_gt`, `is_lt` and `is_le`;
  - selection: `select` and `conditionally_select`;
  - bits: `to_bits_le` and `to_bits_be`.
- The constants `Boolean.TRUE` and `Boolean.FALSE`.

### `r1csgadgets.kary`

- `kary_and`, `kary_nand`, `enforce_kary_nand` and `kary_or`.
- Up to three bits are combined pairwise. More bits are checked with a single sum comparison.

### `r1csgadgets.bits`

- `enforce_smaller_or_equal_than_le` and `enforce_in_field_le` work on little-endian bit vectors.
- Element-wise equality over sequences of booleans:
  - `sequence_is_eq` and `sequence_is_neq`;
  - `sequence_enforce_equal` and `sequence_enforce_not_equal`;
  - the conditional forms of both.

### Constants

An operation on `&`, `|` or `^` creates no variables and no constraints when at least one operand is a constant. Enforcing equality between two different constants raises `Unsatisfiable` at once. Enforcing inequality between two equal constants does the same.

## What it does not do

- The package only provides boolean gadgets. It has no gadgets for field elements, for fixed-width integers or bytes, or for extension or emulated fields.
- The constraint system only records constraints and checks an assignment. It does not produce matrices or proofs.
- There is no command-line tool.

## Running the tests

```
pip install "r1csgadgets[test]"
pytest
```