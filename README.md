# densematrix

Small, dependency-free dense matrices of floating-point numbers.

`densematrix.matrix` provides a `Matrix` type that supports element-wise
addition and subtraction, scaling by a number, matrix multiplication,
transposition, minors, determinants, cofactor (algebraic complement)
matrices and inversion. Equality is tolerant: two matrices of the same
shape are equal when every pair of entries differs by no more than `1e-7`.

## Installation

```
pip install densematrix
```

## Usage

```python
from densematrix.matrix import Matrix, CalculationError

a = Matrix.from_rows([[1, 2, 3],
                      [4, 7, 9],
                      [87, 65, 43]])

a.determinant()        # -109.0 (up to rounding)
a.transpose()          # 3x3 matrix with rows and columns swapped
a.minor(1, 1)          # 2x2 matrix with row 1 and column 1 removed (1-based)
a.calc_complements()   # matrix of cofactors
a.inverse()            # inverse matrix

b = Matrix(3, 3)       # 3x3 matrix filled with zeros
b[0, 0] = 1.5
a + b                  # same as a.add(b)
a - b                  # same as a.sub(b)
2 * a                  # same as a.mul_number(2)
a @ b                  # same as a.mul_matrix(b)

a.equals(b)            # False; a == b gives the same answer
```

Cells are addressed from 0 with `m[i, j]`, and assigning to a cell stores
the value as a float. `m[i]` returns row `i` as a tuple, and iterating over
a matrix yields its rows as tuples. `m.rows`, `m.columns` and `m.shape`
give its size. `minor(row, column)` uses 1-based positions; the minor of a
1x1 matrix is a copy of it. The determinant is computed by cofactor
expansion along the first row. Matrices are mutable and not hashable.

The `+`, `-` and `@` operators work only between matrices, and `*` only
with a real number; other operand types give the usual `TypeError`.

## Errors

All errors derive from `MatrixError`:

- `IncorrectMatrixError` — a matrix or argument is unusable: non-positive
  dimensions, empty or ragged rows passed to `from_rows`, an operand of
  `add`, `sub` or `mul_matrix` that is not a `Matrix`, a multiplier of
  `mul_number` that is not a real number, or a minor position outside the
  matrix.
- `CalculationError` — the operation is undefined for the operands:
  shapes that do not match, a non-square matrix where a square one is
  required, or a matrix passed to `inverse()` whose determinant is smaller
  than `1e-7` in absolute value.

## Running the tests

```
pip install -e ".[test]"
pytest
```