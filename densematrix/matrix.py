"""Dense matrices of floats with arithmetic, determinants and inversion."""

from __future__ import annotations

from numbers import Real
from typing import Iterable, Iterator, Sequence

EPS = 1e-7


class MatrixError(Exception):
    """Base class for matrix errors."""


class IncorrectMatrixError(MatrixError):
    """A matrix or an argument is malformed: bad size, missing operand, bad index."""


class CalculationError(MatrixError):
    """The operation cannot be carried out on matrices of these shapes or values."""


class Matrix:
    """A rectangular matrix of floats with at least one row and one column."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, columns: int) -> None:
        if rows < 1 or columns < 1:
            raise IncorrectMatrixError(
                f"matrix size must be positive, got {rows}x{columns}"
            )
        self.rows = rows
        self.columns = columns
        self._data = [[0.0] * columns for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> "Matrix":
        """Build a matrix from an iterable of equally long rows."""
        data = [[float(value) for value in row] for row in rows]
        if not data or not data[0]:
            raise IncorrectMatrixError("matrix must have at least one row and column")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise IncorrectMatrixError("all rows must have the same length")
        result = cls(len(data), width)
        result._data = data
        return result

    def __getitem__(self, index):
        if isinstance(index, tuple):
            row, column = index
            return self._data[row][column]
        return tuple(self._data[index])

    def __setitem__(self, index, value) -> None:
        if not isinstance(index, tuple):
            raise TypeError("matrix cells are addressed as [row, column]")
        row, column = index
        self._data[row][column] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return (tuple(row) for row in self._data)

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.columns

    def equals(self, other: object) -> bool:
        """True when other is a matrix of the same shape whose cells differ by at most 1e-7."""
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        return all(
            abs(a - b) <= EPS
            for row_a, row_b in zip(self._data, other._data)
            for a, b in zip(row_a, row_b)
        )

    def _require_same_shape(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            raise IncorrectMatrixError("operand is not a matrix")
        if self.shape != other.shape:
            raise CalculationError(
                f"shapes differ: {self.rows}x{self.columns} and {other.rows}x{other.columns}"
            )
        return other

    def _require_square(self) -> None:
        if self.rows != self.columns:
            raise CalculationError(
                f"matrix must be square, got {self.rows}x{self.columns}"
            )

    def add(self, other: "Matrix") -> "Matrix":
        other = self._require_same_shape(other)
        return Matrix.from_rows(
            [a + b for a, b in zip(ra, rb)] for ra, rb in zip(self._data, other._data)
        )

    def sub(self, other: "Matrix") -> "Matrix":
        other = self._require_same_shape(other)
        return Matrix.from_rows(
            [a - b for a, b in zip(ra, rb)] for ra, rb in zip(self._data, other._data)
        )

    def mul_number(self, number: float) -> "Matrix":
        if not isinstance(number, Real):
            raise IncorrectMatrixError("multiplier must be a real number")
        return Matrix.from_rows([value * number for value in row] for row in self._data)

    def mul_matrix(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            raise IncorrectMatrixError("operand is not a matrix")
        if self.columns != other.rows:
            raise CalculationError(
                f"cannot multiply {self.rows}x{self.columns} by {other.rows}x{other.columns}"
            )
        other_columns = list(zip(*other._data))
        return Matrix.from_rows(
            [sum(a * b for a, b in zip(row, column)) for column in other_columns]
            for row in self._data
        )

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, number: object) -> "Matrix":
        if not isinstance(number, Real):
            return NotImplemented
        return self.mul_number(number)

    def __rmul__(self, number: object) -> "Matrix":
        return self.__mul__(number)

    def __matmul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.mul_matrix(other)

    def transpose(self) -> "Matrix":
        return Matrix.from_rows(list(column) for column in zip(*self._data))

    def minor(self, row: int, column: int) -> "Matrix":
        """Return the submatrix without the given 1-based row and column.

        A 1x1 matrix yields a copy of itself.
        """
        self._require_square()
        if not (1 <= row <= self.rows and 1 <= column <= self.columns):
            raise IncorrectMatrixError(f"minor position ({row}, {column}) out of range")
        if self.rows == 1:
            return Matrix.from_rows(self._data)
        return Matrix.from_rows(
            [value for j, value in enumerate(line) if j != column - 1]
            for i, line in enumerate(self._data)
            if i != row - 1
        )

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        self._require_square()
        data = self._data
        if self.rows == 1:
            return data[0][0]
        if self.rows == 2:
            return data[0][0] * data[1][1] - data[0][1] * data[1][0]
        return sum(
            (1 if j % 2 == 0 else -1) * value * self.minor(1, j + 1).determinant()
            for j, value in enumerate(data[0])
        )

    def calc_complements(self) -> "Matrix":
        """Matrix of algebraic complements (cofactors)."""
        self._require_square()
        return Matrix.from_rows(
            [
                (-1) ** (i + j) * self.minor(i + 1, j + 1).determinant()
                for j in range(self.columns)
            ]
            for i in range(self.rows)
        )

    def inverse(self) -> "Matrix":
        """Inverse matrix; raises CalculationError when the determinant is below 1e-7."""
        self._require_square()
        if self.rows == 1:
            value = self._data[0][0]
            if abs(value) < EPS:
                raise CalculationError("matrix is singular")
            return Matrix.from_rows([[1 / value]])
        det = self.determinant()
        if abs(det) < EPS:
            raise CalculationError("matrix is singular")
        return self.calc_complements().transpose().mul_number(1 / det)