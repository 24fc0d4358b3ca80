# core/matrix.py
from typing import Optional, Sequence
import numpy as np
from raycaster.core.utils import equal
from raycaster.core.vector import Point3, Vector3

class SingularMatrixError(ValueError):
    """
    Raised when inverting a matrix whose determinant is zero. Every shape,
    pattern and camera transform must be invertible, so this aborts a render.
    """
    def __init__(self, matrix):
        self.matrix = matrix
        super().__init__(f"Matrix is not invertible (determinant is 0): {matrix!r}")


class SquareMatrix:
    """
    Dynamically sized NxN matrix used for cofactor expansion. Determinants,
    minors and cofactors recurse through progressively smaller submatrices
    until the 2x2 base case.
    """
    def __init__(self, data):
        self.data = np.array(data, dtype=np.float64)
        if self.data.ndim != 2 or self.data.shape[0] != self.data.shape[1]:
            raise ValueError(f"SquareMatrix needs an NxN grid, got shape {self.data.shape}")

    @property
    def size(self) -> int:
        return self.data.shape[0]

    def multiply(self, other: "SquareMatrix") -> "SquareMatrix":
        if self.size != other.size:
            raise ValueError(f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size}")
        n = self.size
        out = np.zeros((n, n))
        for row in range(n):
            for col in range(n):
                for i in range(n):
                    out[row, col] += self.data[row, i] * other.data[i, col]
        return SquareMatrix(out)

    def transpose(self) -> "SquareMatrix":
        return SquareMatrix(self.data.T)

    def submatrix(self, row: int, col: int) -> "SquareMatrix":
        """
        Copy of the matrix with one row and one column removed.
        """
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"({row}, {col}) is outside a {self.size}x{self.size} matrix")
        return SquareMatrix(np.delete(np.delete(self.data, row, axis=0), col, axis=1))

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return minor if (row + col) % 2 == 0 else -minor

    def determinant(self) -> float:
        if self.size == 0:
            # Empty minor of a 1x1 matrix.
            return 1.0
        if self.size == 1:
            return float(self.data[0, 0])
        if self.size == 2:
            return float(self.data[0, 0] * self.data[1, 1] - self.data[0, 1] * self.data[1, 0])
        # Expand along the first column.
        return sum(float(self.data[row, 0]) * self.cofactor(row, 0) for row in range(self.size))

    def inverse(self) -> "SquareMatrix":
        det = self.determinant()
        if det == 0:
            raise SingularMatrixError(self)
        n = self.size
        out = np.empty((n, n))
        for row in range(n):
            for col in range(n):
                # Transposed cofactor matrix (the adjugate) over the determinant.
                out[col, row] = self.cofactor(row, col) / det
        return SquareMatrix(out)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self.size == other.size and bool(np.all(np.abs(self.data - other.data) < 1e-4))

    __hash__ = None

    def __repr__(self) -> str:
        return f"SquareMatrix({self.data.tolist()})"


class Matrix:
    """
    Immutable 4x4 homogeneous transform, stored row-major.

    Multiplying by a Point3 applies the translation column, multiplying by a
    Vector3 ignores it. The inverse is computed once and cached because shapes,
    patterns and the camera invert their transforms for every ray.
    """
    __slots__ = ("_rows", "_inverse", "_transpose")

    def __init__(self, rows: Sequence[Sequence[float]]):
        rows = tuple(tuple(float(v) for v in row) for row in rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("Matrix needs exactly 4 rows of 4 values; use SquareMatrix for other sizes")
        self._rows = rows
        self._inverse: Optional["Matrix"] = None
        self._transpose: Optional["Matrix"] = None

    @staticmethod
    def identity() -> "Matrix":
        return IDENTITY

    def __getitem__(self, index) -> float:
        row, col = index
        return self._rows[row][col]

    def __mul__(self, other):
        r0, r1, r2, r3 = self._rows
        if isinstance(other, Matrix):
            cols = tuple(zip(*other._rows))
            return Matrix([[sum(a * b for a, b in zip(row, col)) for col in cols] for row in self._rows])
        if isinstance(other, Point3):
            x, y, z = other.x, other.y, other.z
            return Point3(
                r0[0] * x + r0[1] * y + r0[2] * z + r0[3],
                r1[0] * x + r1[1] * y + r1[2] * z + r1[3],
                r2[0] * x + r2[1] * y + r2[2] * z + r2[3]
            )
        if isinstance(other, Vector3):
            x, y, z = other.x, other.y, other.z
            return Vector3(
                r0[0] * x + r0[1] * y + r0[2] * z,
                r1[0] * x + r1[1] * y + r1[2] * z,
                r2[0] * x + r2[1] * y + r2[2] * z
            )
        return NotImplemented

    def transpose(self) -> "Matrix":
        if self._transpose is None:
            self._transpose = Matrix(tuple(zip(*self._rows)))
        return self._transpose

    def submatrix(self, row: int, col: int) -> SquareMatrix:
        return SquareMatrix(self._rows).submatrix(row, col)

    def minor(self, row: int, col: int) -> float:
        return SquareMatrix(self._rows).minor(row, col)

    def cofactor(self, row: int, col: int) -> float:
        return SquareMatrix(self._rows).cofactor(row, col)

    def determinant(self) -> float:
        return SquareMatrix(self._rows).determinant()

    def is_invertible(self) -> bool:
        return self.determinant() != 0

    def inverse(self) -> "Matrix":
        if self._inverse is None:
            try:
                inverted = SquareMatrix(self._rows).inverse()
            except SingularMatrixError:
                raise SingularMatrixError(self) from None
            self._inverse = Matrix(inverted.data.tolist())
        return self._inverse

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return all(
            equal(a, b)
            for row_a, row_b in zip(self._rows, other._rows)
            for a, b in zip(row_a, row_b)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self._rows]})"


IDENTITY = Matrix([
    [1.0, 0.0, 0.0, 0.0],
    [0.0, 1.0, 0.0, 0.0],
    [0.0, 0.0, 1.0, 0.0],
    [0.0, 0.0, 0.0, 1.0],
])
