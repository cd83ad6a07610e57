"""Square matrix type for 3D transforms.

A single Matrix type backs every transform in the ray tracer. Full transforms
are always 4x4; 3x3 and 2x2 matrices only appear as submatrices produced while
computing minors and cofactors, so determinant and inverse are defined by
recursive cofactor expansion over the same type.

Multiplying a Matrix by a Point or Vector with the ``@`` operator treats the
operand as a 4-component column (w = 1 for points, w = 0 for vectors), so
translation never affects vectors.

Example:
    >>> from raytracer.core.matrix import Matrix
    >>> from raytracer.core.tuples import Point
    >>> m = Matrix([[1, 0, 0, 5], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])
    >>> m.inverse() @ Point(5.0, 0.0, 0.0)
    Point(x=0.0, y=0.0, z=0.0)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import overload

import numpy as np
import numpy.typing as npt

from raytracer.core.errors import SingularMatrix
from raytracer.core.tuples import EPSILON, Point, Vector

# Determinants smaller than this are treated as zero when inverting
DETERMINANT_EPSILON = 1e-12


class Matrix:
    """A square matrix of float64 values (2x2, 3x3 or 4x4).

    Matrices are treated as immutable values: every operation returns a new
    Matrix and the backing array is marked read-only.
    """

    __slots__ = ("_data",)

    def __init__(self, rows: Sequence[Sequence[float]] | npt.NDArray[np.float64]) -> None:
        """Create a matrix from nested rows.

        Args:
            rows: Row-major values; must describe a square matrix of size 2-4.

        Raises:
            ValueError: If the rows do not form a square 2x2, 3x3 or 4x4 matrix.
        """
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1] or not 2 <= data.shape[0] <= 4:
            raise ValueError(f"Matrix must be square with size 2-4, got shape {data.shape}")
        data.flags.writeable = False
        self._data = data

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        """Return the identity matrix of the given size."""
        return cls(np.identity(size))

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return self._data.shape[0]

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self._data[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data.shape == other._data.shape and bool(
            np.allclose(self._data, other._data, rtol=0.0, atol=EPSILON)
        )

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"

    @overload
    def __matmul__(self, other: Matrix) -> Matrix: ...

    @overload
    def __matmul__(self, other: Point) -> Point: ...

    @overload
    def __matmul__(self, other: Vector) -> Vector: ...

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError(f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size}")
            return Matrix(self._data @ other._data)
        if isinstance(other, (Point, Vector)):
            if self.size != 4:
                raise ValueError("Only 4x4 matrices can transform points and vectors")
            x, y, z, _ = self._data @ np.array((other.x, other.y, other.z, other.w))
            return type(other)(float(x), float(y), float(z))
        return NotImplemented

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a writable copy of the underlying array."""
        return self._data.copy()

    def transpose(self) -> Matrix:
        """Return the transposed matrix."""
        return Matrix(self._data.T)

    # =========================================================================
    # Cofactor expansion
    # =========================================================================

    def submatrix(self, row: int, col: int) -> Matrix:
        """Return the matrix with the given row and column removed."""
        if self.size <= 2:
            raise ValueError("Cannot take a submatrix of a 2x2 matrix")
        reduced = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix(reduced)

    def minor(self, row: int, col: int) -> float:
        """Determinant of the submatrix at (row, col)."""
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        """Minor at (row, col), negated when row + col is odd."""
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        """Compute the determinant by cofactor expansion along the first row."""
        if self.size == 2:
            d = self._data
            return float(d[0, 0] * d[1, 1] - d[0, 1] * d[1, 0])
        return sum(float(self._data[0, col]) * self.cofactor(0, col) for col in range(self.size))

    def is_invertible(self) -> bool:
        """Return True if the determinant is not numerically zero."""
        return abs(self.determinant()) >= DETERMINANT_EPSILON

    def inverse(self) -> Matrix:
        """Compute the inverse via the transposed cofactor matrix.

        Returns:
            The inverse matrix.

        Raises:
            SingularMatrix: If the determinant is within DETERMINANT_EPSILON of zero.
        """
        det = self.determinant()
        if abs(det) < DETERMINANT_EPSILON:
            raise SingularMatrix(f"Matrix is not invertible (determinant={det!r})")

        n = self.size
        cofactors = np.empty((n, n), dtype=np.float64)
        for row in range(n):
            for col in range(n):
                cofactors[row, col] = self.cofactor(row, col)
        # inverse[col, row] = cofactor(row, col) / det
        return Matrix(cofactors.T / det)


IDENTITY = Matrix.identity()
