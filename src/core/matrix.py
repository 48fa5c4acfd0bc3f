# core/matrix.py
from typing import Optional
import numpy as np
from core.utils import approx_eq

MATRIX_SIZE = 4


class Matrix:
    """
    Square row-major matrix of floats. The renderer works with 4x4 affine
    transforms; the 3x3 and 2x2 sizes only appear as sub-matrices during
    cofactor expansion.
    """

    def __init__(self, layout):
        m = np.array(layout, dtype=np.float64)
        if m.ndim != 2 or m.shape[0] != m.shape[1] or m.shape[0] < 2:
            raise ValueError(f"matrix layout must be square and at least 2x2, got shape {m.shape}")
        self._m = m

    @classmethod
    def new_from(cls, layout) -> "Matrix":
        return cls(layout)

    @classmethod
    def identity(cls, size: int = MATRIX_SIZE) -> "Matrix":
        return cls(np.identity(size))

    @property
    def size(self) -> int:
        return self._m.shape[0]

    def to_array(self) -> np.ndarray:
        return self._m.copy()

    def __getitem__(self, index) -> float:
        row, col = index
        return float(self._m[row, col])

    def transpose(self) -> "Matrix":
        return Matrix(self._m.T)

    def submatrix(self, row: int, col: int) -> "Matrix":
        """
        Returns a copy of the matrix with the given row and column removed.
        """
        m = np.delete(np.delete(self._m, row, axis=0), col, axis=1)
        return Matrix(m)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        if self.size == 2:
            m = self._m
            return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])
        det = 0.0
        for col in range(self.size):
            det += float(self._m[0, col]) * self.cofactor(0, col)
        return det

    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def invert(self) -> Optional["Matrix"]:
        """
        Inverts the matrix with the adjugate method. Returns None when the
        determinant is exactly zero.
        """
        det = self.determinant()
        if det == 0.0:
            return None

        n = self.size
        inverse = np.zeros((n, n), dtype=np.float64)
        for row in range(n):
            for col in range(n):
                # Transposed assignment: the adjugate is the transposed cofactor matrix.
                inverse[col, row] = self.cofactor(row, col) / det
        return Matrix(inverse)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError(f"cannot multiply {self.size}x{self.size} by {other.size}x{other.size} matrix")
            return Matrix(self._m @ other._m)
        if all(hasattr(other, a) for a in ("x", "y", "z", "w")):
            if self.size != MATRIX_SIZE:
                raise ValueError(f"only {MATRIX_SIZE}x{MATRIX_SIZE} matrices transform tuples")
            x, y, z, _ = self._m @ np.array([other.x, other.y, other.z, other.w])
            # w is implied by the tuple type, so it is not carried over.
            return type(other)(x, y, z)
        return NotImplemented

    __matmul__ = __mul__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.size != self.size:
            return False
        return all(approx_eq(a, b) for a, b in zip(self._m.flat, other._m.flat))

    __hash__ = None

    def __repr__(self) -> str:
        rows = ", ".join("[" + ", ".join(f"{v:g}" for v in row) + "]" for row in self._m)
        return f"Matrix([{rows}])"
