"""
Dense matrix helpers for modular linear algebra
===============================================
A small row-major matrix wrapper over numpy, exposing only what the
polygraphic ciphers need: determinant, real inverse, matrix-vector
product and elementwise map. On top of it sit the modular helpers
used to invert a key matrix modulo the alphabet size.

Determinant and inverse are computed in floating point; callers round
back to integers immediately after each modular reduction so that
drift never accumulates. Key admissibility uses the exact integer
determinant, and a modular inverse that fails its identity check is
rebuilt from the exact adjugate.

Dependencies: numpy >= 1.24
"""

import logging
from fractions import Fraction
from typing import Callable, Optional, Sequence

import numpy as np

from .errors import DimensionMismatch, SingularMatrixError

logger = logging.getLogger(__name__)


class Matrix:
    """Immutable n×m matrix of floats."""

    TOLERANCE = 1e-9   # |det| below this counts as singular

    def __init__(self, rows):
        data = np.array(rows, dtype=float)
        if data.ndim != 2:
            raise DimensionMismatch(f"Expected a 2-D matrix, got {data.ndim} dimension(s).")
        data.setflags(write=False)
        self._data = data

    @classmethod
    def _wrap(cls, array: np.ndarray) -> "Matrix":
        m = cls.__new__(cls)
        array.setflags(write=False)
        m._data = array
        return m

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def determinant(self) -> float:
        if not self.is_square:
            raise DimensionMismatch("Determinant is only defined for square matrices.")
        return float(np.linalg.det(self._data))

    def inverse(self) -> "Matrix":
        """Real-valued inverse. Raises SingularMatrixError if there is none."""
        if not self.is_square:
            raise SingularMatrixError("A non-square matrix has no inverse.")
        if abs(self.determinant()) < self.TOLERANCE:
            raise SingularMatrixError("Matrix is singular (determinant is zero).")
        try:
            return Matrix._wrap(np.linalg.inv(self._data))
        except np.linalg.LinAlgError as e:
            raise SingularMatrixError(f"Matrix is singular: {e}") from e

    def multiply(self, vector: Sequence[float]) -> np.ndarray:
        """Matrix × column vector."""
        vec = np.asarray(vector, dtype=float)
        if vec.shape != (self.cols,):
            raise DimensionMismatch(
                f"Cannot multiply a {self.rows}x{self.cols} matrix "
                f"by a vector of shape {vec.shape}."
            )
        return self._data @ vec

    def map(self, fn: Callable[[float], float]) -> "Matrix":
        """Apply `fn` to every entry, returning a new matrix."""
        return Matrix._wrap(np.vectorize(fn, otypes=[float])(self._data))

    def round(self) -> "Matrix":
        return Matrix._wrap(np.rint(self._data))

    def tolist(self) -> list:
        return self._data.tolist()

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data.shape == other._data.shape and bool(np.all(self._data == other._data))

    def __repr__(self):
        return f"Matrix({self.rows}x{self.cols})"


# ── modular helpers ──────────────────────────────────────────────────────────

def mod_inverse(a: int, m: int = 26) -> Optional[int]:
    """
    Multiplicative inverse of `a` modulo `m`: the x in [1, m) with
    (a * x) % m == 1, or None when gcd(a, m) != 1.
    """
    a %= m
    for x in range(1, m):
        if (a * x) % m == 1:
            return x
    return None


def integer_determinant(rows: Sequence[Sequence[int]]) -> int:
    """
    Exact determinant of an integer matrix (Bareiss fraction-free
    elimination). Every intermediate division is exact, so this holds
    for determinants far past what a float can represent.
    """
    m = [[int(x) for x in r] for r in rows]
    n = len(m)
    sign, prev = 1, 1
    for k in range(n - 1):
        if m[k][k] == 0:
            swap = next((i for i in range(k + 1, n) if m[i][k] != 0), None)
            if swap is None:
                return 0
            m[k], m[swap] = m[swap], m[k]
            sign = -sign
        for i in range(k + 1, n):
            for j in range(k + 1, n):
                m[i][j] = (m[i][j] * m[k][k] - m[i][k] * m[k][j]) // prev
        prev = m[k][k]
    return sign * m[n - 1][n - 1]


def is_modular_inverse(key: Matrix, candidate: Matrix, modulus: int = 26) -> bool:
    """True when (key @ candidate) mod `modulus` is the identity."""
    if not (key.is_square and candidate.is_square and key.rows == candidate.rows):
        return False
    a = np.array(_int_rows(key), dtype=object)
    b = np.array(_int_rows(candidate), dtype=object)
    product = np.dot(a, b) % modulus
    return Matrix(product.tolist()) == Matrix(np.eye(key.rows))


def inverse_key_matrix(key: Matrix, modulus: int = 26) -> Matrix:
    """
    Inverse of `key` modulo `modulus`, entries in [0, modulus).

    Uses inv(K) * det(K) == adj(K): each real inverse entry is scaled
    back up by the determinant and rounded to recover the adjugate,
    which is then reduced and multiplied by det⁻¹ mod `modulus`.

    Once the determinant outgrows float precision that rounding can
    land on the wrong integer, so the result is checked against K and,
    if it fails, the adjugate is recomputed in exact rational arithmetic.

    `key` must already be known to be invertible modulo `modulus`;
    anything else is an internal error.
    """
    rows = _int_rows(key)
    det = integer_determinant(rows)
    det_inv = mod_inverse(det, modulus)
    if det_inv is None:
        raise RuntimeError(f"Determinant {det} has no inverse modulo {modulus}.")

    def reduce(x: float) -> float:
        adj = round(x * det) % modulus
        return float((adj * det_inv) % modulus)

    try:
        candidate = key.inverse().map(reduce)
    except (SingularMatrixError, OverflowError, ValueError):
        candidate = None

    if candidate is None or not is_modular_inverse(key, candidate, modulus):
        logger.debug(f"Float inverse drifted for a {key.rows}x{key.rows} key; using exact adjugate")
        candidate = Matrix([[(a * det_inv) % modulus for a in row]
                            for row in _adjugate_mod(rows, det, modulus)])

    logger.debug(f"Inverse key derived: det mod {modulus}={det % modulus} det_inv={det_inv}")
    return candidate


def _int_rows(m: Matrix) -> list:
    return [[int(x) for x in row] for row in m.round().tolist()]


def _adjugate_mod(rows: list, det: int, modulus: int) -> list:
    # Gauss-Jordan over the rationals; inv(K) * det is the integer adjugate.
    n = len(rows)
    aug = [[Fraction(x) for x in r] + [Fraction(int(i == j)) for j in range(n)]
           for i, r in enumerate(rows)]
    for col in range(n):
        pivot = next(i for i in range(col, n) if aug[i][col] != 0)
        aug[col], aug[pivot] = aug[pivot], aug[col]
        p = aug[col][col]
        aug[col] = [x / p for x in aug[col]]
        for i in range(n):
            if i != col and aug[i][col] != 0:
                f = aug[i][col]
                aug[i] = [x - f * y for x, y in zip(aug[i], aug[col])]
    return [[int(x * det) % modulus for x in row[n:]] for row in aug]
