"""
Discrete Cosine Transform (type II) for the perceptual hash.

The transform is unnormalised:

    X[k] = sum_{n=0}^{N-1} x[n] * cos(pi * k * (2n + 1) / (2N))

A 2D transform runs the 1D transform over every row, then over every column
of the intermediate result. Scaling does not matter to the perceptual hash
since every coefficient is compared against a mean of coefficients, but the
row-then-column order and float32 intermediates are kept fixed so hashes stay
bit-compatible.

Plans hold the precomputed cosine basis for one transform size and are
immutable, so the cached instances from get_dct_plan() can be shared freely
between threads.
"""

from __future__ import annotations

from functools import lru_cache

from .dependencies import np


class DCTPlan:
    """
    Precomputed DCT-II basis for vectors of a fixed length.

    Usage:
        plan = DCTPlan(32)
        coefficients = plan.execute(samples)        # 1D, length 32
        transformed = plan.execute_rows(matrix)     # every row of (k, 32)
    """

    def __init__(self, size: int):
        """
        Build the basis matrix.

        Args:
            size: Transform length, must be a positive integer

        Raises:
            ValueError: If size is not a positive integer
        """
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 1:
            raise ValueError(f"DCT size must be a positive integer, got {size!r}")

        self.size = int(size)
        k = np.arange(self.size, dtype=np.float64).reshape(-1, 1)
        n = np.arange(self.size, dtype=np.float64).reshape(1, -1)
        basis = np.cos(np.pi * k * (2.0 * n + 1.0) / (2.0 * self.size))
        basis.setflags(write=False)
        # basis[k, n] is the weight of sample n in coefficient k
        self._basis = basis

    @property
    def basis(self) -> np.ndarray:
        """Read-only (size, size) cosine basis."""
        return self._basis

    def execute(self, vector) -> np.ndarray:
        """
        Transform a single vector.

        Args:
            vector: 1D array-like of length size

        Returns:
            float32 array of DCT-II coefficients

        Raises:
            ValueError: If the vector length does not match the plan
        """
        samples = np.asarray(vector, dtype=np.float32)
        if samples.shape != (self.size,):
            raise ValueError(
                f"Expected a vector of length {self.size}, got shape {samples.shape}"
            )
        return (self._basis @ samples.astype(np.float64)).astype(np.float32)

    def execute_rows(self, matrix) -> np.ndarray:
        """
        Transform every row of a 2D array independently.

        Args:
            matrix: Array-like of shape (rows, size)

        Returns:
            float32 array of the same shape
        """
        samples = np.asarray(matrix, dtype=np.float32)
        if samples.ndim != 2 or samples.shape[1] != self.size:
            raise ValueError(
                f"Expected rows of length {self.size}, got shape {samples.shape}"
            )
        return (samples.astype(np.float64) @ self._basis.T).astype(np.float32)

    def __repr__(self) -> str:
        return f"DCTPlan(size={self.size})"


@lru_cache(maxsize=8)
def get_dct_plan(size: int) -> DCTPlan:
    """Return the shared, read-only plan for a transform size."""
    return DCTPlan(size)


def dct_2d(samples, plan: DCTPlan | None = None) -> np.ndarray:
    """
    Separable 2D DCT-II of a square matrix: rows first, then columns.

    Args:
        samples: Square 2D array-like of floats
        plan: Optional plan; the cached plan for the matrix size by default

    Returns:
        float32 matrix of DCT coefficients, same shape as the input

    Raises:
        ValueError: If the input is not a non-empty square matrix, or the plan
            size does not match
    """
    matrix = np.asarray(samples, dtype=np.float32)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1] or matrix.shape[0] == 0:
        raise ValueError(f"2D DCT needs a non-empty square matrix, got shape {matrix.shape}")

    if plan is None:
        plan = get_dct_plan(matrix.shape[0])
    elif plan.size != matrix.shape[0]:
        raise ValueError(f"Plan size {plan.size} does not match matrix size {matrix.shape[0]}")

    # Rows, then the columns of the intermediate (transposed back afterwards)
    intermediate = plan.execute_rows(matrix)
    return plan.execute_rows(intermediate.T).T.copy()


__all__ = [
    'DCTPlan',
    'get_dct_plan',
    'dct_2d',
]
