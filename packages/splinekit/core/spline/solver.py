"""Tridiagonal linear system solver.

Implements the Thomas algorithm: one forward elimination pass followed by
back substitution, O(n) in time and auxiliary space.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from splinekit.core.spline.errors import SingularSystemError


def solve_tridiagonal(
    a: Sequence[float] | np.ndarray,
    b: Sequence[float] | np.ndarray,
    c: Sequence[float] | np.ndarray,
    d: Sequence[float] | np.ndarray,
) -> np.ndarray:
    """Solve ``a[i]*x[i-1] + b[i]*x[i] + c[i]*x[i+1] = d[i]`` for x.

    ``a[0]`` and ``c[n-1]`` fall outside the matrix and are ignored.

    Args:
        a: Sub-diagonal, length n.
        b: Main diagonal, length n.
        c: Super-diagonal, length n.
        d: Right-hand side, length n.

    Returns:
        Solution vector of length n (float64).

    Raises:
        SingularSystemError: If the inputs are empty, of unequal length or
            not finite, if a pivot is zero, or if elimination overflows.

    Example:
        >>> solve_tridiagonal([0, 1], [2, 2], [1, 0], [3, 3]).tolist()
        [1.0, 1.0]
    """
    a_arr = np.array(a, dtype=np.float64)
    b_arr = np.asarray(b, dtype=np.float64)
    c_arr = np.array(c, dtype=np.float64)
    d_arr = np.asarray(d, dtype=np.float64)

    n = len(b_arr)
    if n == 0:
        raise SingularSystemError("Tridiagonal system is empty")
    if not (len(a_arr) == len(c_arr) == len(d_arr) == n):
        raise SingularSystemError(
            "Tridiagonal system has mismatched lengths: "
            f"a={len(a_arr)}, b={n}, c={len(c_arr)}, d={len(d_arr)}"
        )

    # Entries outside the matrix
    a_arr[0] = 0.0
    c_arr[n - 1] = 0.0

    for name, values in (("a", a_arr), ("b", b_arr), ("c", c_arr), ("d", d_arr)):
        bad = np.flatnonzero(~np.isfinite(values))
        if bad.size:
            row = int(bad[0])
            raise SingularSystemError(f"Non-finite coefficient {name}[{row}]", row=row)

    p = np.zeros(n, dtype=np.float64)
    q = np.zeros(n, dtype=np.float64)
    x = np.zeros(n, dtype=np.float64)

    # Overflow is detected per row below instead of warned about
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        if b_arr[0] == 0.0:
            raise SingularSystemError("Zero pivot in row 0", row=0)
        p[0] = c_arr[0] / b_arr[0]
        q[0] = d_arr[0] / b_arr[0]
        _check_row(p, q, 0)

        # Forward elimination
        for i in range(1, n):
            den = b_arr[i] - a_arr[i] * p[i - 1]
            if den == 0.0:
                raise SingularSystemError(f"Zero pivot in row {i}", row=i)
            if not np.isfinite(den):
                raise SingularSystemError(f"Non-finite pivot in row {i}", row=i)
            p[i] = c_arr[i] / den
            q[i] = (d_arr[i] - a_arr[i] * q[i - 1]) / den
            _check_row(p, q, i)

        # Back substitution
        x[n - 1] = q[n - 1]
        for i in range(n - 2, -1, -1):
            x[i] = q[i] - p[i] * x[i + 1]
            if not np.isfinite(x[i]):
                raise SingularSystemError(f"Back substitution overflows in row {i}", row=i)

    return x


def _check_row(p: np.ndarray, q: np.ndarray, i: int) -> None:
    if not (np.isfinite(p[i]) and np.isfinite(q[i])):
        raise SingularSystemError(f"Elimination overflows in row {i}", row=i)
