"""Exceptions raised by the spline core.

The core never logs or reports on its own; every failure surfaces as one of
these typed exceptions for the host to interpret.
"""

from __future__ import annotations


class SplineError(Exception):
    """Base exception for all spline construction and evaluation errors."""


class DegenerateInputError(SplineError):
    """Raised when two or more control points share an abscissa.

    Attributes:
        x: The duplicated abscissa.
    """

    def __init__(self, x: float, message: str | None = None) -> None:
        self.x = x
        super().__init__(message or f"Control points share the abscissa x={x!r}")


class SingularSystemError(SplineError):
    """Raised when the tridiagonal solver cannot proceed.

    Covers zero pivots, non-finite inputs and elimination that overflows
    float64.

    Attributes:
        row: Row where elimination failed, or None for shape errors.
    """

    def __init__(self, message: str, row: int | None = None) -> None:
        self.row = row
        super().__init__(message)


class OutOfDomainError(SplineError):
    """Raised when a curve is evaluated outside ``[x_min, x_max]``.

    Attributes:
        x: Requested abscissa.
        domain: ``(x_min, x_max)`` of the curve, or None for an empty curve.
    """

    def __init__(self, x: float, domain: tuple[float, float] | None) -> None:
        self.x = x
        self.domain = domain
        if domain is None:
            message = f"Cannot evaluate an empty curve (x={x!r})"
        else:
            message = f"x={x!r} is outside the curve domain [{domain[0]!r}, {domain[1]!r}]"
        super().__init__(message)


class NumericOverflowError(SplineError):
    """Raised when finite control points produce a non-finite step or coefficient.

    Points spread across most of the float range, or packed closer than the
    ordinate differences can be divided by, overflow float64 arithmetic.

    Attributes:
        x: Left abscissa of the offending segment.
    """

    def __init__(self, x: float, message: str | None = None) -> None:
        self.x = x
        super().__init__(
            message or f"Spline arithmetic overflows float64 at the segment starting at x={x!r}"
        )
