"""Summary statistics over bill amounts.

Pure functions. No I/O. Every function is defined for empty input and
returns 0 rather than raising.
"""

from decimal import Decimal
from typing import Iterable

ZERO = Decimal("0")


def _as_decimals(values: Iterable[Decimal | int | float]) -> list[Decimal]:
    return [v if isinstance(v, Decimal) else Decimal(str(v)) for v in values]


def mean(values: Iterable[Decimal | int | float]) -> Decimal:
    """Arithmetic mean, 0 for an empty sequence."""
    vals = _as_decimals(values)
    if not vals:
        return ZERO
    return sum(vals, ZERO) / len(vals)


def standard_deviation(values: Iterable[Decimal | int | float]) -> Decimal:
    """Population standard deviation (divides by N, not N-1)."""
    vals = _as_decimals(values)
    if len(vals) < 2:
        return ZERO
    avg = mean(vals)
    variance = sum(((v - avg) ** 2 for v in vals), ZERO) / len(vals)
    return variance.sqrt()


def linear_trend_slope(values: Iterable[Decimal | int | float]) -> Decimal:
    """Least-squares slope of values against their index 0..N-1.

    slope = (N*Sxy - Sx*Sy) / (N*Sxx - Sx^2)
    """
    vals = _as_decimals(values)
    n = len(vals)
    if n < 2:
        return ZERO

    x_sum = n * (n - 1) // 2
    x2_sum = n * (n - 1) * (2 * n - 1) // 6
    y_sum = sum(vals, ZERO)
    xy_sum = sum((i * v for i, v in enumerate(vals)), ZERO)

    # Always positive for n >= 2
    denominator = n * x2_sum - x_sum * x_sum
    return (n * xy_sum - x_sum * y_sum) / denominator
