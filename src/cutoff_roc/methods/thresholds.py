"""Decision threshold (cutoff) generation.

Observations are classified as positive when ``score <= cutoff``. Every
generated grid therefore starts one representable step below its smallest
value, so that an observation sitting exactly on the minimum lands in the
first real bin and the leading bin is empty.
"""

import numbers

import numpy as np
from numpy.typing import NDArray

from .method_utils import PreconditionViolation, as_float_array, check_sorted


def lead_in(value: float) -> float:
    """Return the largest float64 strictly below ``value``.

    Steps towards ``-inf`` rather than ``value - 1`` so the result is still
    strictly smaller for magnitudes where ``value - 1 == value``.
    """
    return float(np.nextafter(np.float64(value), -np.inf))


def equally_spaced(
    min_value: float, max_value: float, n: int, dtype: np.dtype = np.float64
) -> NDArray:
    """Generate ``n`` equally spaced cutoffs covering ``[min_value, max_value]``.

    The grid is ``np.linspace(min_value, max_value, n)`` with the first entry
    replaced by ``lead_in(min_value)``. For ``(0, 1, 5)`` this gives
    ``[-5e-324, 0.25, 0.5, 0.75, 1.0]``.

    Args:
        min_value: Lower end of the score range.
        max_value: Upper end of the score range. Must be >= min_value.
        n: Number of cutoffs, at least 2.
        dtype: Output dtype. Defaults to float64; the lead-in is rounded down
            into this dtype so it stays below ``min_value``.

    Returns:
        Ascending array of ``n`` cutoffs.

    Raises:
        PreconditionViolation: If ``n < 2`` or ``max_value < min_value``.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise PreconditionViolation(f"n must be an integer, got {n!r}")
    if n < 2:
        raise PreconditionViolation(f"n too small: need at least 2 cutoffs, got {n}")
    if not min_value <= max_value:
        raise PreconditionViolation(
            f"max_value ({max_value}) must not be less than min_value ({min_value})"
        )

    dtype = np.dtype(dtype)
    cutoffs = np.linspace(min_value, max_value, int(n), dtype=dtype)
    cutoffs[0] = np.nextafter(dtype.type(min_value), dtype.type(-np.inf))
    return cutoffs


def unique_cutoffs(y: NDArray) -> NDArray:
    """Derive one cutoff per distinct score plus a leading lead-in cutoff.

    Args:
        y: Scores sorted in ascending order.

    Returns:
        Array of length ``len(np.unique(y)) + 1``, or an empty array when
        ``y`` is empty.
    """
    y = as_float_array(y, "y")
    check_sorted(y, "y")
    if len(y) == 0:
        return np.empty(0, dtype=np.float64)

    # y is sorted, so distinct values are where consecutive entries differ
    keep = np.empty(len(y), dtype=bool)
    keep[0] = True
    np.not_equal(y[1:], y[:-1], out=keep[1:])

    return np.concatenate([[lead_in(y[0])], y[keep]])
