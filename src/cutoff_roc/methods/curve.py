"""Empirical ROC curves evaluated at fixed decision cutoffs.

For a cutoff ``c`` an observation with score ``s`` is predicted positive when
``s <= c``. Raising the cutoff can only grow the predicted-positive set, so
TPR and FPR are cumulative over the ascending cutoffs.

Binning follows a sorted merge of scores and cutoffs: each observation
belongs to the first bin whose cutoff is >= its score, and observations above
the final cutoff are folded into the last bin. Bins that receive no
observation inherit the cumulative total of the nearest lower bin.

Key functions:
    compute_roc: Full result (cutoffs, rates and class totals) as a RocCurve.
    build_roc: ``(tpr, fpr)`` pair for caller-supplied or derived cutoffs.
    build_roc_torch: Same computation on torch tensors.
"""

import warnings
from dataclasses import dataclass

import numpy as np
import pandas as pd
import torch
from numpy.typing import ArrayLike, NDArray
from torch import Tensor

from .method_utils import (
    as_bool_array,
    as_float_array,
    check_lengths,
    check_sorted,
    check_weights,
    numpy_to_torch,
)
from .thresholds import unique_cutoffs


@dataclass
class RocCurve:
    """ROC curve evaluated at a sequence of cutoffs.

    Attributes:
        cutoffs: Effective cutoffs, ascending. Derived from the scores when
            the caller supplied none.
        tpr: True positive rate at each cutoff.
        fpr: False positive rate at each cutoff.
        n_pos: Total weight of positive-class observations.
        n_neg: Total weight of negative-class observations.
    """

    cutoffs: NDArray
    tpr: NDArray
    fpr: NDArray
    n_pos: float
    n_neg: float

    @property
    def n_cutoffs(self) -> int:
        return len(self.cutoffs)

    @property
    def is_degenerate(self) -> bool:
        """True when one class has zero total weight and its rate is NaN."""
        return len(self.tpr) > 0 and (self.n_pos == 0 or self.n_neg == 0)

    def to_frame(self) -> pd.DataFrame:
        """Return the curve as a DataFrame with columns cutoff, tpr, fpr."""
        return pd.DataFrame({"cutoff": self.cutoffs, "tpr": self.tpr, "fpr": self.fpr})


def _validate_inputs(
    y: ArrayLike | Tensor,
    classes: ArrayLike | Tensor,
    weights: ArrayLike | Tensor | None,
    cutoffs: ArrayLike | Tensor | None,
) -> tuple[NDArray, NDArray, NDArray | None, NDArray]:
    """Convert inputs to numpy and check every precondition up front."""
    y = as_float_array(y, "y")
    classes = as_bool_array(classes, "classes")
    if weights is not None:
        weights = as_float_array(weights, "weights")
    check_lengths(y, classes, weights)
    check_sorted(y, "y")

    if cutoffs is None:
        cutoffs = np.empty(0, dtype=np.float64)
    else:
        cutoffs = as_float_array(cutoffs, "cutoffs")
    check_sorted(cutoffs, "cutoffs")

    if weights is not None:
        check_weights(weights)

    return y, classes, weights, cutoffs


def _warn_if_degenerate(n_pos: float, n_neg: float) -> None:
    if n_pos == 0:
        warnings.warn(
            "Total positive weight is zero; TPR is undefined (NaN) at every cutoff.",
            RuntimeWarning,
            stacklevel=3,
        )
    if n_neg == 0:
        warnings.warn(
            "Total negative weight is zero; FPR is undefined (NaN) at every cutoff.",
            RuntimeWarning,
            stacklevel=3,
        )


def compute_roc(
    y: ArrayLike | Tensor,
    classes: ArrayLike | Tensor,
    weights: ArrayLike | Tensor | None = None,
    cutoffs: ArrayLike | Tensor | None = None,
) -> RocCurve:
    """Compute a weighted empirical ROC curve at the given cutoffs.

    Args:
        y: Scores sorted in ascending order.
        classes: True labels aligned with ``y``; True is the positive class.
        weights: Optional non-negative weights aligned with ``y``. All
            weights are 1 when omitted.
        cutoffs: Ascending cutoffs. When None or empty, one cutoff per
            distinct score plus a leading cutoff just below ``y[0]`` is used.

    Returns:
        RocCurve whose ``tpr`` and ``fpr`` are aligned with its ``cutoffs``.
        Both are empty when ``y`` is empty. If either class has zero total
        weight its rate is NaN throughout and a RuntimeWarning is issued.

    Raises:
        PreconditionViolation: On length mismatch, unsorted ``y`` or
            ``cutoffs``, or negative/non-finite weights.
    """
    y, classes, weights, cutoffs = _validate_inputs(y, classes, weights, cutoffs)

    if len(y) == 0:
        empty = np.empty(0, dtype=np.float64)
        return RocCurve(cutoffs=empty, tpr=empty.copy(), fpr=empty.copy(), n_pos=0.0, n_neg=0.0)

    if len(cutoffs) == 0:
        cutoffs = unique_cutoffs(y)
    n_bins = len(cutoffs)

    if weights is None:
        weights = np.ones(len(y), dtype=np.float64)

    # Smallest cutoff >= score; scores past the last cutoff stay in the last bin
    bins = np.searchsorted(cutoffs, y, side="left")
    np.minimum(bins, n_bins - 1, out=bins)

    pos_weights = np.where(classes, weights, 0.0)
    neg_weights = np.where(classes, 0.0, weights)

    # Cumulating per-bin sums carries totals forward across empty bins
    tp = np.cumsum(np.bincount(bins, weights=pos_weights, minlength=n_bins))
    fp = np.cumsum(np.bincount(bins, weights=neg_weights, minlength=n_bins))

    n_pos = float(tp[-1])
    n_neg = float(fp[-1])
    _warn_if_degenerate(n_pos, n_neg)

    with np.errstate(divide="ignore", invalid="ignore"):
        tpr = tp / n_pos
        fpr = fp / n_neg

    return RocCurve(cutoffs=cutoffs, tpr=tpr, fpr=fpr, n_pos=n_pos, n_neg=n_neg)


def build_roc(
    cutoffs: ArrayLike | Tensor | None,
    y: ArrayLike | Tensor,
    classes: ArrayLike | Tensor,
    weights: ArrayLike | Tensor | None = None,
) -> tuple[NDArray, NDArray]:
    """Return ``(tpr, fpr)`` for sorted scores at the given cutoffs.

    See ``compute_roc`` for the full contract. ``equally_spaced`` can be used
    to generate the cutoffs.
    """
    curve = compute_roc(y, classes, weights=weights, cutoffs=cutoffs)
    return curve.tpr, curve.fpr


def build_roc_torch(
    cutoffs: ArrayLike | Tensor | None,
    y: ArrayLike | Tensor,
    classes: ArrayLike | Tensor,
    weights: ArrayLike | Tensor | None = None,
    device: torch.device | None = None,
) -> tuple[Tensor, Tensor]:
    """Compute ``(tpr, fpr)`` with torch on the requested device.

    Inputs are validated on the CPU exactly as in ``compute_roc``; binning and
    accumulation then run as ``searchsorted``/``bincount``/``cumsum`` on the
    device.

    Args:
        cutoffs: Ascending cutoffs, or None/empty to derive them from ``y``.
        y: Scores sorted in ascending order.
        classes: True labels aligned with ``y``.
        weights: Optional non-negative weights aligned with ``y``.
        device: Target device (defaults to CUDA if available).

    Returns:
        Tuple of float64 tensors (tpr, fpr) on ``device``.
    """
    if device is None:
        device = torch.device("cuda" if torch.cuda.is_available() else "cpu")

    y, classes, weights, cutoffs = _validate_inputs(y, classes, weights, cutoffs)

    if len(y) == 0:
        empty = torch.empty(0, dtype=torch.float64, device=device)
        return empty, empty.clone()

    if len(cutoffs) == 0:
        cutoffs = unique_cutoffs(y)
    n_bins = len(cutoffs)

    y_t = numpy_to_torch(y, device)
    cutoffs_t = numpy_to_torch(cutoffs, device)
    labels_t = numpy_to_torch(classes, device)
    if weights is None:
        weights_t = torch.ones_like(y_t)
    else:
        weights_t = numpy_to_torch(weights, device)

    bins = torch.searchsorted(cutoffs_t, y_t, right=False)
    bins = torch.clamp(bins, max=n_bins - 1)

    zeros = torch.zeros_like(weights_t)
    pos_weights = torch.where(labels_t, weights_t, zeros)
    neg_weights = torch.where(labels_t, zeros, weights_t)

    tp = torch.bincount(bins, weights=pos_weights, minlength=n_bins).to(torch.float64)
    fp = torch.bincount(bins, weights=neg_weights, minlength=n_bins).to(torch.float64)
    tp = torch.cumsum(tp, dim=0)
    fp = torch.cumsum(fp, dim=0)

    n_pos = tp[-1]
    n_neg = fp[-1]
    _warn_if_degenerate(n_pos.item(), n_neg.item())

    # torch division by zero yields NaN/inf without raising
    return tp / n_pos, fp / n_neg
