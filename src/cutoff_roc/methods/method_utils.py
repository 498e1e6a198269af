"""Shared utilities for array conversion and input validation."""

from collections.abc import Sequence

import numpy as np
import torch
from numpy.typing import ArrayLike, NDArray
from torch import Tensor


class PreconditionViolation(ValueError):
    """Raised when a caller breaks an input contract.

    Mismatched lengths, unsorted scores or cutoffs, negative weights and
    invalid threshold-grid arguments all raise this before any work is done.
    """


def numpy_to_torch(
    arr: NDArray | Tensor,
    device: torch.device | None = None,
    dtype: torch.dtype | None = None,
) -> Tensor:
    """Place validated scores, labels or weights on a device.

    Args:
        arr: Numpy array or torch tensor.
        device: Target device (defaults to CUDA if available).
        dtype: Target dtype. Keeps the input dtype when None.

    Returns:
        Tensor on ``device``; shares memory with ``arr`` when no copy is needed.
    """
    if device is None:
        device = torch.device("cuda" if torch.cuda.is_available() else "cpu")
    return torch.as_tensor(arr, dtype=dtype, device=device)


def to_numpy(values: ArrayLike | Tensor) -> NDArray:
    """Return ``values`` as a numpy array, detaching tensors and moving them to CPU."""
    if isinstance(values, Tensor):
        return values.detach().cpu().numpy()
    return np.asarray(values)


def as_float_array(values: ArrayLike | Tensor, name: str) -> NDArray:
    """Convert scores, cutoffs or weights to a 1-D float64 array."""
    arr = to_numpy(values).astype(np.float64, copy=False)
    if arr.ndim != 1:
        raise PreconditionViolation(f"{name} must be one-dimensional, got shape {arr.shape}")
    return arr


def as_bool_array(values: ArrayLike | Tensor, name: str) -> NDArray:
    """Convert class labels to a 1-D boolean array."""
    arr = to_numpy(values).astype(bool)
    if arr.ndim != 1:
        raise PreconditionViolation(f"{name} must be one-dimensional, got shape {arr.shape}")
    return arr


def is_sorted(arr: NDArray) -> bool:
    """Return True if ``arr`` is non-decreasing.

    NaN compares false against everything, so any NaN makes the array unsorted.
    """
    if np.isnan(arr).any():
        return False
    return bool(np.all(arr[1:] >= arr[:-1]))


def check_lengths(y: Sequence | NDArray, classes: Sequence | NDArray, weights=None) -> None:
    """Raise if labels or weights are not index-aligned with scores."""
    if len(y) != len(classes):
        raise PreconditionViolation(
            f"length mismatch: y has {len(y)} entries, classes has {len(classes)}"
        )
    if weights is not None and len(weights) != len(y):
        raise PreconditionViolation(
            f"length mismatch: y has {len(y)} entries, weights has {len(weights)}"
        )


def check_sorted(arr: NDArray, name: str) -> None:
    """Raise if ``arr`` is not sorted in ascending order."""
    if not is_sorted(arr):
        raise PreconditionViolation(f"{name} must be sorted in ascending order")


def check_weights(weights: NDArray) -> None:
    """Raise on negative or non-finite weights."""
    if not np.isfinite(weights).all():
        raise PreconditionViolation("weights must be finite")
    if (weights < 0).any():
        raise PreconditionViolation("weights must be non-negative")
