"""Weighted empirical ROC curves at fixed decision cutoffs.

This package computes true and false positive rates from pre-sorted scores,
boolean labels and optional weights, evaluated at caller-supplied or derived
cutoffs, and generates equally spaced cutoff grids.
"""

from . import methods, viz
from .methods import (
    PreconditionViolation,
    RocCurve,
    build_roc,
    build_roc_torch,
    compute_roc,
    equally_spaced,
)

__all__ = [
    "PreconditionViolation",
    "RocCurve",
    "build_roc",
    "build_roc_torch",
    "compute_roc",
    "equally_spaced",
    "methods",
    "viz",
]
