"""ROC curve construction and cutoff generation."""

from .curve import RocCurve, build_roc, build_roc_torch, compute_roc
from .method_utils import PreconditionViolation
from .thresholds import equally_spaced, lead_in, unique_cutoffs

__all__ = [
    "PreconditionViolation",
    "RocCurve",
    "build_roc",
    "build_roc_torch",
    "compute_roc",
    "equally_spaced",
    "lead_in",
    "unique_cutoffs",
]
