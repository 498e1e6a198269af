"""Visualization utilities for ROC curves."""

from .plot_curve import plot_roc_curve

__all__ = [
    "plot_roc_curve",
]
