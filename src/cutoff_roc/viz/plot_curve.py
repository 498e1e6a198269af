"""Plotting for empirical ROC curves."""

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from numpy.typing import NDArray


def plot_roc_curve(
    tpr: NDArray,
    fpr: NDArray,
    ax: Axes | None = None,
    label: str = "Empirical ROC",
    show_chance: bool = True,
    show_points: bool = False,
    color: str = "black",
) -> Axes:
    """Plot an ROC curve from paired TPR/FPR values.

    Points are joined in cutoff order, which for cumulative rates runs from
    the lower-left towards ``(1, 1)``.

    Args:
        tpr: True positive rates (shape: n_cutoffs).
        fpr: False positive rates (shape: n_cutoffs).
        ax: Matplotlib axes object. If None, creates new figure.
        label: Legend label for the curve (default: "Empirical ROC").
        show_chance: Whether to draw the chance diagonal (default: True).
        show_points: Whether to mark each cutoff with a marker (default: False).
        color: Line color for the curve (default: "black").

    Returns:
        Matplotlib Axes object containing the plot.

    Example:
        ```python
        tpr, fpr = build_roc(equally_spaced(0.0, 1.0, 51), y, classes)
        ax = plot_roc_curve(tpr, fpr, show_points=True)
        ```
    """
    tpr = np.asarray(tpr)
    fpr = np.asarray(fpr)
    if tpr.shape != fpr.shape:
        raise ValueError(f"tpr and fpr must have the same shape, got {tpr.shape} and {fpr.shape}")

    if ax is None:
        fig, ax = plt.subplots(figsize=(5, 5))

    if show_chance:
        ax.plot([0, 1], [0, 1], ":", color="gray", linewidth=1.0, alpha=0.7, label="Chance")

    ax.plot(
        fpr,
        tpr,
        "-",
        color=color,
        linewidth=1.5,
        marker="o" if show_points else None,
        markersize=3,
        label=label,
    )

    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1.02)
    ax.set_xlabel("False Positive Rate")
    ax.set_ylabel("True Positive Rate")
    ax.set_aspect("equal")
    ax.legend(loc="lower right")

    return ax
