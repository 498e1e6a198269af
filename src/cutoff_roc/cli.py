"""
Command-line ROC curve computation.

Reads scores and labels from a CSV file, computes the ROC curve and writes
cutoff/TPR/FPR rows as CSV.

Usage:
    cutoff-roc scores.csv                                # Derived cutoffs, CSV to stdout
    cutoff-roc scores.csv --n-cutoffs 101 -o roc.csv     # Equally spaced cutoffs
    cutoff-roc scores.csv --weight-col w --label-col y   # Custom columns
"""

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

from .methods import compute_roc, equally_spaced

_TRUE_STRINGS = {"1", "true", "t", "yes", "y"}
_FALSE_STRINGS = {"0", "false", "f", "no", "n"}


def parse_labels(labels: pd.Series) -> np.ndarray:
    """Interpret a label column as booleans.

    Numeric and boolean columns are cast directly (nonzero is positive);
    string columns accept 1/0, true/false, t/f, yes/no, y/n.
    """
    if pd.api.types.is_numeric_dtype(labels):
        return labels.to_numpy().astype(bool)
    normalized = labels.astype(str).str.strip().str.lower()
    unknown = sorted(set(normalized) - _TRUE_STRINGS - _FALSE_STRINGS)
    if unknown:
        raise ValueError(f"Unrecognized label values: {unknown}")
    return normalized.isin(_TRUE_STRINGS).to_numpy()


def load_observations(
    path: Path, score_col: str, label_col: str, weight_col: str | None
) -> tuple[np.ndarray, np.ndarray, np.ndarray | None]:
    """Load scores, labels and weights, jointly sorted by ascending score."""
    df = pd.read_csv(path)
    required = [score_col, label_col] + ([weight_col] if weight_col else [])
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise ValueError(f"Missing columns in {path}: {missing}")

    y = df[score_col].to_numpy(dtype=np.float64)
    classes = parse_labels(df[label_col])
    weights = df[weight_col].to_numpy(dtype=np.float64) if weight_col else None

    # Stable sort keeps tied scores in file order
    order = np.argsort(y, kind="stable")
    y = y[order]
    classes = classes[order]
    if weights is not None:
        weights = weights[order]

    return y, classes, weights


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compute an empirical ROC curve from a CSV of scores and labels",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("input", type=Path, help="CSV file with score and label columns")
    parser.add_argument("--score-col", type=str, default="score", help="Score column")
    parser.add_argument("--label-col", type=str, default="label", help="Label column")
    parser.add_argument(
        "--weight-col", type=str, default=None, help="Optional weight column"
    )
    parser.add_argument(
        "--n-cutoffs",
        type=int,
        default=None,
        help="Use N equally spaced cutoffs over the score range instead of one per distinct score",
    )
    parser.add_argument(
        "-o", "--output", type=Path, default=None, help="Output CSV (stdout if omitted)"
    )
    args = parser.parse_args(argv)

    try:
        y, classes, weights = load_observations(
            args.input, args.score_col, args.label_col, args.weight_col
        )
        cutoffs = None
        if args.n_cutoffs is not None and len(y) > 0:
            cutoffs = equally_spaced(y[0], y[-1], args.n_cutoffs)
        curve = compute_roc(y, classes, weights=weights, cutoffs=cutoffs)
    except ValueError as e:
        # PreconditionViolation is a ValueError
        parser.error(str(e))

    print(f"Observations: {len(y)}", file=sys.stderr)
    print(f"Positive weight: {curve.n_pos:g}", file=sys.stderr)
    print(f"Negative weight: {curve.n_neg:g}", file=sys.stderr)
    print(f"Cutoffs: {curve.n_cutoffs}", file=sys.stderr)

    frame = curve.to_frame()
    if args.output is None:
        frame.to_csv(sys.stdout, index=False)
    else:
        frame.to_csv(args.output, index=False)
        print(f"Saved: {args.output}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
