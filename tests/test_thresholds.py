"""
Unit tests for thresholds module.

Critical behaviors tested:
1. equally_spaced produces the linspace grid with a lead-in first value
2. The lead-in is strictly below the minimum, including for large magnitudes
3. Invalid grid arguments raise PreconditionViolation
4. unique_cutoffs collapses duplicates and prepends a lead-in cutoff
"""

import numpy as np
import pytest

from cutoff_roc.methods import PreconditionViolation, equally_spaced, lead_in, unique_cutoffs

# =============================================================================
# equally_spaced
# =============================================================================


class TestEquallySpaced:
    """Test equally spaced cutoff generation."""

    def test_unit_interval_five_points(self):
        """Verify the documented (0, 1, 5) grid."""
        cutoffs = equally_spaced(0.0, 1.0, 5)

        assert len(cutoffs) == 5
        assert cutoffs[0] < 0.0
        assert cutoffs[0] == np.nextafter(0.0, -1.0)
        np.testing.assert_array_equal(cutoffs[1:], [0.25, 0.5, 0.75, 1.0])

    @pytest.mark.parametrize(
        "min_value,max_value,n",
        [(0.0, 1.0, 2), (-3.0, 7.0, 11), (0.1, 0.9, 101), (5.0, 5.0, 4)],
        ids=["two_points", "negative_start", "fine_grid", "degenerate_range"],
    )
    def test_grid_properties(self, min_value, max_value, n):
        """Verify length, ordering and endpoints."""
        cutoffs = equally_spaced(min_value, max_value, n)

        assert cutoffs.shape == (n,)
        assert cutoffs[0] < min_value
        assert cutoffs[-1] == max_value
        assert np.all(np.diff(cutoffs) >= 0)

    def test_interior_spacing(self):
        """Verify interior points are spaced (max - min) / (n - 1)."""
        cutoffs = equally_spaced(-3.0, 7.0, 11)

        np.testing.assert_allclose(np.diff(cutoffs[1:]), 1.0, rtol=1e-12)
        np.testing.assert_allclose(cutoffs[1:], np.arange(-2.0, 8.0), rtol=1e-12)

    def test_lead_in_below_large_minimum(self):
        """Verify the first cutoff is below min where min - 1 == min."""
        cutoffs = equally_spaced(1e20, 2e20, 3)

        assert cutoffs[0] < 1e20
        assert cutoffs[1] == 1.5e20

    def test_float32_dtype(self):
        """Verify the lead-in stays below min after casting to float32."""
        cutoffs = equally_spaced(0.1, 0.9, 5, dtype=np.float32)

        assert cutoffs.dtype == np.float32
        assert cutoffs[0] < np.float32(0.1)
        assert cutoffs[-1] == np.float32(0.9)

    @pytest.mark.parametrize("n", [1, 0, -5], ids=["one", "zero", "negative"])
    def test_rejects_too_few_points(self, n):
        """Verify n < 2 is a precondition violation."""
        with pytest.raises(PreconditionViolation, match="n too small"):
            equally_spaced(0.0, 1.0, n)

    def test_rejects_non_integer_n(self):
        """Verify a float count is rejected."""
        with pytest.raises(PreconditionViolation):
            equally_spaced(0.0, 1.0, 2.5)

    def test_rejects_inverted_range(self):
        """Verify max < min is a precondition violation."""
        with pytest.raises(PreconditionViolation, match="must not be less than"):
            equally_spaced(1.0, 0.0, 5)

    def test_rejects_nan_bounds(self):
        """Verify NaN bounds are rejected rather than producing a NaN grid."""
        with pytest.raises(PreconditionViolation):
            equally_spaced(np.nan, 1.0, 5)

    def test_is_value_error(self):
        """Verify callers catching ValueError also catch violations."""
        with pytest.raises(ValueError):
            equally_spaced(0.0, 1.0, 1)


# =============================================================================
# lead_in / unique_cutoffs
# =============================================================================


class TestLeadIn:
    """Test the next-representable-value-below helper."""

    @pytest.mark.parametrize("value", [0.0, 1.0, -2.5, 1e20, 1e-300])
    def test_strictly_below_and_adjacent(self, value):
        """Verify lead_in returns the adjacent float below value."""
        below = lead_in(value)

        assert below < value
        assert np.nextafter(below, np.inf) == value


class TestUniqueCutoffs:
    """Test derivation of cutoffs from sorted scores."""

    def test_collapses_duplicates(self):
        """Verify one cutoff per distinct score plus a lead-in."""
        cutoffs = unique_cutoffs(np.array([1.0, 2.0, 2.0, 3.0]))

        assert len(cutoffs) == 4
        assert cutoffs[0] == lead_in(1.0)
        np.testing.assert_array_equal(cutoffs[1:], [1.0, 2.0, 3.0])

    def test_all_equal_scores(self):
        """Verify constant scores give a lead-in and a single cutoff."""
        cutoffs = unique_cutoffs([4.0, 4.0, 4.0])

        np.testing.assert_array_equal(cutoffs, [lead_in(4.0), 4.0])

    def test_empty(self):
        """Verify empty scores give no cutoffs."""
        assert len(unique_cutoffs([])) == 0

    def test_rejects_unsorted(self):
        """Verify unsorted scores are rejected."""
        with pytest.raises(PreconditionViolation, match="sorted"):
            unique_cutoffs([2.0, 1.0])
