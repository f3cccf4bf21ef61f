"""Tests for statistical utility functions."""

from __future__ import annotations

import pytest
from hypothesis import given, settings, strategies as st

from foldbench.utils.stats import coefficient_of_variation, compute_statistics


class TestComputeStatistics:
    """Tests for compute_statistics function."""

    def test_basic_statistics(self) -> None:
        """Test basic statistical calculations."""
        stats = compute_statistics([1.0, 2.0, 3.0, 4.0, 5.0])

        assert stats.count == 5
        assert stats.min == 1.0
        assert stats.max == 5.0
        assert stats.mean == 3.0
        assert stats.median == 3.0

    def test_empty_input(self) -> None:
        """Test with empty input."""
        stats = compute_statistics([])

        assert stats.count == 0
        assert stats.min == 0.0
        assert stats.mean == 0.0

    def test_single_value(self) -> None:
        stats = compute_statistics([42.0])

        assert stats.count == 1
        assert stats.median == 42.0
        assert stats.std == 0.0

    def test_percentiles(self) -> None:
        """Test percentile calculations."""
        stats = compute_statistics(list(range(1, 101)))

        assert stats.p25 == pytest.approx(25.75, rel=0.1)
        assert stats.p75 == pytest.approx(75.25, rel=0.1)
        assert stats.p90 == pytest.approx(90.1, rel=0.1)
        assert stats.p99 == pytest.approx(99.01, rel=0.1)

    def test_to_dict(self) -> None:
        data = compute_statistics([1.0, 3.0]).to_dict()
        assert data["mean"] == 2.0
        assert set(data) >= {"median", "p90", "std"}


class TestCoefficientOfVariation:
    """Tests for coefficient_of_variation."""

    def test_constant_values(self) -> None:
        assert coefficient_of_variation([5.0, 5.0, 5.0]) == 0.0

    def test_zero_mean(self) -> None:
        assert coefficient_of_variation([0.0, 0.0]) == 0.0

    def test_empty(self) -> None:
        assert coefficient_of_variation([]) == 0.0


@given(
    st.lists(
        st.floats(min_value=0.0, max_value=1e6, allow_nan=False, allow_infinity=False),
        min_size=1,
        max_size=100,
    )
)
@settings(max_examples=50)
def test_statistics_invariants(values: list[float]) -> None:
    stats = compute_statistics(values)
    eps = 1e-6
    assert stats.count == len(values)
    assert stats.min - eps <= stats.median <= stats.max + eps
    assert stats.min - eps <= stats.mean <= stats.max + eps
    assert stats.std >= 0.0
