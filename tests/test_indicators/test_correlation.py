"""
Tests for rolling Pearson correlation.
"""
import numpy as np
import pytest

from paircorr.indicators.correlation import (
    correlations_by_window,
    pearson,
    rolling_correlation,
    rolling_correlation_at,
)


@pytest.fixture
def noisy_pair():
    """Two related random walks."""
    rng = np.random.RandomState(42)
    x = 1000 + np.cumsum(rng.randn(250) * 5)
    y = 0.5 * x + rng.randn(250) * 10
    return list(x), list(y)


class TestPearson:
    """Test pearson."""

    def test_perfect_linear(self):
        assert pearson([1, 2, 3, 4, 5], [2, 4, 6, 8, 10]) == pytest.approx(1.0, abs=1e-12)

    def test_perfect_negative(self):
        assert pearson([1, 2, 3, 4, 5], [10, 8, 6, 4, 2]) == pytest.approx(-1.0, abs=1e-12)

    def test_self_correlation(self, noisy_pair):
        x, _ = noisy_pair
        assert pearson(x, x) == pytest.approx(1.0, abs=1e-6)

    def test_constant_series_returns_zero(self):
        assert pearson([5, 5, 5, 5], [1, 2, 3, 4]) == 0.0
        assert pearson([1, 2, 3, 4], [0.1, 0.1, 0.1, 0.1]) == 0.0

    def test_empty_returns_zero(self):
        assert pearson([], []) == 0.0

    def test_matches_numpy(self, noisy_pair):
        x, y = noisy_pair
        assert pearson(x, y) == pytest.approx(np.corrcoef(x, y)[0, 1], abs=1e-9)

    def test_unequal_lengths_raise(self):
        with pytest.raises(ValueError):
            pearson([1, 2, 3], [1, 2])


class TestRollingCorrelationAt:
    """Test rolling_correlation_at."""

    def test_linear_window_five(self):
        x = [1, 2, 3, 4, 5]
        y = [2, 4, 6, 8, 10]
        assert rolling_correlation_at(x, y, 5, 4) == 1.0

    def test_warm_up_is_none(self):
        x = [1, 2, 3, 4, 5]
        for i in range(4):
            assert rolling_correlation_at(x, x, 5, i) is None

    def test_rounded_to_four_decimals(self, noisy_pair):
        x, y = noisy_pair
        value = rolling_correlation_at(x, y, 30, 100)
        assert value == round(value, 4)


class TestRollingCorrelation:
    """Test rolling_correlation (vectorized)."""

    def test_null_then_defined(self, noisy_pair):
        x, y = noisy_pair
        window = 30
        result = rolling_correlation(x, y, window)
        assert len(result) == len(x)
        assert all(v is None for v in result[:window - 1])
        assert all(v is not None for v in result[window - 1:])

    def test_values_in_range(self, noisy_pair):
        x, y = noisy_pair
        values = [v for v in rolling_correlation(x, y, 20) if v is not None]
        assert min(values) >= -1.0
        assert max(values) <= 1.0

    def test_matches_per_index_computation(self, noisy_pair):
        x, y = noisy_pair
        for window in (7, 30, 90):
            result = rolling_correlation(x, y, window)
            for i in range(window - 1, len(x), 17):
                assert abs(result[i] - rolling_correlation_at(x, y, window, i)) <= 1e-4

    def test_constant_window_returns_zero(self):
        x = [1.0, 2.0, 3.0, 3.0, 3.0, 3.0]
        y = [5.0, 1.0, 4.0, 2.0, 6.0, 3.0]
        result = rolling_correlation(x, y, 3)
        assert result[4] == 0.0
        assert result[5] == 0.0

    def test_self_correlation_is_one(self, noisy_pair):
        x, _ = noisy_pair
        values = [v for v in rolling_correlation(x, x, 10) if v is not None]
        assert all(v == 1.0 for v in values)

    def test_shorter_than_window(self):
        assert rolling_correlation([1, 2], [2, 1], 5) == [None, None]

    def test_invalid_window(self):
        with pytest.raises(ValueError):
            rolling_correlation([1, 2], [2, 1], 0)


class TestCorrelationsByWindow:
    """Test correlations_by_window."""

    def test_one_series_per_window(self, noisy_pair):
        x, y = noisy_pair
        result = correlations_by_window(x, y, [7, 30])
        assert set(result) == {7, 30}
        assert result[7][6] is not None
        assert result[30][28] is None
