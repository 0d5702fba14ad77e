"""
Tests for the Indicator base interface.
"""
from abc import ABC

from paircorr.indicators.base import Indicator
from paircorr.indicators.moving_average import SimpleMovingAverage
from paircorr.analysis.distance import DistanceFromAverage


class TestIndicatorInterface:
    """Test Indicator abstract base class."""

    def test_indicator_is_abstract(self):
        """Indicator should be an ABC."""
        assert issubclass(Indicator, ABC)

    def test_indicator_requires_calculate_and_get_value_at(self):
        """Indicator defines calculate and get_value_at as abstract."""
        assert {'calculate', 'get_value_at'} <= set(Indicator.__abstractmethods__)

    def test_concrete_indicators_implement_interface(self):
        """All concrete indicators override both methods."""
        for cls in (SimpleMovingAverage, DistanceFromAverage):
            assert issubclass(cls, Indicator)
            assert cls.calculate is not Indicator.calculate
            assert cls.get_value_at is not Indicator.get_value_at

    def test_calculate_and_get_value_at_agree(self):
        """Per-index lookup matches the full calculation."""
        prices = [10.0, 12.0, 11.0, 13.0, 15.0, 14.0, 16.0]
        for indicator in (SimpleMovingAverage(3), DistanceFromAverage(3)):
            values = indicator.calculate(prices)
            for i in range(len(prices)):
                expected = values[i]
                actual = indicator.get_value_at(prices, i)
                if expected is None:
                    assert actual is None
                else:
                    assert actual == expected or abs(actual - expected) < 1e-12
