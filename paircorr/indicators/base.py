"""
Base indicator interface.

All single-series indicators follow this pattern:
1. Calculate one value per input index (None during warm-up)
2. Provide the value at a single index on demand
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence


class Indicator(ABC):
    """
    Base class for single-series indicators.

    Indicators map a flat price array to an equally long array of values.
    Indices without enough trailing history yield None, never zero.
    """

    @abstractmethod
    def calculate(self, prices: Sequence[float]) -> List[Optional[float]]:
        """
        Calculate indicator values for every index.

        Args:
            prices: Price array in ascending date order

        Returns:
            List with one value (or None) per price
        """
        pass

    @abstractmethod
    def get_value_at(self, prices: Sequence[float], index: int) -> Optional[float]:
        """
        Get indicator value at a specific index.

        Args:
            prices: Price array (must include history before index)
            index: Position to evaluate

        Returns:
            Indicator value at index, or None if insufficient history
        """
        pass
