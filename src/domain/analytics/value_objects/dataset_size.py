"""Dataset size value object for the statistics engine."""

import math
from enum import Enum
from typing import Dict, Tuple


class DatasetSize(Enum):
    """Size class of a sample, deciding how much of it is trimmed."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @classmethod
    def classify(cls, sample_size: int) -> "DatasetSize":
        """Classify a sample by its element count.

        Bounds are exclusive at the bottom and inclusive at the top. An empty
        sample falls outside every bound and is treated as medium.
        """
        for size in (cls.SMALL, cls.MEDIUM, cls.LARGE):
            lower, upper = size.bounds
            if lower < sample_size <= upper:
                return size

        return cls.MEDIUM

    @property
    def bounds(self) -> Tuple[float, float]:
        """Return the (exclusive lower, inclusive upper) element count bounds."""
        return _SIZE_BOUNDS[self]

    @property
    def exclusion_fraction(self) -> float:
        """Fraction of the sample trimmed from each end of the sorted values."""
        return _EXCLUSION_FRACTIONS[self]

    def excluded_count(self, sample_size: int) -> int:
        """Number of values dropped from each end of a sample of this size."""
        return math.ceil(self.exclusion_fraction * sample_size)

    def __str__(self) -> str:
        """String representation of dataset size."""
        return self.value


_SIZE_BOUNDS: Dict[DatasetSize, Tuple[float, float]] = {
    DatasetSize.SMALL: (0, 4),
    DatasetSize.MEDIUM: (4, 20),
    DatasetSize.LARGE: (20, math.inf),
}

_EXCLUSION_FRACTIONS: Dict[DatasetSize, float] = {
    DatasetSize.SMALL: 0.0,
    DatasetSize.MEDIUM: 0.1,
    DatasetSize.LARGE: 0.05,
}
