"""Trimmed mean statistics over a numeric field of a record sample."""

import math
from typing import Any, Generic, List, Sequence, Tuple, TypeVar

from ..exceptions import EmptySampleError, NumericOverflowError, UndefinedDeviationError
from ..value_objects.dataset_size import DatasetSize
from .field_access import FieldAccessor, read_field, to_number

T = TypeVar("T")


class TrimmedStatistics(Generic[T]):
    """Trimmed mean and deviation percent of one measured field.

    The sample is copied and sorted ascending by the measured value on
    construction. Depending on the sample size class, the same number of
    values is excluded from both ends of the sorted sample before averaging,
    so a few extreme transactions do not drag the expected value around.
    """

    def __init__(self, records: Sequence[T], measuring_value: FieldAccessor):
        self._measuring_value = measuring_value
        self._values: List[float] = sorted(
            to_number(read_field(record, measuring_value)) for record in records
        )
        self._dataset_length = len(self._values)
        self._dataset_size = DatasetSize.classify(self._dataset_length)

    @property
    def dataset_size(self) -> DatasetSize:
        return self._dataset_size

    @property
    def sample_size(self) -> int:
        return self._dataset_length

    @property
    def sorted_values(self) -> Tuple[float, ...]:
        return tuple(self._values)

    @property
    def excluded_count(self) -> int:
        """Number of values dropped from each end of the sorted sample."""
        return self._dataset_size.excluded_count(self._dataset_length)

    @property
    def calculation_interval(self) -> Tuple[int, int]:
        """Half-open index window of sorted values that enter the mean."""
        excluded = self.excluded_count
        return excluded, self._dataset_length - excluded

    def get_mean(self) -> float:
        """Calculate the trimmed arithmetic mean."""
        start, end = self.calculation_interval
        summed_count = end - start

        if summed_count <= 0:
            raise EmptySampleError(
                "Cannot calculate mean of an empty sample",
                context={
                    "sample_size": self._dataset_length,
                    "dataset_size": self._dataset_size.value,
                },
            )

        mean = sum(self._values[start:end]) / summed_count

        if not math.isfinite(mean):
            raise NumericOverflowError(
                "Sample sum exceeds the floating point range",
                context={"sample_size": self._dataset_length},
            )

        return mean

    def get_deviation_percent(self, value: Any) -> float:
        """Calculate how far a value lies from the trimmed mean, in percent."""
        mean = self.get_mean()

        if mean == 0:
            raise UndefinedDeviationError(
                "Deviation percent is undefined for a zero mean",
                context={"sample_size": self._dataset_length, "value": value},
            )

        deviation_percent = abs(to_number(value) - mean) / mean * 100

        if not math.isfinite(deviation_percent):
            raise NumericOverflowError(
                "Deviation percent exceeds the floating point range",
                context={"sample_size": self._dataset_length, "value": value},
            )

        return deviation_percent

    def __repr__(self) -> str:
        return (
            f"TrimmedStatistics(n={self._dataset_length}, size={self._dataset_size.value}, "
            f"excluded={self.excluded_count})"
        )
