"""Statistics outcome value object."""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from enum import Enum
from typing import Any, Dict, Optional

from ..exceptions import ValidationError


class StatisticsStatus(Enum):
    """Whether a statistic could be computed, and why not."""

    OK = "ok"
    EMPTY_SAMPLE = "empty_sample"
    ZERO_MEAN = "zero_mean"
    OVERFLOW = "overflow"


# Significant digits needed to quantize any finite float
_FLOAT_DIGITS = 330


def round_half_up(value: float, places: int = 2) -> float:
    """Round a float half-up to a fixed number of decimal places."""
    quantum = Decimal(10) ** -places
    context = Context(prec=_FLOAT_DIGITS + places)

    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP, context=context))


@dataclass(frozen=True)
class StatisticsOutcome:
    """Mean and deviation percent of a value against a sample.

    Degenerate samples are reported through `status` instead of NaN or
    infinite numbers.
    """

    status: StatisticsStatus
    mean: Optional[float] = None
    deviation_percent: Optional[float] = None
    sample_size: int = 0

    def __post_init__(self):
        """Validate outcome consistency."""
        if self.status == StatisticsStatus.OK and (
            self.mean is None or self.deviation_percent is None
        ):
            raise ValidationError("Successful outcome requires mean and deviation percent")

        if self.status == StatisticsStatus.OK and not (
            math.isfinite(self.mean) and math.isfinite(self.deviation_percent)
        ):
            raise ValidationError("Successful outcome requires finite numbers")

        if self.status in (StatisticsStatus.EMPTY_SAMPLE, StatisticsStatus.OVERFLOW) and (
            self.mean is not None
        ):
            raise ValidationError(f"{self.status.value} outcome cannot carry a mean")

        if self.sample_size < 0:
            raise ValidationError(f"Sample size must be non-negative, got {self.sample_size}")

    @classmethod
    def ok(cls, mean: float, deviation_percent: float, sample_size: int) -> "StatisticsOutcome":
        return cls(StatisticsStatus.OK, mean, deviation_percent, sample_size)

    @classmethod
    def empty_sample(cls) -> "StatisticsOutcome":
        return cls(StatisticsStatus.EMPTY_SAMPLE)

    @classmethod
    def zero_mean(cls, sample_size: int) -> "StatisticsOutcome":
        return cls(StatisticsStatus.ZERO_MEAN, mean=0.0, sample_size=sample_size)

    @classmethod
    def overflow(cls, sample_size: int) -> "StatisticsOutcome":
        return cls(StatisticsStatus.OVERFLOW, sample_size=sample_size)

    def is_ok(self) -> bool:
        return self.status == StatisticsStatus.OK

    def round(self, places: int = 2) -> "StatisticsOutcome":
        """Round mean and deviation percent to specified decimal places."""
        return StatisticsOutcome(
            status=self.status,
            mean=round_half_up(self.mean, places) if self.mean is not None else None,
            deviation_percent=(
                round_half_up(self.deviation_percent, places)
                if self.deviation_percent is not None
                else None
            ),
            sample_size=self.sample_size,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "mean": self.mean,
            "deviation_percent": self.deviation_percent,
            "sample_size": self.sample_size,
        }
