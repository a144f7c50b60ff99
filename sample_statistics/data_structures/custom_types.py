from enum import Enum

from pydantic import FiniteFloat

SampleValuesType = list[FiniteFloat]
FrequencyTableType = dict[str, FiniteFloat]  # "value" -> count (or relative frequency)
IntervalBoundsType = tuple[float, float]


class SampleForm(Enum):
    RAW_VALUES = "values"
    FREQUENCY_TABLE = "variationalSeries"
    PARAMETERS_ONLY = "params"


class IntervalType(Enum):
    MEAN_WITH_KNOWN_VARIANCE = "meanConfidenceIntervalWithKnownVariance"
    MEAN_WITH_UNKNOWN_VARIANCE = "meanConfidenceIntervalWithUnknownVariance"
    VARIANCE = "varianceConfidenceInterval"

    @property
    def display_name(self) -> str:
        return {
            IntervalType.MEAN_WITH_KNOWN_VARIANCE: "Mean confidence interval (with known variance)",
            IntervalType.MEAN_WITH_UNKNOWN_VARIANCE: "Mean confidence interval (with unknown variance)",
            IntervalType.VARIANCE: "Variance confidence interval",
        }[self]

    def is_mean_interval(self) -> bool:
        return self in {
            IntervalType.MEAN_WITH_KNOWN_VARIANCE,
            IntervalType.MEAN_WITH_UNKNOWN_VARIANCE,
        }
