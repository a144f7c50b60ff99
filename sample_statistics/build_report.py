import logging

from pydantic import BaseModel

from sample_statistics.data_structures.custom_types import IntervalType
from sample_statistics.data_structures.data_models import (
    KnownParameters,
    SampleDataset,
    SampleStatistics,
)
from sample_statistics.errors import MissingDataError
from sample_statistics.math.stats import (
    ConfidenceInterval,
    ConfidenceIntervalCalculator,
)
from sample_statistics.resolve_statistics import ResolvedSample, resolve_sample

logger = logging.getLogger(__name__)


class SampleReport(BaseModel):
    name: str
    params: KnownParameters
    statistics: SampleStatistics
    intervals: list[ConfidenceInterval]

    def interval_of_type(self, interval_type: IntervalType) -> ConfidenceInterval:
        for interval in self.intervals:
            if interval.type == interval_type:
                return interval
        raise ValueError(f"No {interval_type.value} in report for {self.name}")


def build_report(dataset: SampleDataset, name: str) -> SampleReport:
    logger.info(f"Building report for sample '{name}'")
    resolved = resolve_sample(dataset)
    intervals = calculate_requested_intervals(resolved)
    logger.info(f"Calculated {len(intervals)} confidence intervals for '{name}'")
    return SampleReport(
        name=name,
        params=resolved.params,
        statistics=resolved.statistics,
        intervals=intervals,
    )


def calculate_requested_intervals(
    resolved: ResolvedSample,
) -> list[ConfidenceInterval]:
    request = resolved.dataset.confidence_request
    intervals = []
    for interval_type in IntervalType:
        if not request.is_requested(interval_type):
            continue
        confidence = _require(request.confidence, "confidence")
        intervals.append(
            calculate_interval(interval_type, resolved, confidence)
        )
    return intervals


def calculate_interval(
    interval_type: IntervalType, resolved: ResolvedSample, confidence: float
) -> ConfidenceInterval:
    params = resolved.params
    statistics = resolved.statistics
    sample_size = _require(params.sample_size, "params.sampleSize")

    if interval_type == IntervalType.MEAN_WITH_KNOWN_VARIANCE:
        return ConfidenceIntervalCalculator.mean_interval_with_known_variance(
            sample_size=sample_size,
            sample_mean=_require(statistics.mean, "statistics.mean"),
            variance=_require(params.variance, "params.variance"),
            confidence=confidence,
        )
    if interval_type == IntervalType.MEAN_WITH_UNKNOWN_VARIANCE:
        return ConfidenceIntervalCalculator.mean_interval_with_unknown_variance(
            sample_size=sample_size,
            sample_mean=_require(statistics.mean, "statistics.mean"),
            unbiased_variance=_require(
                statistics.unbiased_variance, "statistics.unbiasedVariance"
            ),
            confidence=confidence,
        )
    # IntervalType.VARIANCE
    return ConfidenceIntervalCalculator.variance_interval(
        sample_size=sample_size,
        unbiased_variance=_require(
            statistics.unbiased_variance, "statistics.unbiasedVariance"
        ),
        confidence=confidence,
    )


def _require(value: float | None, field_name: str) -> float:
    if value is None:
        raise MissingDataError(
            f"'{field_name}' is needed for the requested interval but is not known"
        )
    return value
