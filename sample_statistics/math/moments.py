from typing import Iterable

import numpy as np

from sample_statistics.data_structures.data_models import (
    VariationalSeries,
    WeightedObservation,
)
from sample_statistics.errors import DomainError


def sample_size(series: VariationalSeries) -> float:
    _check_weights(series.observations)
    return float(sum(series.weights))


def sample_mean(series: VariationalSeries) -> float:
    return _running_weighted_mean(series.observations)


def biased_sample_variance(series: VariationalSeries) -> float:
    """
    Weighted mean of the squared deviations from the sample mean. Uses the
    same running mean as `sample_mean` so large or skewed samples don't lose
    precision to one big sum.
    """
    mean = sample_mean(series)
    squared_deviations = [
        WeightedObservation(
            value=(observation.value - mean) ** 2, weight=observation.weight
        )
        for observation in series.observations
    ]
    return _running_weighted_mean(squared_deviations)


def unbiased_sample_variance(series: VariationalSeries) -> float:
    return unbiased_from_biased(biased_sample_variance(series), sample_size(series))


def biased_sample_standard_deviation(series: VariationalSeries) -> float:
    return float(np.sqrt(biased_sample_variance(series)))


def unbiased_sample_standard_deviation(series: VariationalSeries) -> float:
    return float(np.sqrt(unbiased_sample_variance(series)))


def unbiased_from_biased(biased_variance: float, size: float) -> float:
    _check_bias_correctable(size)
    return biased_variance * size / (size - 1)


def biased_from_unbiased(unbiased_variance: float, size: float) -> float:
    _check_bias_correctable(size)
    return unbiased_variance * (size - 1) / size


def _running_weighted_mean(observations: Iterable[WeightedObservation]) -> float:
    observations = list(observations)
    _check_weights(observations)
    mean = 0.0
    cumulative_weight = 0.0
    for observation in observations:
        if observation.weight == 0:
            continue
        cumulative_weight += observation.weight
        mean += observation.weight * (observation.value - mean) / cumulative_weight
    if cumulative_weight == 0:
        raise DomainError("Sample has no observations with positive weight")
    return mean


def _check_weights(observations: list[WeightedObservation]) -> None:
    negative_weights = [o.weight for o in observations if o.weight < 0]
    if negative_weights:
        raise DomainError(
            f"Observation weights must not be negative, found: {negative_weights}"
        )


def _check_bias_correctable(size: float) -> None:
    if size <= 1:
        raise DomainError(
            f"Sample size must be greater than 1 to correct variance bias, got {size}"
        )
