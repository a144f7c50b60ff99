import math

import numpy as np
from pydantic import BaseModel

from sample_statistics.data_structures.custom_types import (
    IntervalBoundsType,
    IntervalType,
)
from sample_statistics.errors import DomainError
from sample_statistics.math.quantiles import (
    chi_squared_quantile,
    normal_quantile,
    student_t_quantile,
)


class ConfidenceInterval(BaseModel):
    type: IntervalType
    lower_bound: float
    upper_bound: float
    confidence: float

    @property
    def bounds(self) -> IntervalBoundsType:
        return self.lower_bound, self.upper_bound

    @property
    def margin_of_error(self) -> float:
        """Half-width around the sample mean. Variance intervals are not symmetric."""
        if not self.type.is_mean_interval():
            raise ValueError(f"{self.type.value} has no symmetric margin of error")
        return (self.upper_bound - self.lower_bound) / 2


class ConfidenceIntervalCalculator:

    @classmethod
    def mean_interval_with_known_variance(
        cls,
        sample_size: float,
        sample_mean: float,
        variance: float,
        confidence: float,
    ) -> ConfidenceInterval:
        """
        This solves the following stats problem:
        'estimating population mean with known population variance'
        """
        cls._check_inputs(sample_size, confidence, variance)
        critical_value = normal_quantile((confidence + 1) / 2)
        margin_of_error = float(np.sqrt(variance / sample_size)) * critical_value
        return ConfidenceInterval(
            type=IntervalType.MEAN_WITH_KNOWN_VARIANCE,
            lower_bound=sample_mean - margin_of_error,
            upper_bound=sample_mean + margin_of_error,
            confidence=confidence,
        )

    @classmethod
    def mean_interval_with_unknown_variance(
        cls,
        sample_size: float,
        sample_mean: float,
        unbiased_variance: float,
        confidence: float,
    ) -> ConfidenceInterval:
        """
        This solves the following stats problem:
        'estimating population mean with unknown population standard deviation'

        Requirements
        - Simple random sample
        - Either the sample is from a normally distributed population or n >30
        - Observations are independent
        """
        cls._check_inputs(sample_size, confidence, unbiased_variance)
        critical_value = student_t_quantile(sample_size - 1, (confidence + 1) / 2)
        standard_error = float(np.sqrt(unbiased_variance / sample_size))
        margin_of_error = critical_value * standard_error
        return ConfidenceInterval(
            type=IntervalType.MEAN_WITH_UNKNOWN_VARIANCE,
            lower_bound=sample_mean - margin_of_error,
            upper_bound=sample_mean + margin_of_error,
            confidence=confidence,
        )

    @classmethod
    def variance_interval(
        cls,
        sample_size: float,
        unbiased_variance: float,
        confidence: float,
    ) -> ConfidenceInterval:
        """
        Chi-squared interval for the population variance of a normal population.
        The upper chi-squared quantile gives the lower bound and the lower
        quantile gives the upper bound, since the estimate is divided by them.
        """
        cls._check_inputs(sample_size, confidence, unbiased_variance)
        degrees_of_freedom = sample_size - 1
        chi_upper = chi_squared_quantile(degrees_of_freedom, (1 + confidence) / 2)
        chi_lower = chi_squared_quantile(degrees_of_freedom, (1 - confidence) / 2)
        scaled_variance = unbiased_variance * degrees_of_freedom
        return ConfidenceInterval(
            type=IntervalType.VARIANCE,
            lower_bound=scaled_variance / chi_upper,
            upper_bound=scaled_variance / chi_lower,
            confidence=confidence,
        )

    @staticmethod
    def _check_inputs(sample_size: float, confidence: float, variance: float) -> None:
        if not 0 < confidence < 1:
            raise DomainError(f"Confidence must be in (0, 1), got {confidence}")
        if math.isnan(sample_size) or sample_size <= 1:
            raise DomainError(
                f"Sample size must be greater than 1 for a confidence interval, got {sample_size}"
            )
        if math.isnan(variance) or variance < 0:
            raise DomainError(f"Variance must not be negative, got {variance}")
