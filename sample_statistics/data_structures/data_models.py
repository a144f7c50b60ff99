from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, model_validator
from pydantic.alias_generators import to_camel
from typing_extensions import Self

from sample_statistics.data_structures.custom_types import (
    FrequencyTableType,
    IntervalType,
    SampleForm,
    SampleValuesType,
)
from sample_statistics.errors import ParseError


class CamelCaseModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WeightedObservation(BaseModel):
    value: FiniteFloat
    weight: FiniteFloat


class VariationalSeries(BaseModel):
    """
    Ordered list of distinct values with how many times (or how often) each
    one was observed. Order never changes any statistic.
    """

    observations: list[WeightedObservation]

    @classmethod
    def from_values(cls, values: SampleValuesType) -> VariationalSeries:
        return cls(
            observations=[
                WeightedObservation(value=value, weight=1.0) for value in values
            ]
        )

    @classmethod
    def from_frequency_table(
        cls, frequency_table: FrequencyTableType
    ) -> VariationalSeries:
        observations = []
        for key, frequency in frequency_table.items():
            observations.append(
                WeightedObservation(value=_parse_numeric_key(key), weight=frequency)
            )
        return cls(observations=observations)

    @property
    def values(self) -> list[float]:
        return [observation.value for observation in self.observations]

    @property
    def weights(self) -> list[float]:
        return [observation.weight for observation in self.observations]

    def __len__(self) -> int:
        return len(self.observations)


def _parse_numeric_key(key: str) -> float:
    try:
        value = float(key)
    except ValueError as e:
        raise ParseError(
            f"Variational series key '{key}' is not a number"
        ) from e
    if not math.isfinite(value):
        raise ParseError(f"Variational series key '{key}' is not a finite number")
    return value


class KnownParameters(CamelCaseModel):
    sample_size: FiniteFloat | None = None
    mean: FiniteFloat | None = None
    variance: FiniteFloat | None = None
    standard_deviation: FiniteFloat | None = None

    @model_validator(mode="after")
    def check_spread_is_not_negative(self) -> Self:
        if self.variance is not None and self.variance < 0:
            raise ValueError(f"Known variance must not be negative, got {self.variance}")
        if self.standard_deviation is not None and self.standard_deviation < 0:
            raise ValueError(
                f"Known standard deviation must not be negative, got {self.standard_deviation}"
            )
        return self


class SampleStatistics(CamelCaseModel):
    sample_size: float | None = None
    mean: float | None = None
    biased_variance: float | None = None
    unbiased_variance: float | None = None
    biased_standard_deviation: float | None = None
    unbiased_standard_deviation: float | None = None

    @property
    def is_empty(self) -> bool:
        return all(value is None for value in self.model_dump().values())


class ConfidenceRequest(BaseModel):
    confidence: float | None
    requested_intervals: list[IntervalType]

    def is_requested(self, interval_type: IntervalType) -> bool:
        return interval_type in self.requested_intervals


class SampleDataset(CamelCaseModel):
    """
    One sample file. Holds either raw `values` or an aggregated
    `variationalSeries`, or neither when only the parameters are known.
    """

    values: SampleValuesType | None = None
    variational_series: FrequencyTableType | None = None
    params: KnownParameters = Field(default_factory=KnownParameters)
    confidence: float | None = None
    mean_confidence_interval_with_known_variance: bool = False
    mean_confidence_interval_with_unknown_variance: bool = False
    variance_confidence_interval: bool = False

    @model_validator(mode="after")
    def check_only_one_sample_form(self) -> Self:
        if self.values is not None and self.variational_series is not None:
            raise ValueError(
                "A sample must hold either 'values' or 'variationalSeries', not both"
            )
        return self

    @property
    def form(self) -> SampleForm:
        if self.values is not None:
            return SampleForm.RAW_VALUES
        if self.variational_series is not None:
            return SampleForm.FREQUENCY_TABLE
        return SampleForm.PARAMETERS_ONLY

    def to_variational_series(self) -> VariationalSeries | None:
        if self.values is not None:
            return VariationalSeries.from_values(self.values)
        if self.variational_series is not None:
            return VariationalSeries.from_frequency_table(self.variational_series)
        return None

    @property
    def confidence_request(self) -> ConfidenceRequest:
        flags = {
            IntervalType.MEAN_WITH_KNOWN_VARIANCE: self.mean_confidence_interval_with_known_variance,
            IntervalType.MEAN_WITH_UNKNOWN_VARIANCE: self.mean_confidence_interval_with_unknown_variance,
            IntervalType.VARIANCE: self.variance_confidence_interval,
        }
        return ConfidenceRequest(
            confidence=self.confidence,
            requested_intervals=[
                interval_type for interval_type, requested in flags.items() if requested
            ],
        )
