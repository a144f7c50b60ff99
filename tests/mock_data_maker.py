import json
from pathlib import Path

from sample_statistics.data_structures.data_models import (
    KnownParameters,
    SampleDataset,
)

SPREAD_OUT_VALUES = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
SPREAD_OUT_UNBIASED_VARIANCE = 32 / 7


def make_raw_dataset(
    values: list[float] = SPREAD_OUT_VALUES,
    params: KnownParameters | None = None,
    confidence: float | None = 0.95,
    known_variance: bool = False,
    unknown_variance: bool = False,
    variance: bool = False,
) -> SampleDataset:
    return SampleDataset(
        values=values,
        params=params or KnownParameters(),
        confidence=confidence,
        mean_confidence_interval_with_known_variance=known_variance,
        mean_confidence_interval_with_unknown_variance=unknown_variance,
        variance_confidence_interval=variance,
    )


def make_frequency_dataset(
    frequency_table: dict[str, float],
    params: KnownParameters | None = None,
    confidence: float | None = 0.95,
    unknown_variance: bool = False,
    variance: bool = False,
) -> SampleDataset:
    return SampleDataset(
        variational_series=frequency_table,
        params=params or KnownParameters(),
        confidence=confidence,
        mean_confidence_interval_with_unknown_variance=unknown_variance,
        variance_confidence_interval=variance,
    )


def make_parameters_only_dataset(
    params: KnownParameters,
    confidence: float | None = 0.95,
    known_variance: bool = False,
    unknown_variance: bool = False,
    variance: bool = False,
) -> SampleDataset:
    return SampleDataset(
        params=params,
        confidence=confidence,
        mean_confidence_interval_with_known_variance=known_variance,
        mean_confidence_interval_with_unknown_variance=unknown_variance,
        variance_confidence_interval=variance,
    )


def write_sample_file(directory: Path, name: str, payload: dict) -> Path:
    path = directory / f"{name}.json"
    path.write_text(json.dumps(payload, indent=4))
    return path
