import logging

import numpy as np
from pydantic import BaseModel

from sample_statistics.data_structures.data_models import (
    KnownParameters,
    SampleDataset,
    SampleStatistics,
)
from sample_statistics.errors import MissingDataError
from sample_statistics.math.moments import (
    biased_from_unbiased,
    biased_sample_variance,
    sample_mean,
    sample_size,
    unbiased_from_biased,
)

logger = logging.getLogger(__name__)


class ResolvedSample(BaseModel):
    dataset: SampleDataset
    params: KnownParameters
    statistics: SampleStatistics


def resolve_sample(dataset: SampleDataset) -> ResolvedSample:
    params = fill_known_parameters(dataset.params)
    statistics = SampleStatistics()

    series = dataset.to_variational_series()
    if series is None:
        logger.info(
            "Sample has neither values nor a variational series, only known parameters will be used"
        )
    else:
        logger.info(
            f"Calculating statistics from {len(series)} distinct observations ({dataset.form.value})"
        )
        size = sample_size(series)
        statistics = SampleStatistics(
            sample_size=size,
            mean=sample_mean(series),
            biased_variance=biased_sample_variance(series),
        )
        params = params.model_copy(update={"sample_size": size})

    statistics = fill_derived_statistics(statistics, params.sample_size)
    return ResolvedSample(dataset=dataset, params=params, statistics=statistics)


def fill_derived_statistics(
    statistics: SampleStatistics, size: float | None
) -> SampleStatistics:
    """
    Fills in whichever of the biased/unbiased variances is missing from the
    one that is present, then both standard deviations. A sample whose total
    weight is at most 1 keeps its unbiased fields empty.
    """
    biased_variance = statistics.biased_variance
    unbiased_variance = statistics.unbiased_variance

    if biased_variance is None and unbiased_variance is None:
        return statistics
    one_variance_missing = biased_variance is None or unbiased_variance is None
    if one_variance_missing and size is None:
        raise MissingDataError("Sample size is needed to convert between variances")

    if unbiased_variance is None and size <= 1:
        logger.warning(
            f"Sample size {size} is too small for an unbiased variance, leaving it unknown"
        )
    elif unbiased_variance is None:
        unbiased_variance = unbiased_from_biased(biased_variance, size)
    elif biased_variance is None:
        biased_variance = biased_from_unbiased(unbiased_variance, size)

    return statistics.model_copy(
        update={
            "biased_variance": biased_variance,
            "unbiased_variance": unbiased_variance,
            "biased_standard_deviation": float(np.sqrt(biased_variance)),
            "unbiased_standard_deviation": _square_root_or_none(unbiased_variance),
        }
    )


def _square_root_or_none(variance: float | None) -> float | None:
    return None if variance is None else float(np.sqrt(variance))


def fill_known_parameters(params: KnownParameters) -> KnownParameters:
    if params.variance is None and params.standard_deviation is not None:
        return params.model_copy(
            update={"variance": params.standard_deviation**2}
        )
    if params.standard_deviation is None and params.variance is not None:
        return params.model_copy(
            update={"standard_deviation": float(np.sqrt(params.variance))}
        )
    return params
