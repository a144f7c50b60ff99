import math

from scipy.stats import chi2, norm, t

from sample_statistics.errors import DomainError


def normal_quantile(probability: float) -> float:
    """Inverse CDF of the standard normal distribution"""
    _check_probability(probability)
    return float(norm.ppf(probability))


def student_t_quantile(degrees_of_freedom: float, probability: float) -> float:
    _check_degrees_of_freedom(degrees_of_freedom)
    _check_probability(probability)
    return float(t.ppf(probability, degrees_of_freedom))


def chi_squared_quantile(degrees_of_freedom: float, probability: float) -> float:
    _check_degrees_of_freedom(degrees_of_freedom)
    _check_probability(probability)
    return float(chi2.ppf(probability, degrees_of_freedom))


def _check_probability(probability: float) -> None:
    if not 0 < probability < 1:
        raise DomainError(f"Probability must be in (0, 1), got {probability}")


def _check_degrees_of_freedom(degrees_of_freedom: float) -> None:
    if math.isnan(degrees_of_freedom) or degrees_of_freedom <= 0:
        raise DomainError(
            f"Degrees of freedom must be positive, got {degrees_of_freedom}"
        )
