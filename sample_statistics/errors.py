class SampleStatisticsError(ValueError):
    pass


class ParseError(SampleStatisticsError):
    """A frequency table key could not be read as a number"""


class DomainError(SampleStatisticsError):
    """
    Raised when a calculation is asked for outside of where it is defined, e.g.
    a confidence outside (0, 1), non-positive degrees of freedom, or a sample
    size that would make n - 1 a non-positive divisor
    """


class MissingDataError(SampleStatisticsError):
    """A requested interval needs a statistic or parameter that is not known"""


class SampleSelectionError(SampleStatisticsError):
    pass
