"""
sumstats: descriptive statistics and a two-sample t-statistic.

Small numpy-based library for the mean, sample and population standard
deviations, summary value objects, and a t-statistic computed from two
summarized samples.

Submodules:
    descriptive: mean, standard deviations, SampleStatistics, PopulationStatistics
    hypothesis: two_samp_t_test
    core: exceptions, validation, result envelope, numeric policy
"""

__version__ = "0.1.0"

from sumstats import descriptive
from sumstats import hypothesis
from sumstats.descriptive import (
    mean,
    sample_standard_deviation,
    population_standard_deviation,
    Sample,
    Population,
    GetStatistics,
    SampleStatistics,
    PopulationStatistics,
)
from sumstats.hypothesis import two_samp_t_test, TTestResult
from sumstats.core import (
    SumStatsError,
    ValidationError,
    DimensionError,
    InsufficientDataError,
    NumericalError,
)

__all__ = [
    "__version__",
    "descriptive",
    "hypothesis",
    "mean",
    "sample_standard_deviation",
    "population_standard_deviation",
    "Sample",
    "Population",
    "GetStatistics",
    "SampleStatistics",
    "PopulationStatistics",
    "two_samp_t_test",
    "TTestResult",
    "SumStatsError",
    "ValidationError",
    "DimensionError",
    "InsufficientDataError",
    "NumericalError",
]
