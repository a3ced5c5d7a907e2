"""
Descriptive statistics module.

Public API:
    mean(x)                           - Arithmetic mean
    sample_standard_deviation(x)      - Standard deviation, divisor n - 1
    population_standard_deviation(x)  - Standard deviation, divisor n
    SampleStatistics.from_array(x)    - Mean, sample sd and n in one value
    PopulationStatistics.from_array(x) - Mean, population sd and n in one value
"""

from sumstats.descriptive.design import ObservationDesign
from sumstats.descriptive._common import DescriptiveParams
from sumstats.descriptive.solvers import (
    mean,
    sample_standard_deviation,
    population_standard_deviation,
)
from sumstats.descriptive.statistics import (
    GetStatistics,
    DeviationKind,
    Sample,
    Population,
    SampleStatistics,
    PopulationStatistics,
)

__all__ = [
    "mean",
    "sample_standard_deviation",
    "population_standard_deviation",
    "GetStatistics",
    "DeviationKind",
    "Sample",
    "Population",
    "SampleStatistics",
    "PopulationStatistics",
    "ObservationDesign",
    "DescriptiveParams",
]
