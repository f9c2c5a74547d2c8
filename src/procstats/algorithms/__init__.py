"""Statistical algorithms behind the report.

Pure numpy/pandas implementations: stride sampling, population statistics and
frequency tables. Nothing here performs I/O.
"""

from procstats.algorithms.frequency import FrequencyTable, aggregate, frequency_points
from procstats.algorithms.population import StatisticalPopulation
from procstats.algorithms.sampling import STANDARD_SAMPLES, SampleSpec, sample

__all__ = [
    "FrequencyTable",
    "STANDARD_SAMPLES",
    "SampleSpec",
    "StatisticalPopulation",
    "aggregate",
    "frequency_points",
    "sample",
]
