"""
procstats: descriptive statistics and frequency polygons for measurement files.

This package provides:
- sample / SampleSpec: deterministic stride sampling
- StatisticalPopulation: mean, variance, standard deviation (biased and corrected)
- aggregate: frequency tables over a variation series
- render_frequency_polygon: 1280x720 PNG frequency polygon charts
- run_pipelines: the four standard sample pipelines with per-sample error isolation

For logging configuration in scripts:
    ```python
    from procstats.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

import logging

from procstats.utils.logging import configure_logging, get_logger

from procstats.algorithms import (
    STANDARD_SAMPLES,
    FrequencyTable,
    SampleSpec,
    StatisticalPopulation,
    aggregate,
    frequency_points,
    sample,
)
from procstats.measurements import read_measurements
from procstats.pipeline import PipelineResult, run_pipeline, run_pipelines
from procstats.plotting import render_frequency_polygon

# Ensure procstats logger has NullHandler so logs don't propagate to root
# when no application has configured logging. The CLI calls
# configure_logging() to add a real handler.
_logger = logging.getLogger("procstats")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "FrequencyTable",
    "PipelineResult",
    "STANDARD_SAMPLES",
    "SampleSpec",
    "StatisticalPopulation",
    "aggregate",
    "configure_logging",
    "frequency_points",
    "get_logger",
    "read_measurements",
    "render_frequency_polygon",
    "run_pipeline",
    "run_pipelines",
    "sample",
]

__version__ = "0.1.0"
