"""Sample pipelines: measurements -> sample -> population -> frequencies -> chart.

Each of the standard samples runs through its own pipeline. Pipelines share
no state, so a failure in one (too few values, an unwritable chart) is
recorded on its PipelineResult and the others carry on.

Fatal problems (unreadable input, parse errors, bad output directory) are
raised from run() before any pipeline starts.
"""

from __future__ import annotations

import concurrent.futures
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Sequence

from procstats.algorithms.frequency import FrequencyTable, aggregate, frequency_points
from procstats.algorithms.population import StatisticalPopulation
from procstats.algorithms.sampling import STANDARD_SAMPLES, SampleSpec
from procstats.config import RunConfig
from procstats.errors import ChartIOError, InvalidInputError
from procstats.measurements import read_measurements
from procstats.plotting.frequency_polygon import (
    render_frequency_polygon,
    write_frequency_polygon_html,
)
from procstats.report import DEFAULT_PRECISION, format_failure, format_population, format_report
from procstats.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class PipelineResult:
    """Outcome of one sample pipeline.

    Attributes:
        spec: The sample this pipeline ran for.
        values: Selected measurements, in input order.
        population: Statistics, or None if the sample could not be summarised.
        frequencies: Value -> count table (empty when population is None).
        charts: Chart files written.
        error: Why the population could not be computed.
        chart_error: Why a chart could not be written (statistics still valid).
    """
    spec: SampleSpec
    values: tuple[float, ...]
    population: Optional[StatisticalPopulation] = None
    frequencies: FrequencyTable = field(default_factory=FrequencyTable)
    charts: list[Path] = field(default_factory=list)
    error: Optional[InvalidInputError] = None
    chart_error: Optional[ChartIOError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.chart_error is None

    def render(self, precision: int = DEFAULT_PRECISION) -> str:
        """Report block for this sample."""
        if self.population is None:
            return format_failure(self.spec.title, self.spec.name, self.error)
        return format_population(self.population, title=self.spec.title, precision=precision)


def run_pipeline(
    spec: SampleSpec,
    measurements: Sequence[float],
    *,
    output_dir: Optional[Path] = None,
    round_decimals: Optional[int] = None,
    html: bool = False,
) -> PipelineResult:
    """
    Run one sample through statistics, frequency table and charts.

    Args:
        spec: Which sample to take.
        measurements: Full measurement list.
        output_dir: Directory for chart files; None skips PNG charts.
        round_decimals: Frequency grouping precision (None = exact values).
        html: Also write a Plotly HTML chart (requires output_dir).

    Returns:
        PipelineResult. Statistical and chart errors are stored on it, not raised.
    """
    values = spec.select(measurements)
    result = PipelineResult(spec=spec, values=values)

    try:
        result.population = StatisticalPopulation.from_values(values)
    except InvalidInputError as e:
        logger.warning(f"sample {spec.name!r} ({len(values)} values): {e}")
        result.error = e
        return result

    result.frequencies = aggregate(result.population.sorted, decimals=round_decimals)
    if output_dir is None:
        return result

    points = frequency_points(result.frequencies)
    try:
        result.charts.append(
            render_frequency_polygon(points, Path(output_dir) / spec.chart_filename)
        )
        if html:
            html_path = (Path(output_dir) / spec.chart_filename).with_suffix(".html")
            result.charts.append(write_frequency_polygon_html(points, html_path))
    except ChartIOError as e:
        logger.error(f"sample {spec.name!r}: {e}")
        result.chart_error = e
    return result


def run_pipelines(
    measurements: Sequence[float],
    samples: Iterable[SampleSpec] = STANDARD_SAMPLES,
    *,
    output_dir: Optional[Path] = None,
    round_decimals: Optional[int] = None,
    html: bool = False,
    jobs: int = 1,
) -> list[PipelineResult]:
    """
    Run every sample pipeline; results come back in the order of ``samples``.

    With jobs > 1 the pipelines run on a thread pool. Output order does not
    depend on completion order.
    """
    samples = list(samples)
    measurements = tuple(measurements)

    def _one(spec: SampleSpec) -> PipelineResult:
        return run_pipeline(
            spec,
            measurements,
            output_dir=output_dir,
            round_decimals=round_decimals,
            html=html,
        )

    if jobs <= 1 or len(samples) <= 1:
        return [_one(spec) for spec in samples]

    with concurrent.futures.ThreadPoolExecutor(max_workers=min(jobs, len(samples))) as executor:
        return list(executor.map(_one, samples))


def run(config: RunConfig) -> tuple[str, list[PipelineResult]]:
    """
    Execute a full run: read input, run the standard pipelines, build the report.

    Returns:
        (report text, pipeline results in report order).

    Raises:
        UsageError / InputFileError: From config validation.
        InputFileError / ParseError: From reading the input.
    """
    config.validate()
    measurements = read_measurements(
        config.input_path, column=config.column, delimiter=config.delimiter
    )
    output_dir = config.output_dir if config.charts else None
    results = run_pipelines(
        measurements,
        output_dir=output_dir,
        round_decimals=config.round_decimals,
        html=config.html and config.charts,
        jobs=config.jobs,
    )
    report = format_report(r.render(config.precision) for r in results)
    return report, results
