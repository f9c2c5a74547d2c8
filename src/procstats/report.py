"""Plain text report blocks.

One block per sample:

    Sample [every second]:
    Population: [20.0, 40.0]
    Variation series: [20.0, 40.0]
    Mean: 30.00000
    Variance: 100.00000
    Standard deviation: 10.00000
    Corrected variance: 200.00000
    Corrected standard deviation: 14.14214

The full population block has no header line.
"""

from __future__ import annotations

from typing import Iterable, Optional

from procstats.algorithms.population import StatisticalPopulation

DEFAULT_PRECISION = 5


def format_values(values: Iterable[float]) -> str:
    """Render a value sequence as ``[a, b, c]`` using repr for each float."""
    return "[" + ", ".join(repr(float(v)) for v in values) + "]"


def format_population(
    population: StatisticalPopulation,
    *,
    title: str = "",
    precision: int = DEFAULT_PRECISION,
) -> str:
    """Format one population block (no trailing newline)."""
    p = precision
    lines = []
    if title:
        lines.append(f"{title}:")
    lines.extend([
        f"Population: {format_values(population.raw)}",
        f"Variation series: {format_values(population.sorted)}",
        f"Mean: {population.mean:.{p}f}",
        f"Variance: {population.variance:.{p}f}",
        f"Standard deviation: {population.stddev:.{p}f}",
        f"Corrected variance: {population.sample_variance:.{p}f}",
        f"Corrected standard deviation: {population.sample_stddev:.{p}f}",
    ])
    return "\n".join(lines)


def format_failure(title: str, name: str, error: BaseException) -> str:
    """Format the block printed in place of a sample that could not be summarised."""
    header = f"{title}:" if title else "Population:"
    return f"{header}\nerror in sample {name!r}: {error}"


def format_report(blocks: Iterable[Optional[str]]) -> str:
    """Join blocks with a blank line between them, skipping None."""
    return "\n\n".join(b for b in blocks if b is not None)
