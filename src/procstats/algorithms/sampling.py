"""
Deterministic stride sampling.

A sample drops the first ``start - 1`` measurements, then keeps every
``stride``-th of the remaining ones, beginning with the ``stride``-th:

    sample([1, 2, 3, 4, 5, 6], start=1, stride=2)  -> (2.0, 4.0, 6.0)
    sample(range(1, 11), start=1, stride=5)        -> (5.0, 10.0)
    sample(range(1, 11), start=2, stride=5)        -> (6.0,)

An input that is too short simply yields an empty sample. Turning an empty
sample into an error is the job of StatisticalPopulation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np


@dataclass(frozen=True)
class SampleSpec:
    """Description of one stride sample and the chart it produces."""
    name: str            # short id used in logs and error messages
    title: str           # header printed above the report block
    start: int           # 1-based position where sampling begins
    stride: int          # keep every stride-th value after the skip
    chart_filename: str  # png written into the output directory

    def select(self, values: Iterable[float]) -> tuple[float, ...]:
        return sample(values, self.start, self.stride)


# Report order is fixed: full population first.
GENERAL = SampleSpec("general", "", 1, 1, "general_frequency_range.png")
EACH_SECOND = SampleSpec(
    "each_second", "Sample [every second]", 1, 2, "each_second_frequency_range.png"
)
EACH_FIFTH = SampleSpec(
    "each_fifth", "Sample [every fifth]", 1, 5, "each_fifth_frequency_range.png"
)
EACH_FIFTH_FROM_SECOND = SampleSpec(
    "each_fifth_from_second",
    "Sample [every fifth from the second]",
    2,
    5,
    "each_fifth_from_second_frequency_range.png",
)

STANDARD_SAMPLES: tuple[SampleSpec, ...] = (
    GENERAL,
    EACH_SECOND,
    EACH_FIFTH,
    EACH_FIFTH_FROM_SECOND,
)


def sample(values: Iterable[float], start: int, stride: int) -> tuple[float, ...]:
    """
    Select every ``stride``-th value after skipping ``start - 1`` values.

    Args:
        values: Measurements in input order.
        start: 1-based position where sampling begins (>= 1).
        stride: Sampling interval (>= 1). stride=1 keeps every value.

    Returns:
        Tuple of selected floats, in input order. Empty when fewer than
        ``stride`` values remain after the skip.

    Raises:
        ValueError: If start or stride is below 1.
    """
    if start < 1:
        raise ValueError(f"start must be >= 1, got {start}")
    if stride < 1:
        raise ValueError(f"stride must be >= 1, got {stride}")
    arr = np.asarray(list(values), dtype=float)
    # After the skip, index i is kept when i % stride == stride - 1.
    picked = arr[start - 1:][stride - 1::stride]
    return tuple(float(x) for x in picked)
