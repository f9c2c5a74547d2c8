"""
Descriptive statistics of a single sample, pure numpy.

Definitions (n = number of values):
  mean            = sum(x) / n
  variance        = sum((x - mean)^2) / n        (population, biased)
  stddev          = sqrt(variance)
  sample_variance = variance * n / (n - 1)       (Bessel-corrected)
  sample_stddev   = sqrt(sample_variance)

Sums run over the sorted series (the "variation series"), so the same input
always produces bit-identical results regardless of its original order.

Edge cases:
  - empty input -> InvalidInputError (the mean is undefined)
  - NaN or +/-inf in the input -> InvalidInputError (ordering is undefined)
  - a single value -> InsufficientSamplesError (corrected variance undefined)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

import numpy as np

from procstats.errors import InsufficientSamplesError, InvalidInputError
from procstats.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class StatisticalPopulation:
    """Immutable summary of one sample.

    Attributes:
        raw: Values in original input order.
        sorted: Values sorted ascending (variation series).
        mean: Arithmetic mean.
        variance: Population variance (divides by n).
        stddev: Square root of variance.
        sample_variance: Bessel-corrected variance (divides by n - 1).
        sample_stddev: Square root of sample_variance.
    """
    raw: tuple[float, ...]
    sorted: tuple[float, ...]
    mean: float
    variance: float
    stddev: float
    sample_variance: float
    sample_stddev: float

    @property
    def size(self) -> int:
        return len(self.raw)

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "StatisticalPopulation":
        """Compute all statistics for ``values``.

        Args:
            values: Finite measurements, at least two of them.

        Returns:
            StatisticalPopulation bound to a private copy of ``values``.

        Raises:
            InvalidInputError: If values is empty or holds NaN/inf.
            InsufficientSamplesError: If values holds exactly one value.
        """
        raw = np.array(list(values), dtype=float)
        n = raw.size
        if n == 0:
            raise InvalidInputError("cannot summarise an empty sample")
        if not np.all(np.isfinite(raw)):
            bad = [float(x) for x in raw[~np.isfinite(raw)]]
            raise InvalidInputError(f"sample contains non-finite values: {bad}")
        if n == 1:
            raise InsufficientSamplesError(
                f"sample has a single value ({raw[0]!r}); corrected variance needs at least 2"
            )

        series = np.sort(raw, kind="stable")
        mean = float(np.sum(series) / n)
        variance = float(np.sum((series - mean) ** 2) / n)
        sample_variance = variance * n / (n - 1)

        logger.debug(f"n={n} mean={mean!r} variance={variance!r}")

        return cls(
            raw=tuple(float(x) for x in raw),
            sorted=tuple(float(x) for x in series),
            mean=mean,
            variance=variance,
            stddev=float(np.sqrt(variance)),
            sample_variance=sample_variance,
            sample_stddev=float(np.sqrt(sample_variance)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Scalar statistics as a plain dict (no value sequences)."""
        return {
            "size": self.size,
            "mean": self.mean,
            "variance": self.variance,
            "stddev": self.stddev,
            "sample_variance": self.sample_variance,
            "sample_stddev": self.sample_stddev,
        }
