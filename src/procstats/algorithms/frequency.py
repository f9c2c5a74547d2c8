"""
Frequency table of a variation series, pure pandas.

Groups values that are equal and counts how often each one occurs. The result
feeds the frequency polygon: one (value, count) point per distinct value.

Grouping modes:
  - decimals=None (default): values group only when their 64-bit patterns are
    identical. 0.1 + 0.2 and 0.3 are two different keys, and so are -0.0 and
    0.0.
  - decimals=k: values are rounded to k decimal places first, so 1.004 and
    1.001 both count towards 1.0 with k=2.

A plain dict cannot hold -0.0 and 0.0 as separate keys (they hash and compare
equal), so counts live in FrequencyTable, a mapping keyed by bit pattern.
"""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Mapping, Optional

import numpy as np
import pandas as pd


def _bits(value: float) -> int:
    return int(np.float64(value).view(np.int64))


def _value(bits: int) -> float:
    return float(np.int64(bits).view(np.float64))


def _order_key(value: float) -> tuple[float, bool]:
    # -0.0 sorts before 0.0
    return value, math.copysign(1.0, value) > 0


class FrequencyTable(Mapping[float, int]):
    """Read-only value -> count mapping that tells -0.0 and 0.0 apart.

    Iterates in ascending value order, -0.0 before 0.0.
    """

    def __init__(self, items: Iterable[tuple[float, int]] = ()):
        counts: dict[int, int] = {}
        for value, count in items:
            key = _bits(value)
            counts[key] = counts.get(key, 0) + int(count)
        self._counts = counts
        self._order = sorted(counts, key=lambda b: _order_key(_value(b)))

    def __getitem__(self, value: float) -> int:
        try:
            key = _bits(value)
        except (TypeError, ValueError):
            raise KeyError(value) from None
        if key not in self._counts:
            raise KeyError(value)
        return self._counts[key]

    def __iter__(self) -> Iterator[float]:
        return (_value(b) for b in self._order)

    def __len__(self) -> int:
        return len(self._counts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FrequencyTable):
            return self._counts == other._counts
        return super().__eq__(other)

    def __repr__(self) -> str:
        body = ", ".join(f"{v!r}: {c}" for v, c in self.items())
        return f"FrequencyTable({{{body}}})"


def aggregate(
    sorted_values: Iterable[float],
    decimals: Optional[int] = None,
) -> FrequencyTable:
    """
    Count occurrences of each distinct value.

    Args:
        sorted_values: Values to count (usually StatisticalPopulation.sorted).
            Order does not matter for the counts.
        decimals: If set, round to this many decimal places before grouping.

    Returns:
        FrequencyTable mapping value -> count, iterating in ascending value
        order. Counts sum to the number of input values.
    """
    arr = np.asarray(list(sorted_values), dtype=float)
    if arr.size == 0:
        return FrequencyTable()
    if decimals is not None:
        arr = np.round(arr, int(decimals))
    counts = pd.Series(arr.view(np.int64)).value_counts(sort=False)
    return FrequencyTable((_value(int(b)), int(c)) for b, c in counts.items())


def frequency_points(table: Mapping[float, int]) -> list[tuple[float, int]]:
    """(value, count) pairs sorted ascending by value, -0.0 before 0.0."""
    return sorted(
        ((float(k), int(v)) for k, v in table.items()),
        key=lambda p: _order_key(p[0]),
    )
