"""Unit tests for StatisticalPopulation."""

import math
import random

import pytest

from procstats.algorithms.population import StatisticalPopulation
from procstats.algorithms.sampling import sample
from procstats.errors import InsufficientSamplesError, InvalidInputError


def test_ten_twenty_thirty():
    pop = StatisticalPopulation.from_values([10.0, 20.0, 30.0])
    assert pop.mean == pytest.approx(20.0)
    assert pop.variance == pytest.approx(200.0 / 3.0)
    assert pop.stddev == pytest.approx(math.sqrt(200.0 / 3.0))
    assert pop.sample_variance == pytest.approx(100.0)
    assert pop.sample_stddev == pytest.approx(10.0)
    assert pop.size == 3


def test_raw_keeps_order_and_sorted_is_ascending():
    values = [3.5, -1.0, 2.0, 2.0, 10.25]
    pop = StatisticalPopulation.from_values(values)
    assert pop.raw == tuple(values)
    assert pop.sorted == (-1.0, 2.0, 2.0, 3.5, 10.25)


def test_random_values_match_definitions():
    rng = random.Random(1234)
    values = [rng.uniform(-100, 100) for _ in range(257)]
    pop = StatisticalPopulation.from_values(values)
    n = len(values)

    assert sorted(pop.sorted) == sorted(values)
    assert all(a <= b for a, b in zip(pop.sorted, pop.sorted[1:]))

    mean = sum(values) / n
    variance = sum((x - mean) ** 2 for x in values) / n
    assert pop.mean == pytest.approx(mean, rel=1e-9)
    assert pop.variance == pytest.approx(variance, rel=1e-9)
    assert pop.sample_variance == pytest.approx(pop.variance * n / (n - 1), rel=1e-12)
    assert pop.stddev == pytest.approx(math.sqrt(pop.variance))
    assert pop.sample_stddev == pytest.approx(math.sqrt(pop.sample_variance))


def test_constant_values_have_zero_spread():
    pop = StatisticalPopulation.from_values([5.0, 5.0, 5.0, 5.0])
    assert pop.mean == 5.0
    assert pop.variance == 0.0
    assert pop.stddev == 0.0
    assert pop.sample_stddev == 0.0


def test_recomputation_is_bit_identical():
    rng = random.Random(7)
    values = [rng.gauss(0.0, 3.0) for _ in range(100)]
    a = StatisticalPopulation.from_values(values)
    b = StatisticalPopulation.from_values(list(values))
    assert a == b
    assert a.to_dict() == b.to_dict()


def test_statistics_do_not_depend_on_input_order():
    values = [0.1, 0.7, 0.2, 1e-3, 5.5, 0.3]
    a = StatisticalPopulation.from_values(values)
    b = StatisticalPopulation.from_values(list(reversed(values)))
    assert a.mean == b.mean
    assert a.variance == b.variance


def test_input_is_copied():
    values = [1.0, 2.0, 3.0]
    pop = StatisticalPopulation.from_values(values)
    values.append(100.0)
    assert pop.raw == (1.0, 2.0, 3.0)


def test_empty_sample_raises_invalid_input():
    with pytest.raises(InvalidInputError) as exc_info:
        StatisticalPopulation.from_values([])
    assert not isinstance(exc_info.value, InsufficientSamplesError)


def test_empty_stride_sample_raises_invalid_input():
    """A stride sample of a short input is empty; no ZeroDivisionError."""
    with pytest.raises(InvalidInputError):
        StatisticalPopulation.from_values(sample([1.0, 2.0, 3.0], 1, 5))


def test_single_value_raises_insufficient_samples():
    with pytest.raises(InsufficientSamplesError):
        StatisticalPopulation.from_values([42.0])


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_values_rejected(bad):
    with pytest.raises(InvalidInputError) as exc_info:
        StatisticalPopulation.from_values([1.0, bad, 2.0])
    assert "non-finite" in str(exc_info.value)


def test_population_is_frozen():
    pop = StatisticalPopulation.from_values([1.0, 2.0])
    with pytest.raises(AttributeError):
        pop.mean = 0.0


def test_to_dict_keys():
    d = StatisticalPopulation.from_values([1.0, 3.0]).to_dict()
    assert d == {
        "size": 2,
        "mean": 2.0,
        "variance": 1.0,
        "stddev": 1.0,
        "sample_variance": 2.0,
        "sample_stddev": pytest.approx(math.sqrt(2.0)),
    }
