"""Unit tests for frequency tables."""

import math

import pytest

from procstats.algorithms.frequency import FrequencyTable, aggregate, frequency_points


def test_counts_repeated_values():
    table = aggregate([1.0, 1.0, 2.0, 3.0, 3.0, 3.0])
    assert table == {1.0: 2, 2.0: 1, 3.0: 3}
    assert sum(table.values()) == 6


def test_keys_iterate_ascending():
    table = aggregate([3.0, 1.0, 2.0, 3.0, -4.5])
    assert list(table.keys()) == [-4.5, 1.0, 2.0, 3.0]


def test_all_distinct_values_count_once():
    values = [0.5, 1.5, 2.5, 3.5]
    table = aggregate(values)
    assert set(table.keys()) == set(values)
    assert all(c == 1 for c in table.values())


def test_exact_grouping_keeps_close_values_apart():
    table = aggregate([0.1 + 0.2, 0.3])
    assert len(table) == 2


def test_rounded_grouping_merges_close_values():
    table = aggregate([1.001, 1.004, 1.2, 1.2], decimals=2)
    assert table == {1.0: 2, 1.2: 2}
    assert sum(table.values()) == 4


def test_empty_input_gives_empty_table():
    assert aggregate([]) == {}


def test_frequency_points_sorted_pairs():
    points = frequency_points({3.0: 1, 1.0: 2, 2.0: 5})
    assert points == [(1.0, 2), (2.0, 5), (3.0, 1)]


def test_negative_zero_and_zero_are_separate_keys():
    table = aggregate([-0.0, 0.0, 0.0])
    assert len(table) == 2
    assert table[-0.0] == 1
    assert table[0.0] == 2
    first, second = list(table)
    assert math.copysign(1.0, first) == -1.0
    assert math.copysign(1.0, second) == 1.0


def test_frequency_points_keep_signed_zeros_apart():
    points = frequency_points(aggregate([0.0, -0.0, 1.0]))
    assert [c for _, c in points] == [1, 1, 1]
    assert math.copysign(1.0, points[0][0]) == -1.0


def test_tables_with_different_zero_signs_differ():
    assert aggregate([-0.0, 1.0]) != aggregate([0.0, 1.0])
    assert aggregate([-0.0, 1.0]) == FrequencyTable([(1.0, 1), (-0.0, 1)])


def test_missing_key_raises_key_error():
    table = aggregate([1.0])
    assert 2.0 not in table
    assert "a" not in table
    with pytest.raises(KeyError):
        table[2.0]
