"""Tests for reading measurements from CSV files."""

from __future__ import annotations

import math

import pytest

from procstats.errors import InputFileError, ParseError
from procstats.measurements import read_measurements


def test_reads_second_column(write_csv):
    p = write_csv("t,power\n0,10.0\n1,20.5\n2,-3\n")
    assert read_measurements(p) == (10.0, 20.5, -3.0)


def test_header_only_gives_empty(write_csv):
    p = write_csv("t,power\n")
    assert read_measurements(p) == ()


def test_custom_column_and_delimiter(write_csv):
    p = write_csv("power;t\n1.5;a\n2.5;b\n")
    assert read_measurements(p, column=0, delimiter=";") == (1.5, 2.5)


def test_surrounding_whitespace_is_ignored(write_csv):
    p = write_csv("t,power\n0, 10.0\n1,20.0 \n")
    assert read_measurements(p) == (10.0, 20.0)


def test_missing_file_raises_input_file_error(tmp_path):
    with pytest.raises(InputFileError):
        read_measurements(tmp_path / "missing.csv")


def test_unparseable_value_raises_parse_error(write_csv):
    p = write_csv("t,power\n0,10.0\n1,abc\n2,30.0\n")
    with pytest.raises(ParseError) as exc_info:
        read_measurements(p)
    assert exc_info.value.row == 2
    assert exc_info.value.text == "abc"
    assert "abc" in str(exc_info.value)


def test_missing_field_raises_parse_error(write_csv):
    p = write_csv("t,power\n0,10.0\n1\n")
    with pytest.raises(ParseError):
        read_measurements(p)


def test_column_out_of_range_raises_parse_error(write_csv):
    p = write_csv("t,power\n0,10.0\n")
    with pytest.raises(ParseError):
        read_measurements(p, column=5)


def test_empty_file_raises_parse_error(write_csv):
    p = write_csv("")
    with pytest.raises(ParseError):
        read_measurements(p)


def test_row_with_extra_field_raises_parse_error(write_csv):
    p = write_csv("t,power\n0,10.0,99\n1,20.0,98\n")
    with pytest.raises(ParseError):
        read_measurements(p)


def test_row_shorter_than_header_raises_parse_error(write_csv):
    p = write_csv("t,power,extra\n0,10.0,1\n1,20.0\n")
    with pytest.raises(ParseError) as exc_info:
        read_measurements(p)
    assert exc_info.value.row == 2


def test_nan_and_inf_text_parse_as_floats(write_csv):
    p = write_csv("t,power\n0,nan\n1,-Inf\n2,infinity\n3,1.5\n")
    values = read_measurements(p)
    assert math.isnan(values[0])
    assert values[1] == -math.inf
    assert values[2] == math.inf
    assert values[3] == 1.5
