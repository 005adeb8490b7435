import io
import sys

import pytest

from conftest import numbered_lines
from linehead.options import Mode
from linehead.selector import print_lines, select_lines

FIVE = numbered_lines(5).splitlines(keepends=True)


@pytest.mark.parametrize("count", [1, 3, 5, 10, 100])
@pytest.mark.parametrize("available", [0, 1, 5, 100])
def test_normal_prints_min_of_count_and_available(count, available):
    lines = numbered_lines(available).splitlines(keepends=True)
    assert list(select_lines(lines, Mode.NORMAL, count)) == lines[:min(count, available)]


def test_even_picks_physical_lines_two_and_four():
    assert list(select_lines(FIVE, Mode.EVEN, 2)) == [b"line 2\n", b"line 4\n"]


def test_odd_picks_physical_lines_one_and_three():
    assert list(select_lines(FIVE, Mode.ODD, 2)) == [b"line 1\n", b"line 3\n"]


def test_filters_stop_when_input_runs_out():
    assert list(select_lines(FIVE, Mode.EVEN, 10)) == [b"line 2\n", b"line 4\n"]
    assert list(select_lines(FIVE, Mode.ODD, 10)) == [b"line 1\n", b"line 3\n", b"line 5\n"]


def test_empty_input():
    for mode in Mode:
        assert list(select_lines([], mode, 10)) == []


def test_print_lines_writes_bytes_unchanged():
    out = io.BytesIO()
    lines = [b"\xff raw\n", b"second\n", b"third"]
    assert print_lines(lines, Mode.ODD, 5, out) == 2
    assert out.getvalue() == b"\xff raw\nthird"


@pytest.mark.parametrize("mode, expected", [
    (Mode.NORMAL, FIVE),
    (Mode.EVEN, FIVE[1::2]),
    (Mode.ODD, FIVE[0::2]),
])
def test_count_beyond_maxsize(mode, expected):
    assert list(select_lines(FIVE, mode, sys.maxsize + 1)) == expected
