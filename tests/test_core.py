"""Tests for :mod:`zhang_hilbert.core`."""

import itertools
import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from zhang_hilbert.core import HilbertScanCore
from zhang_hilbert.curve_types import CurveType, exit_point, translate


@pytest.mark.parametrize("width, height", [(0, 0), (0, 5), (5, 0)])
def test_zero_sized_scan_is_empty(width, height):
    scan = HilbertScanCore(width, height)
    assert len(scan) == 0
    assert list(scan) == []
    with pytest.raises(StopIteration):
        next(scan)


def test_single_cell():
    assert list(HilbertScanCore(1, 1)) == [(0, 0)]


def test_hilbert_4x4():
    assert list(HilbertScanCore(4, 4)) == [
        (0, 0), (1, 0), (1, 1), (0, 1),
        (0, 2), (0, 3), (1, 3), (1, 2),
        (2, 2), (2, 3), (3, 3), (3, 2),
        (3, 1), (2, 1), (2, 0), (3, 0),
    ]


def test_odd_square():
    assert list(HilbertScanCore(3, 3)) == [
        (0, 0), (0, 1), (0, 2), (1, 2), (1, 1), (1, 0), (2, 0), (2, 1), (2, 2),
    ]


def test_documented_6x7():
    # drawn in the curve_types docstring
    assert list(HilbertScanCore(6, 7)) == [
        (0, 0), (1, 0), (1, 1), (0, 1), (0, 2), (1, 2),
        (1, 3), (0, 3), (0, 4), (1, 4), (1, 5), (0, 5), (0, 6), (1, 6),
        (2, 6), (2, 5), (3, 5), (3, 6), (4, 6), (5, 6), (5, 5), (4, 5),
        (4, 4), (5, 4), (5, 3), (4, 3), (3, 3), (3, 4), (2, 4), (2, 3),
        (2, 2), (3, 2), (4, 2), (5, 2), (5, 1), (4, 1), (3, 1), (2, 1),
        (2, 0), (3, 0), (4, 0), (5, 0),
    ]


def test_scan_between_other_corners(check_scan):
    points = list(HilbertScanCore(4, 4, curve_type=CurveType.TYPE_1_REV))
    check_scan(points, 4, 4)
    assert points[0] == (0, 3)
    assert points[-1] == (0, 0)
    assert points[:4] == [(0, 3), (0, 2), (1, 2), (1, 3)]


def test_lines():
    assert list(HilbertScanCore(5, 1)) == [(x, 0) for x in range(5)]
    assert list(HilbertScanCore(1, 5)) == [(0, y) for y in range(5)]


@pytest.mark.parametrize(
    "width, height", list(itertools.product(range(1, 21), range(1, 21)))
)
def test_small_scans_are_valid(width, height, check_scan):
    points = list(HilbertScanCore(width, height))
    check_scan(points, width, height)
    assert points[0] == (0, 0)
    assert points[-1] == exit_point(width, height)


@given(st.integers(min_value=1, max_value=64), st.integers(min_value=1, max_value=64))
def test_scans_are_valid(check_scan, width, height):
    check_scan(list(HilbertScanCore(width, height)), width, height)


def test_end_to_end_11x42(check_scan):
    points = list(HilbertScanCore(11, 42))
    assert len(points) == 462
    assert points[0] == (0, 0)
    assert all(0 <= x < 11 and 0 <= y < 42 for x, y in points)
    check_scan(points, 11, 42)


@given(st.integers(min_value=0, max_value=40), st.integers(min_value=0, max_value=40))
def test_deterministic(width, height):
    assert list(HilbertScanCore(width, height)) == list(HilbertScanCore(width, height))


def test_remaining_counts_down():
    scan = HilbertScanCore(6, 5)
    assert scan.remaining == 30
    next(scan)
    next(scan)
    assert len(scan) == 28
    list(scan)
    assert scan.remaining == 0
    # stays exhausted
    assert list(scan) == []


def test_can_stop_early():
    scan = HilbertScanCore(100, 100)
    head = list(itertools.islice(scan, 10))
    assert head[0] == (0, 0)
    assert len(head) == 10
    assert scan.remaining == 100 * 100 - 10


def test_root_transform_places_the_scan():
    points = list(HilbertScanCore(4, 3, transform=translate(10, 20)))
    assert points == [(x + 10, y + 20) for x, y in HilbertScanCore(4, 3)]


@pytest.mark.parametrize("width, height", [(2, 2), (64, 64), (11, 42), (1000, 3), (1, 513), (255, 257)])
def test_stack_depth_is_logarithmic(width, height):
    scan = HilbertScanCore(width, height)
    for _ in scan:
        assert scan.depth <= scan.max_depth
    assert scan.depth == 0
    assert scan.max_depth <= 1 + math.log(width * height, 1.5) + 1e-9
