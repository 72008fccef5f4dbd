"""Scalar helper tests."""

import math

import pytest

from sketchkit.num import (
    clamp,
    cos_range,
    difference,
    equalish,
    lerp,
    lerp_sin,
    map_range,
    normalize,
    round_to,
    round_to_nearest,
    sin_range,
    wrap,
)


def test_lerp_and_normalize_are_inverse():
    assert lerp(10, 20, 0.25) == 12.5
    assert normalize(12.5, 10, 20) == 0.25
    assert lerp(0, 10, 1.5) == 15


def test_map_range_round_trip():
    for v in (-3.0, -1.2, 0.0, 2.5, 7.0):
        there = map_range(v, -3, 7, 100, 400)
        assert map_range(there, 100, 400, -3, 7) == pytest.approx(v)


def test_normalize_empty_range_propagates_ieee_values():
    assert normalize(5, 2, 2) == math.inf
    assert normalize(1, 2, 2) == -math.inf
    assert math.isnan(normalize(2, 2, 2))
    assert math.isnan(map_range(2, 2, 2, 0, 1))


def test_clamp():
    assert clamp(150, 0, 100) == 100
    assert clamp(-5, 0, 100) == 0
    assert clamp(42, 0, 100) == 42


def test_wrap():
    assert wrap(370, 0, 360) == 10
    assert wrap(-10, 0, 360) == 350
    assert wrap(360, 0, 360) == 0
    assert wrap(5, 10, 20) == 15
    assert math.isnan(wrap(5, 2, 2))


def test_rounding_goes_half_up():
    assert round_to(2.345, 1) == pytest.approx(2.3)
    assert round_to(0.5, 0) == 1
    assert round_to(2.5, 0) == 3
    assert round_to_nearest(17, 5) == 15
    assert round_to_nearest(17.5, 5) == 20


def test_trig_ranges():
    assert sin_range(math.pi / 2, 10, 20) == pytest.approx(20)
    assert cos_range(math.pi, 10, 20) == pytest.approx(10)
    assert lerp_sin(0.0, 50, -50) == pytest.approx(0)
    assert lerp_sin(0.25, 50, -50) == pytest.approx(50)


def test_difference_and_equalish():
    assert difference(3, 8) == 5
    assert equalish(1.0, 1.0005, 0.001)
    assert not equalish(1.0, 1.01, 0.001)
