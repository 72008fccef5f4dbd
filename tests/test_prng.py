"""Determinism and distribution checks for the LCG stream."""

import math

import pytest

from sketchkit.models import Point
from sketchkit.prng import (
    INCREMENT,
    MODULUS,
    MULTIPLIER,
    LCG,
    EmptyChooserError,
    get_default_rng,
    set_default_seed,
)


def test_first_values_follow_lcg_recurrence():
    rng = LCG(0)
    first = rng.next_u32()
    second = rng.next_u32()

    assert first == INCREMENT
    assert second == (first * MULTIPLIER + INCREMENT) % MODULUS


def test_random_is_next_int_over_modulus():
    a = LCG(42)
    b = LCG(42)
    assert a.random() == b.next_u32() / 2**32


def test_identical_seeds_give_identical_streams():
    a = LCG(0xDEADBEEF)
    b = LCG(0xDEADBEEF)

    def drive(rng):
        return [
            rng.next_u32(),
            rng.random(),
            rng.float_below(10.0),
            rng.float_between(-5.0, 5.0),
            rng.int_below(7),
            rng.int_between(3, 9),
            rng.chance(0.3),
            rng.point(0, 0, 100, 50),
            rng.power(0, 10, 2.0),
            rng.average_of(0, 1, 4),
        ]

    assert drive(a) == drive(b)


def test_seed_wraps_to_32_bits():
    assert LCG(-1).state == MODULUS - 1
    assert LCG(MODULUS + 5).state == 5
    assert LCG(3.0).state == 3
    with pytest.raises(TypeError):
        LCG(1.5)
    with pytest.raises(TypeError):
        LCG("12")


def test_reseed_restarts_stream():
    rng = LCG(99)
    first = [rng.next_u32() for _ in range(3)]
    assert rng.seed(99) is rng
    assert [rng.next_u32() for _ in range(3)] == first


def test_default_clock_seed_is_in_range():
    assert 0 <= LCG().state < MODULUS


def test_ranges_hold_over_many_draws():
    rng = LCG(7)
    for _ in range(5000):
        f = rng.float_between(-3.0, 4.5)
        assert -3.0 <= f < 4.5
        i = rng.int_between(-2, 5)
        assert isinstance(i, int)
        assert -2 <= i < 5
        assert 0 <= rng.int_below(10) < 10
        assert 0.0 <= rng.random() < 1.0


def test_chance_frequency_converges():
    rng = LCG(12345)
    n = 100000
    p = 0.3
    hits = sum(rng.chance(p) for _ in range(n))
    sigma = math.sqrt(n * p * (1 - p))
    assert abs(hits - n * p) < 3 * sigma


def test_point_draws_x_then_y():
    rng = LCG(5)
    replay = LCG(5)
    p = rng.point(10, 20, 30, 40)
    assert p == Point(replay.float_between(10, 40), replay.float_between(20, 60))
    assert 10 <= p.x < 40 and 20 <= p.y < 60


def test_power_consumes_one_value():
    rng = LCG(11)
    replay = LCG(11)
    value = rng.power(2.0, 6.0, 3.0)
    assert value == 2.0 + replay.random() ** 3.0 * 4.0
    assert rng.state == replay.state


def test_power_bias():
    low = LCG(3)
    high = LCG(3)
    skew_low = sum(low.power(0, 1, 4.0) for _ in range(2000)) / 2000
    skew_high = sum(high.power(0, 1, 0.25) for _ in range(2000)) / 2000
    assert skew_low < 0.35
    assert skew_high > 0.65


def test_average_of_consumes_exactly_samples():
    rng = LCG(21)
    replay = LCG(21)
    value = rng.average_of(0.0, 10.0, 5)
    draws = [replay.float_between(0.0, 10.0) for _ in range(5)]
    assert value == pytest.approx(sum(draws) / 5)
    assert rng.state == replay.state
    with pytest.raises(ValueError):
        rng.average_of(0, 1, 0)


def test_batch_helpers_match_single_calls():
    rng = LCG(8)
    replay = LCG(8)
    assert rng.ints(4, 0, 10) == [replay.int_between(0, 10) for _ in range(4)]
    assert rng.floats(3, 1, 2) == [replay.float_between(1, 2) for _ in range(3)]
    assert rng.booleans(5, 0.7) == [replay.chance(0.7) for _ in range(5)]
    assert rng.points(2, 0, 0, 5, 5) == [replay.point(0, 0, 5, 5) for _ in range(2)]


def test_circle_radius_range():
    c = LCG(4).circle(0, 0, 100, 100, 5, 10)
    assert 0 <= c.x < 100 and 0 <= c.y < 100
    assert 5 <= c.r < 10


def test_chooser_respects_weights_and_order():
    rng = LCG(2024)
    chooser = rng.chooser().add_choice("rare", 1).add_choice("common", 9)
    counts = {"rare": 0, "common": 0}
    for _ in range(10000):
        counts[chooser.draw()] += 1
    assert 700 < counts["rare"] < 1300
    assert len(chooser) == 2
    assert chooser.total == 10


def test_chooser_first_interval_wins():
    rng = LCG(1)
    replay = LCG(1)
    chooser = rng.chooser().add_choice("a", 2.0).add_choice("b", 2.0)
    r = replay.float_between(0.0, 4.0)
    assert chooser.draw() == ("a" if r < 2.0 else "b")


def test_chooser_rejects_bad_weights_and_empty_draw():
    rng = LCG(1)
    chooser = rng.chooser()
    with pytest.raises(ValueError):
        chooser.add_choice("x", 0)
    with pytest.raises(ValueError):
        chooser.add_choice("x", -2)
    state = rng.state
    with pytest.raises(EmptyChooserError):
        chooser.draw()
    assert rng.state == state


def test_default_rng_is_shared_and_reseedable():
    set_default_seed(77)
    first = get_default_rng().next_u32()
    set_default_seed(77)
    assert get_default_rng() is get_default_rng()
    assert get_default_rng().next_u32() == first
