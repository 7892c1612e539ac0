import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from brokit.literal_cost import (
    estimate_bit_costs_for_literals,
    estimate_bit_costs_for_literals_utf8,
    utf8_position,
)


@pytest.mark.parametrize(
    "last, c, clamp, expected",
    [
        (0, 65, 2, 0),
        (0, 0xC3, 2, 1),
        (0, 0xC3, 0, 0),
        (0xC3, 0xA9, 2, 0),
        (0xE2, 0x82, 2, 2),
        (0xE2, 0x82, 1, 1),
    ],
)
def test_utf8_position(last, c, clamp, expected):
    assert utf8_position(last, c, clamp) == expected


def test_empty_input_gives_no_costs():
    assert estimate_bit_costs_for_literals(b"") == []
    assert estimate_bit_costs_for_literals_utf8(b"") == []


def test_uniform_data_has_equal_cheap_costs():
    costs = estimate_bit_costs_for_literals(b"a" * 300)
    assert len(costs) == 300
    assert all(cost == costs[0] for cost in costs)
    assert costs[0] == pytest.approx(0.5145)


def test_rare_byte_costs_more_than_common_byte():
    data = b"a" * 500 + b"z" + b"a" * 500
    costs = estimate_bit_costs_for_literals(data)
    assert costs[500] > costs[0]
    assert costs[500] > costs[1000]


def test_costs_cover_requested_range_only():
    data = bytes(range(100))
    costs = estimate_bit_costs_for_literals(data, pos=10, length=20)
    assert len(costs) == 20


def test_masked_ring_matches_rotated_data():
    rng = random.Random(7)
    data = bytes(rng.randrange(256) for _ in range(8))
    rotated = data[6:] + data[:6]
    ring = estimate_bit_costs_for_literals(data, pos=6, length=8, mask=7)
    flat = estimate_bit_costs_for_literals(rotated)
    assert ring == flat
    ring8 = estimate_bit_costs_for_literals_utf8(data, pos=6, length=8, mask=7)
    assert ring8 == estimate_bit_costs_for_literals_utf8(rotated)


def test_range_beyond_data_rejected():
    with pytest.raises(ValueError):
        estimate_bit_costs_for_literals(b"abc", pos=2, length=5)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        estimate_bit_costs_for_literals_utf8(b"abc", length=-1)


def test_utf8_prefix_penalty_rises_then_drops():
    costs = estimate_bit_costs_for_literals_utf8(b"a" * 2100)
    assert costs[0] < costs[1000] < costs[1999]
    assert costs[2000] < costs[1999]


def test_utf8_text_costs_positive():
    text = ("héllo wörld ünïcode " * 50).encode("utf-8")
    costs = estimate_bit_costs_for_literals_utf8(text)
    assert len(costs) == len(text)
    assert all(cost >= 0.5 for cost in costs)


@settings(max_examples=30)
@given(st.binary(min_size=1, max_size=300))
def test_costs_are_at_least_half_a_bit(data):
    costs = estimate_bit_costs_for_literals(data)
    assert len(costs) == len(data)
    assert min(costs) >= 0.5