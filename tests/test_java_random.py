from __future__ import annotations

import pytest

from wither_room_finder.java_random import JavaRandom


def test_next_int_matches_jvm_sequence() -> None:
    rand = JavaRandom(42)

    assert [rand.next_int() for _ in range(5)] == [-1170105035, 234785527, -1360544799, 205897768, 1325939940]


def test_zero_seed_first_int() -> None:
    assert JavaRandom(0).next_int() == -1155484576


def test_bounded_int_matches_jvm_sequence() -> None:
    rand = JavaRandom(42)

    assert [rand.next_int(10) for _ in range(5)] == [0, 3, 8, 4, 0]


def test_bounded_int_uses_top_31_bits() -> None:
    raw = JavaRandom(42)
    bounded = JavaRandom(42)

    for _ in range(200):
        expected = (raw.next_int() & 0xFFFFFFFF) >> 1
        assert bounded.next_int(5) == expected % 5


def test_next_double_matches_jvm() -> None:
    assert JavaRandom(42).next_double() == pytest.approx(0.7275636800328681, abs=1e-15)
    assert JavaRandom(0).next_double() == pytest.approx(0.730967787376657, abs=1e-15)


def test_next_double_consumes_two_draws() -> None:
    rand = JavaRandom(42)
    rand.next_double()

    assert rand.next_int() == -1360544799


def test_power_of_two_bound_takes_high_bits() -> None:
    raw = JavaRandom(7)
    bounded = JavaRandom(7)

    for _ in range(50):
        assert bounded.next_int(16) == ((raw.next_int() & 0xFFFFFFFF) >> 1) >> 27


def test_set_seed_restarts_sequence() -> None:
    rand = JavaRandom(42)
    first = [rand.next_int(5) for _ in range(20)]
    rand.set_seed(42)

    assert [rand.next_int(5) for _ in range(20)] == first


def test_next_long_combines_two_ints() -> None:
    ints = JavaRandom(42)
    high, low = ints.next_int(), ints.next_int()

    assert JavaRandom(42).next_long() == (high << 32) + low


def test_negative_seed_is_accepted() -> None:
    rand = JavaRandom(-4844229663448342016)

    assert 0 <= rand.next_double() < 1


@pytest.mark.parametrize("bound", [0, -5])
def test_non_positive_bound_rejected(bound: int) -> None:
    with pytest.raises(ValueError):
        JavaRandom(1).next_int(bound)


def test_float_and_boolean_use_high_bits() -> None:
    raw = JavaRandom(42)
    first, second = raw.next_int() & 0xFFFFFFFF, raw.next_int() & 0xFFFFFFFF
    rand = JavaRandom(42)

    assert rand.next_float() == (first >> 8) / (1 << 24)
    assert rand.next_boolean() is bool(second >> 31)
    assert JavaRandom(42).next_boolean() is True
