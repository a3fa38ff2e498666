from fractions import Fraction

import pytest

from tictacnet.jsonkit.diyfp import (
    K_ALPHA,
    K_GAMMA,
    DiyFp,
    compute_boundaries,
    get_cached_power_for_binary_exponent,
)


def _exact(x: DiyFp) -> Fraction:
    return Fraction(x.f) * Fraction(2) ** x.e


def test_sub_same_exponent():
    assert DiyFp(10, 3).sub(DiyFp(4, 3)) == DiyFp(6, 3)


def test_sub_rejects_different_exponents():
    with pytest.raises(ValueError):
        DiyFp(10, 3).sub(DiyFp(4, 2))


def test_sub_rejects_negative_result():
    with pytest.raises(ValueError):
        DiyFp(3, 0).sub(DiyFp(4, 0))


@pytest.mark.parametrize(
    "a,b",
    [
        ((1 << 63, 0), (1 << 63, 0)),
        ((0xFFFFFFFFFFFFFFFF, -5), (0xFFFFFFFFFFFFFFFF, 7)),
        ((0x9C40000000000000, -50), (0xD1B71758E219652C, -77)),
    ],
)
def test_mul_keeps_upper_bits_rounded(a, b):
    x, y = DiyFp(*a), DiyFp(*b)
    product = x.mul(y)
    assert product.e == x.e + y.e + 64
    exact = Fraction(x.f * y.f, 1 << 64)
    assert abs(Fraction(product.f) - exact) <= Fraction(1, 2)


def test_normalize_sets_top_bit_and_keeps_value():
    x = DiyFp(12345, -10)
    n = x.normalize()
    assert n.f >> 63 == 1
    assert _exact(n) == _exact(x)


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        DiyFp(0, 0).normalize()


def test_normalize_to_lower_exponent():
    x = DiyFp(1, 0)
    y = x.normalize_to(-3)
    assert y.e == -3
    assert _exact(y) == _exact(x)


def test_normalize_to_higher_exponent_raises():
    with pytest.raises(ValueError):
        DiyFp(1, 0).normalize_to(2)


def test_normalize_to_overflow_raises():
    with pytest.raises(ValueError):
        DiyFp(1 << 63, 0).normalize_to(-1)


@pytest.mark.parametrize("value", [1.0, 1.5, 0.1, 123456.789, 5e-324, 1.7976931348623157e308])
def test_boundaries_bracket_value(value):
    b = compute_boundaries(value)
    assert _exact(b.w) == Fraction(value)
    assert b.w.f >> 63 == 1
    assert b.plus.e == b.minus.e
    assert _exact(b.minus) < Fraction(value) < _exact(b.plus)


def test_boundaries_closer_below_power_of_two():
    b = compute_boundaries(1.0)
    below = Fraction(1) - _exact(b.minus)
    above = _exact(b.plus) - Fraction(1)
    assert above == 2 * below


def test_boundaries_symmetric_otherwise():
    b = compute_boundaries(1.5)
    below = Fraction(3, 2) - _exact(b.minus)
    above = _exact(b.plus) - Fraction(3, 2)
    assert above == below


@pytest.mark.parametrize("value", [0.0, -1.0, float("inf"), float("nan")])
def test_boundaries_reject_bad_values(value):
    with pytest.raises(ValueError):
        compute_boundaries(value)


@pytest.mark.parametrize("e", list(range(-1137, 961, 37)) + [-1137, 960])
def test_cached_power_puts_exponent_in_range(e):
    cached = get_cached_power_for_binary_exponent(e)
    assert K_ALPHA <= cached.e + e + 64 <= K_GAMMA


@pytest.mark.parametrize("e", [-1137, -500, -63, 0, 200, 960])
def test_cached_power_approximates_power_of_ten(e):
    cached = get_cached_power_for_binary_exponent(e)
    approx = Fraction(cached.f) * Fraction(2) ** cached.e
    ratio = approx / Fraction(10) ** cached.k
    assert abs(ratio - 1) < Fraction(1, 1 << 62)


def test_cached_power_table_entry_from_source():
    cached = get_cached_power_for_binary_exponent(-63)
    assert (cached.f, cached.e, cached.k) == (0x9C40000000000000, -50, 4)


@pytest.mark.parametrize("e", [-1501, 1501])
def test_cached_power_rejects_out_of_range(e):
    with pytest.raises(ValueError):
        get_cached_power_for_binary_exponent(e)