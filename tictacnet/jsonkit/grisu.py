"""Grisu2 generation of the shortest decimal digits for a double."""

from __future__ import annotations

import math

from .diyfp import (
    K_ALPHA,
    K_GAMMA,
    DiyFp,
    compute_boundaries,
    get_cached_power_for_binary_exponent,
)

__all__ = ["find_largest_pow10", "grisu2_round", "grisu2_digit_gen", "grisu2"]

_POWERS_OF_TEN = tuple(10**i for i in range(9, -1, -1))


def find_largest_pow10(n: int) -> tuple[int, int]:
    """Return ``(k, pow10)`` with ``pow10 = 10**(k-1) <= n < 10**k``.

    For ``n == 0`` the result is ``(1, 1)``.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for power in _POWERS_OF_TEN:
        if n >= power:
            return len(str(power)), power
    return 1, 1


def grisu2_round(digits: str, dist: int, delta: int, rest: int, ten_k: int) -> str:
    """Decrement the last digit while that brings the number closer to w."""
    if not digits:
        raise ValueError("no digits to round")
    if ten_k <= 0:
        raise ValueError("ten_k must be positive")
    if dist > delta or rest > delta:
        raise ValueError("dist and rest must not exceed delta")

    last = int(digits[-1])
    while (
        rest < dist
        and delta - rest >= ten_k
        and (rest + ten_k < dist or dist - rest > rest + ten_k - dist)
    ):
        if last == 0:
            raise ValueError("cannot decrement digit 0")
        last -= 1
        rest += ten_k
    return digits[:-1] + str(last)


def grisu2_digit_gen(m_minus: DiyFp, w: DiyFp, m_plus: DiyFp) -> tuple[str, int]:
    """Generate digits V with ``m_minus <= V <= m_plus``.

    Returns the digits and the power of ten they are to be scaled by.
    The three numbers must share an exponent in [K_ALPHA, K_GAMMA].
    """
    if not K_ALPHA <= m_plus.e <= K_GAMMA:
        raise ValueError("exponent outside the supported range")

    delta = m_plus.sub(m_minus).f
    dist = m_plus.sub(w).f

    shift = -m_plus.e
    one_f = 1 << shift

    p1 = m_plus.f >> shift
    p2 = m_plus.f & (one_f - 1)
    if p1 <= 0:
        raise ValueError("integral part must be positive")

    digits: list[str] = []
    k, pow10 = find_largest_pow10(p1)

    n = k
    while n > 0:
        d, p1 = divmod(p1, pow10)
        digits.append(str(d))
        n -= 1
        rest = (p1 << shift) + p2
        if rest <= delta:
            ten_n = pow10 << shift
            return grisu2_round("".join(digits), dist, delta, rest, ten_n), n
        pow10 //= 10

    m = 0
    while True:
        p2 *= 10
        d = p2 >> shift
        p2 &= one_f - 1
        digits.append(str(d))
        m += 1
        delta *= 10
        dist *= 10
        if p2 <= delta:
            break

    return grisu2_round("".join(digits), dist, delta, p2, one_f), -m


def grisu2(value: float) -> tuple[str, int]:
    """Return ``(digits, exponent)`` with ``value == int(digits) * 10**exponent``.

    The value must be finite and positive; the digits read back to it exactly.
    """
    if not math.isfinite(value) or value <= 0:
        raise ValueError("value must be finite and positive")

    bounds = compute_boundaries(value)
    cached = get_cached_power_for_binary_exponent(bounds.plus.e)
    c_minus_k = DiyFp(cached.f, cached.e)

    w = bounds.w.mul(c_minus_k)
    w_minus = bounds.minus.mul(c_minus_k)
    w_plus = bounds.plus.mul(c_minus_k)

    lower = DiyFp(w_minus.f + 1, w_minus.e)
    upper = DiyFp(w_plus.f - 1, w_plus.e)

    digits, adjust = grisu2_digit_gen(lower, w, upper)
    return digits, -cached.k + adjust