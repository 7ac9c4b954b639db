"""Base numeric helpers operating on 64-bit floats."""

import math

from .prng import RandomSource

INT64_MAX = (1 << 63) - 1
INT64_MIN = -(1 << 63)
_INT64_LIMIT = 9223372036854775808.0  # 2**63


def saturate_int64(value: float) -> int:
    """Truncate toward zero into the signed 64-bit range without raising."""
    if math.isnan(value):
        return 0
    if value >= _INT64_LIMIT:
        return INT64_MAX
    if value < -_INT64_LIMIT:
        return INT64_MIN
    return int(value)


def as_double(value: float) -> float:
    """Promote a real to a double; integers beyond the double range become infinite."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _remainder(value: float, modulus: float) -> float:
    # IEEE remainder with the sign of the dividend; edge cases yield NaN
    if modulus == 0.0 or math.isinf(value) or math.isnan(value) or math.isnan(modulus):
        return math.nan
    return math.fmod(value, modulus)


def modulo(value: float, modulus: float) -> float:
    """Euclidean-style modulo, non-negative whenever modulus > 0."""
    value = as_double(value)
    modulus = as_double(modulus)
    return _remainder(_remainder(value, modulus) + modulus, modulus)


def lower_bound(value: float, minimum: float) -> float:
    """Ensure the value is at least ``minimum``; returns the greater value."""
    value = as_double(value)
    minimum = as_double(minimum)
    if math.isnan(value) or math.isnan(minimum):
        return math.nan
    return max(minimum, value)


def upper_bound(value: float, maximum: float) -> float:
    """Ensure the value is at most ``maximum``; returns the smaller value."""
    value = as_double(value)
    maximum = as_double(maximum)
    if math.isnan(value) or math.isnan(maximum):
        return math.nan
    return min(maximum, value)


def between(value: float, minimum: float, maximum: float) -> float:
    """Bound the value into ``[minimum, maximum]``.

    The lower bound is applied first, so an inverted range (minimum > maximum)
    always returns ``maximum``.
    """
    return upper_bound(lower_bound(value, minimum), maximum)


def floor(value: float) -> int:
    """Round down to a signed 64-bit integer."""
    value = as_double(value)
    if math.isfinite(value):
        return saturate_int64(math.floor(value))
    return saturate_int64(value)


def ceiling(value: float) -> int:
    """Round up to a signed 64-bit integer."""
    value = as_double(value)
    if math.isfinite(value):
        return saturate_int64(math.ceil(value))
    return saturate_int64(value)


def random_true(probability: float, rng: RandomSource) -> bool:
    """Return True with the given probability, consuming one draw from ``rng``."""
    return rng.random() < probability


def round_random(value: float, rng: RandomSource) -> int:
    """Return floor or ceiling at random, weighted by the fractional part.

    3.8 becomes 4 with 80% probability and 3 with 20% probability, so the
    expected value over many draws equals the input.
    """
    return floor(value) + (1 if random_true(modulo(value, 1.0), rng) else 0)
