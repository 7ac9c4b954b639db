"""Narrow-width forms of the numeric helpers.

Every entry point coerces its inputs to the declared width, promotes them to a
64-bit float, calls the base helper from :mod:`mixin_math.core` and narrows the
result back down. Integer forms of the bound/modulo family round to nearest
(half to even); floor and ceiling always truncate.
"""

import math
import struct

from . import core
from .prng import RandomSource


def to_float32(value: float) -> float:
    """Round to the nearest IEEE binary32 value, overflowing to infinity."""
    value = core.as_double(value)
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _wrap(value: int, bits: int) -> int:
    span = 1 << bits
    half = 1 << (bits - 1)
    return ((int(value) + half) % span) - half


def to_int64(value: int) -> int:
    """Two's-complement wrap into the signed 64-bit range."""
    return _wrap(value, 64)


def to_int32(value: int) -> int:
    """Two's-complement wrap into the signed 32-bit range."""
    return _wrap(value, 32)


def round_to_int64(value: float) -> int:
    """Round half to even, then saturate into the signed 64-bit range."""
    if math.isfinite(value):
        return core.saturate_int64(round(value))
    return core.saturate_int64(value)


# modulo


def modulo_f32(value: float, modulus: float) -> float:
    return to_float32(core.modulo(to_float32(value), to_float32(modulus)))


def modulo_i64(value: int, modulus: int) -> int:
    return round_to_int64(core.modulo(to_int64(value), to_int64(modulus)))


def modulo_i32(value: int, modulus: int) -> int:
    return to_int32(modulo_i64(to_int32(value), to_int32(modulus)))


# lower_bound


def lower_bound_f32(value: float, minimum: float) -> float:
    return to_float32(core.lower_bound(to_float32(value), to_float32(minimum)))


def lower_bound_i64(value: int, minimum: int) -> int:
    return round_to_int64(core.lower_bound(to_int64(value), to_int64(minimum)))


def lower_bound_i32(value: int, minimum: int) -> int:
    return to_int32(lower_bound_i64(to_int32(value), to_int32(minimum)))


# upper_bound


def upper_bound_f32(value: float, maximum: float) -> float:
    return to_float32(core.upper_bound(to_float32(value), to_float32(maximum)))


def upper_bound_i64(value: int, maximum: int) -> int:
    return round_to_int64(core.upper_bound(to_int64(value), to_int64(maximum)))


def upper_bound_i32(value: int, maximum: int) -> int:
    return to_int32(upper_bound_i64(to_int32(value), to_int32(maximum)))


# between


def between_f32(value: float, minimum: float, maximum: float) -> float:
    return to_float32(
        core.between(to_float32(value), to_float32(minimum), to_float32(maximum))
    )


def between_i64(value: int, minimum: float, maximum: int) -> int:
    """Integer clamp; ``minimum`` is a 32-bit float, as in the original overload."""
    return round_to_int64(
        core.between(to_int64(value), to_float32(minimum), to_int64(maximum))
    )


def between_i32(value: int, minimum: float, maximum: int) -> int:
    return to_int32(between_i64(to_int32(value), minimum, to_int32(maximum)))


# floor / ceiling / random


def floor_f32(value: float) -> int:
    return core.floor(to_float32(value))


def ceiling_f32(value: float) -> int:
    return core.ceiling(to_float32(value))


def random_true_f32(probability: float, rng: RandomSource) -> bool:
    return core.random_true(to_float32(probability), rng)


def round_random_f32(value: float, rng: RandomSource) -> int:
    return core.round_random(to_float32(value), rng)
