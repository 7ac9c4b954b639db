"""Public package surface for the mixin_math numeric helpers."""

from .core import (
    INT64_MAX,
    INT64_MIN,
    between,
    ceiling,
    floor,
    lower_bound,
    modulo,
    random_true,
    round_random,
    upper_bound,
)
from .models import OperationSpec, Width
from .prng import PCG32, RandomSource
from .registry import lookup
from .sampling import SampleConfig, run_round_random_sample
from .widths import (
    between_f32,
    between_i32,
    between_i64,
    ceiling_f32,
    floor_f32,
    lower_bound_f32,
    lower_bound_i32,
    lower_bound_i64,
    modulo_f32,
    modulo_i32,
    modulo_i64,
    random_true_f32,
    round_random_f32,
    to_float32,
    upper_bound_f32,
    upper_bound_i32,
    upper_bound_i64,
)

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "OperationSpec",
    "PCG32",
    "RandomSource",
    "SampleConfig",
    "Width",
    "between",
    "between_f32",
    "between_i32",
    "between_i64",
    "ceiling",
    "ceiling_f32",
    "floor",
    "floor_f32",
    "lookup",
    "lower_bound",
    "lower_bound_f32",
    "lower_bound_i32",
    "lower_bound_i64",
    "modulo",
    "modulo_f32",
    "modulo_i32",
    "modulo_i64",
    "random_true",
    "random_true_f32",
    "round_random",
    "round_random_f32",
    "run_round_random_sample",
    "to_float32",
    "upper_bound",
    "upper_bound_f32",
    "upper_bound_i32",
    "upper_bound_i64",
]
