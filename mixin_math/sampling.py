"""Seeded sampling harness for stochastic rounding."""

from collections import Counter
from dataclasses import asdict, dataclass
from typing import Any, Dict

from .core import floor, round_random
from .models import Width
from .prng import PCG32
from .widths import round_random_f32, to_float32


@dataclass
class SampleConfig:
    """Configuration for a reproducible round_random sample."""

    seed: int = 0xA2B94D10
    draws: int = 100_000
    value: float = 3.8
    width: Width = Width.F64


def run_round_random_sample(cfg: SampleConfig) -> Dict[str, Any]:
    """Draw ``cfg.draws`` stochastic roundings of ``cfg.value`` from a seeded PCG32."""

    width = Width(cfg.width)
    if width is Width.F32:
        draw = round_random_f32
        expected = to_float32(cfg.value)
    elif width is Width.F64:
        draw = round_random
        expected = float(cfg.value)
    else:
        raise ValueError(f"round_random has no {width.value} form")

    rng = PCG32.seeded(cfg.seed)
    counts: Counter = Counter()
    for _ in range(max(0, cfg.draws)):
        counts[draw(cfg.value, rng)] += 1

    total = sum(counts.values())
    mean = sum(k * n for k, n in counts.items()) / total if total else 0.0
    upper = floor(expected) + 1
    upper_frequency = counts.get(upper, 0) / total if total else 0.0

    config = asdict(cfg)
    config["width"] = width.value
    return {
        "config": config,
        "counts": {str(k): counts[k] for k in sorted(counts)},
        "mean": round(mean, 6),
        "expected": expected,
        "upper_frequency": round(upper_frequency, 6),
    }
