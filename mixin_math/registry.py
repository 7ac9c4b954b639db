"""Lookup table from (operation name, width) to the matching entry point."""

from typing import Dict, Tuple

from . import core, widths
from .models import OperationSpec, Width

_ARITY = {
    "modulo": 2,
    "lower_bound": 2,
    "upper_bound": 2,
    "between": 3,
    "floor": 1,
    "ceiling": 1,
    "random_true": 1,
    "round_random": 1,
}
RANDOM_OPERATIONS = frozenset({"random_true", "round_random"})


def _build() -> Dict[Tuple[str, Width], OperationSpec]:
    table: Dict[Tuple[str, Width], OperationSpec] = {}
    for name, arity in _ARITY.items():
        candidates = {
            Width.F64: getattr(core, name),
            Width.F32: getattr(widths, f"{name}_f32", None),
            Width.I64: getattr(widths, f"{name}_i64", None),
            Width.I32: getattr(widths, f"{name}_i32", None),
        }
        for width, func in candidates.items():
            if func is None:
                continue
            table[(name, width)] = OperationSpec(
                name=name,
                width=width,
                func=func,
                arity=arity,
                uses_random=name in RANDOM_OPERATIONS,
            )
    return table


OPERATIONS = _build()


def operation_names() -> Tuple[str, ...]:
    return tuple(_ARITY)


def lookup(name: str, width: Width = Width.F64) -> OperationSpec:
    """Return the entry point for ``name`` at ``width``; KeyError when absent."""
    try:
        return OPERATIONS[(name, Width(width))]
    except (KeyError, ValueError):
        label = getattr(width, "value", width)
        raise KeyError(f"No {label} form of '{name}'") from None
