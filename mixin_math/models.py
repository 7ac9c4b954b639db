
from dataclasses import dataclass
from enum import Enum
from typing import Callable


class Width(str, Enum):
    F64 = "f64"
    F32 = "f32"
    I64 = "i64"
    I32 = "i32"

    @property
    def is_integer(self) -> bool:
        return self in (Width.I64, Width.I32)


@dataclass(frozen=True)
class OperationSpec:
    name: str
    width: Width
    func: Callable
    arity: int
    uses_random: bool = False
