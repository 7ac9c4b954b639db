
# PCG32 random source for reproducible draws (no external deps)
# Source: public domain style reference implementation, simplified
from dataclasses import dataclass
from typing import Protocol

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1
_MULTIPLIER = 6364136223846793005


class RandomSource(Protocol):
    """Anything that can draw the next uniform double in [0, 1)."""

    def random(self) -> float:
        ...


@dataclass
class PCG32:
    state: int
    inc: int = 1442695040888963407  # default stream

    @classmethod
    def seeded(cls, seed: int, stream: int = 0xDA3E39CB94B95BDB) -> "PCG32":
        """Reference pcg32_srandom: mix the seed in through two steps."""
        rng = cls(state=0, inc=((stream << 1) | 1) & _MASK64)
        rng.next_u32()
        rng.state = (rng.state + seed) & _MASK64
        rng.next_u32()
        return rng

    def next_u32(self) -> int:
        oldstate = self.state & _MASK64
        self.state = (oldstate * _MULTIPLIER + (self.inc | 1)) & _MASK64
        xorshifted = (((oldstate >> 18) ^ oldstate) >> 27) & _MASK32
        rot = (oldstate >> 59) & 31
        return (xorshifted >> rot) | ((xorshifted << ((-rot) & 31)) & _MASK32)

    def random(self) -> float:
        # 27 high bits + 26 low bits -> 53-bit mantissa, never reaches 1.0
        high = self.next_u32() >> 5
        low = self.next_u32() >> 6
        return (high * 67108864 + low) / 9007199254740992.0

