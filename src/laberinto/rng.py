# src/laberinto/rng.py
# Seeded randomness shared by the carver, the wall augmenter and the target picker.

from dataclasses import dataclass
from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")

MASK32 = 0xFFFFFFFF

# FNV-1a (32-bit) constants
FNV_OFFSET = 0x811C9DC5
FNV_PRIME = 0x01000193

# Mulberry32 increment
GOLDEN = 0x6D2B79F5

# Stream discriminators. Carving hashes the bare seed.
WALLS_XOR = 0x1234ABCD
TARGETS_STREAM = "targets"
ACTIVE_STREAM = "active"


def fnv1a32(data: bytes) -> int:
    h = FNV_OFFSET
    for b in data:
        h = ((h ^ b) * FNV_PRIME) & MASK32
    return h

def seed_to_state(seed: str) -> int:
    """Hash a seed string (UTF-8) to a 32-bit generator state. Any string is valid."""
    return fnv1a32(seed.encode("utf-8"))

def derive_seed(seed: str, stream: str) -> str:
    # "aula1" + "targets" -> "aula1|targets"
    return f"{seed}|{stream}"

def _imul(a: int, b: int) -> int:
    return (a * b) & MASK32

@dataclass
class Mulberry32:
    state: int

    def __post_init__(self) -> None:
        self.state &= MASK32

    def next32(self) -> int:
        self.state = (self.state + GOLDEN) & MASK32
        t = self.state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK32
        return (t ^ (t >> 14)) & MASK32

    def random(self) -> float:
        """Next float in [0, 1)."""
        return self.next32() / 4294967296

    def index(self, n: int) -> int:
        """Uniform index in 0..n-1, i.e. floor(random() * n)."""
        assert n > 0
        return int(self.random() * n)

def make_rng(state: int) -> Callable[[], float]:
    """Return a generator function; each call advances its own private state."""
    return Mulberry32(state).random

def shuffle_with(items: Sequence[T], rng: Mulberry32) -> List[T]:
    """Fisher-Yates from the last index down to 1. Returns a new list."""
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = rng.index(i + 1)
        out[i], out[j] = out[j], out[i]
    return out

def seeded_shuffle(items: Sequence[T], seed: str) -> List[T]:
    return shuffle_with(items, Mulberry32(seed_to_state(seed)))

def walls_rng(seed: str) -> Mulberry32:
    return Mulberry32(seed_to_state(seed) ^ WALLS_XOR)
