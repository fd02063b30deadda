"""
Seeded RNG for relic selection and other sim-side rolls.

The selection engine never owns randomness: callers inject any object with a
next_float() method returning values in [0, 1). This module provides the
deterministic implementation used by the simulation, the CLI and the tests:

- XorShift128: xorshift128+ generator (two 64-bit words of state,
  murmur3-scrambled seed), reproducible across platforms
- SeededRandom: counter-tracking wrapper exposing next_float / next_int / pick_n
- SequenceRng: replays a fixed list of floats (replays and edge-case tests)
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, TypeVar, Protocol

T = TypeVar("T")

MASK_64 = 0xFFFFFFFFFFFFFFFF


class RelicRng(Protocol):
    """Randomness capability consumed by the relic sampler."""

    def next_float(self) -> float:
        """Uniform float in [0, 1)."""
        ...


class XorShift128:
    """
    XorShift128+ PRNG.

    State is two 64-bit integers (seed0, seed1).
    """

    def __init__(self, seed: int, seed1: Optional[int] = None):
        """
        Initialize with a 64-bit seed or explicit (seed0, seed1) state.

        Args:
            seed: Either the initial seed (if seed1 is None) or seed0 state
            seed1: If provided, use (seed, seed1) as direct state values
        """
        if seed1 is not None:
            # Two-argument form: set state directly (used by copy())
            self.seed0 = seed & MASK_64
            self.seed1 = seed1 & MASK_64
        else:
            # An all-zero state would only ever produce zeros
            if seed == 0:
                seed = -0x8000000000000000
            self.seed0 = self._murmur_hash3(seed)
            self.seed1 = self._murmur_hash3(self.seed0)

    @staticmethod
    def _murmur_hash3(x: int) -> int:
        """MurmurHash3 finalizer - used for seed initialization."""
        x = x & MASK_64
        x ^= x >> 33
        x = (x * 0xff51afd7ed558ccd) & MASK_64
        x ^= x >> 33
        x = (x * 0xc4ceb9fe1a85ec53) & MASK_64
        x ^= x >> 33
        return x

    def next_long(self) -> int:
        """Next unsigned 64-bit value."""
        s1 = self.seed0
        s0 = self.seed1
        self.seed0 = s0

        s1 ^= (s1 << 23) & MASK_64
        self.seed1 = (s1 ^ s0 ^ (s1 >> 17) ^ (s0 >> 26)) & MASK_64

        return (self.seed0 + self.seed1) & MASK_64

    def next_int(self, bound: int) -> int:
        """Random int in [0, bound)."""
        if bound <= 0:
            raise ValueError("bound must be positive")

        # Rejection sampling over 63-bit values to avoid modulo bias
        limit = (1 << 63) - ((1 << 63) % bound)
        while True:
            bits = self.next_long() >> 1
            if bits < limit:
                return bits % bound

    def next_float(self) -> float:
        """Random float in [0, 1) with 24 bits of precision."""
        return (self.next_long() >> 40) / (1 << 24)

    def next_double(self) -> float:
        """Random double in [0, 1) with 53 bits of precision."""
        return (self.next_long() >> 11) / (1 << 53)

    def next_boolean(self) -> bool:
        return (self.next_long() & 1) != 0

    def get_state(self, index: int) -> int:
        """Get state value (0 = seed0, 1 = seed1)."""
        if index == 0:
            return self.seed0
        return self.seed1

    def copy(self) -> 'XorShift128':
        return XorShift128(self.seed0, self.seed1)


class SeededRandom:
    """
    Seeded random source for the sim.

    Tracks how many values were consumed so a run can be restored by
    re-creating the source with the same seed and counter.
    """

    def __init__(self, seed: int, counter: int = 0):
        """
        Args:
            seed: 64-bit seed value
            counter: Number of calls to skip (for restoring a saved run)
        """
        self.seed = seed
        self._rng = XorShift128(seed)
        self.counter = 0

        for _ in range(counter):
            self.next_float()

    def next_float(self) -> float:
        """Random float in [0, 1)."""
        self.counter += 1
        return self._rng.next_float()

    def next_int(self, min_val: int, max_val: int) -> int:
        """Random int in [min_val, max_val] INCLUSIVE."""
        self.counter += 1
        return min_val + self._rng.next_int(max_val - min_val + 1)

    def pick_n(self, items: Sequence[T], n: int) -> List[T]:
        """
        Pick n distinct items (by position) in random order.

        Partial Fisher-Yates over a copy; the input is left untouched.
        Returns every item, shuffled, when n >= len(items).
        """
        if n < 0:
            raise ValueError("n must be non-negative")
        pool = list(items)
        picks = min(n, len(pool))
        for i in range(picks):
            j = self.next_int(i, len(pool) - 1)
            pool[i], pool[j] = pool[j], pool[i]
        return pool[:picks]

    def copy(self) -> 'SeededRandom':
        new = SeededRandom.__new__(SeededRandom)
        new.seed = self.seed
        new._rng = self._rng.copy()
        new.counter = self.counter
        return new


@dataclass
class SequenceRng:
    """Replays a fixed sequence of floats, cycling when exhausted."""
    values: Sequence[float]
    position: int = 0

    def __post_init__(self):
        if not self.values:
            raise ValueError("SequenceRng needs at least one value")

    def next_float(self) -> float:
        value = self.values[self.position % len(self.values)]
        self.position += 1
        return value


SEED_CHARACTERS = "0123456789ABCDEFGHIJKLMNPQRSTUVWXYZ"


def seed_to_long(seed_string: str) -> int:
    """
    Convert a seed string (e.g., "ABC123XYZ") to its numeric value.

    Seeds use base-35 encoding: 0-9 + A-Z excluding O. O is read as 0.
    Purely numeric strings (including negative ones) are plain integers.
    """
    if seed_string.lstrip('-').isdigit():
        return int(seed_string)

    seed_string = seed_string.upper().replace("O", "0")

    result = 0
    for char in seed_string:
        remainder = SEED_CHARACTERS.find(char)
        if remainder == -1:
            continue  # Skip invalid characters
        result *= len(SEED_CHARACTERS)
        result += remainder

    return result


def long_to_seed(seed_long: int) -> str:
    """Convert a numeric seed back to its base-35 string."""
    if seed_long == 0:
        return "0"

    leftover = seed_long & MASK_64
    base = len(SEED_CHARACTERS)

    result = []
    while leftover != 0:
        leftover, remainder = divmod(leftover, base)
        result.append(SEED_CHARACTERS[remainder])

    return ''.join(reversed(result))
