"""State module - seeded RNG."""

from .rng import XorShift128, SeededRandom, SequenceRng, RelicRng, seed_to_long, long_to_seed

__all__ = ["XorShift128", "SeededRandom", "SequenceRng", "RelicRng", "seed_to_long", "long_to_seed"]
