"""Core primitives shared by every generator algorithm."""

from mixrand.core.bits import MASK32, MASK64, to_int32, to_int64
from mixrand.core.entropy import global_random, next_entropy, reset_global_random
from mixrand.core.randomness import Randomness

__all__ = [
    # bits
    "MASK32",
    "MASK64",
    "to_int32",
    "to_int64",
    # entropy
    "global_random",
    "next_entropy",
    "reset_global_random",
    # randomness
    "Randomness",
]
