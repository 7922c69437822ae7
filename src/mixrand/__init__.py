"""mixrand: fast, reproducible pseudo-random number generators.

Pick an algorithm (``SplitMixRandomness``, ``RushRandomness``,
``HerdRandomness``), wrap it in an ``RNG`` for bounded integers, doubles
and bytes, or use ``HerdRNG`` for the fused fast path.  None of these are
suitable for cryptography.
"""

from mixrand.adapter import RandomAdapter
from mixrand.algorithms import (
    ALGORITHMS,
    HerdRandomness,
    RushRandomness,
    SplitMixRandomness,
    algorithm_name,
    create_randomness,
)
from mixrand.config import GeneratorConfig
from mixrand.core.randomness import Randomness
from mixrand.herd_rng import HerdRNG
from mixrand.rng import RNG
from mixrand.snapshots import SnapshotRecord, load_snapshot, save_snapshot

__all__ = [
    # capability
    "Randomness",
    # algorithms
    "ALGORITHMS",
    "HerdRandomness",
    "RushRandomness",
    "SplitMixRandomness",
    "algorithm_name",
    "create_randomness",
    # facades
    "RNG",
    "HerdRNG",
    "RandomAdapter",
    # config and persistence
    "GeneratorConfig",
    "SnapshotRecord",
    "load_snapshot",
    "save_snapshot",
]
