"""Concrete ``Randomness`` algorithms and a name-based registry."""

from __future__ import annotations

from typing import Sequence

from mixrand.algorithms.herd import HerdRandomness
from mixrand.algorithms.rush import RushRandomness
from mixrand.algorithms.splitmix import SplitMixRandomness
from mixrand.core.randomness import Randomness

ALGORITHMS: dict[str, type[Randomness]] = {
    "splitmix": SplitMixRandomness,
    "rush": RushRandomness,
    "herd": HerdRandomness,
}


def algorithm_name(rand: Randomness) -> str:
    """Return the registry name of *rand*'s algorithm."""
    for name, cls in ALGORITHMS.items():
        if type(rand) is cls:
            return name
    raise ValueError(
        f"Unregistered algorithm: {type(rand).__name__}. "
        f"Known algorithms: {list(ALGORITHMS.keys())}"
    )


def create_randomness(name: str, seed: int | Sequence[int] | None = None) -> Randomness:
    """Instantiate the algorithm registered as *name*.

    Raises
    ------
    ValueError
        If *name* is unknown, or a sequence seed is given to an algorithm
        that only accepts a single integer.
    """
    try:
        cls = ALGORITHMS[name]
    except KeyError:
        raise ValueError(
            f"Unknown algorithm: {name!r}. "
            f"Known algorithms: {list(ALGORITHMS.keys())}"
        ) from None
    if seed is not None and not isinstance(seed, int) and cls is not HerdRandomness:
        raise ValueError(f"Algorithm {name!r} only accepts a single integer seed")
    return cls(seed)


__all__ = [
    "ALGORITHMS",
    "HerdRandomness",
    "RushRandomness",
    "SplitMixRandomness",
    "algorithm_name",
    "create_randomness",
]
