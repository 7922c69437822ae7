"""Pydantic v2 configuration for building generators.

A ``GeneratorConfig`` names an algorithm and an optional seed, and
``build()`` turns it into a ready ``RNG``.  Configs are plain JSON, so a
simulation can record exactly how its generators were set up.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, model_validator

from mixrand.algorithms import create_randomness
from mixrand.herd_rng import HerdRNG
from mixrand.rng import RNG

AlgorithmName = Literal["splitmix", "rush", "herd", "herd_fast"]


class GeneratorConfig(BaseModel):
    """How to construct one generator."""

    algorithm: AlgorithmName = "splitmix"
    """Registry name; ``"herd_fast"`` builds the fused ``HerdRNG``."""
    seed: int | list[int] | None = None
    """``None`` seeds from entropy.  Lists are only valid for Herd."""

    @model_validator(mode="after")
    def _validate_seed_form(self) -> GeneratorConfig:
        if isinstance(self.seed, list) and self.algorithm not in ("herd", "herd_fast"):
            raise ValueError(
                f"Algorithm {self.algorithm!r} takes a single integer seed, not a list"
            )
        return self

    def build(self) -> RNG:
        """Construct the configured generator."""
        if self.algorithm == "herd_fast":
            return HerdRNG(self.seed)
        return RNG(create_randomness(self.algorithm, self.seed))
