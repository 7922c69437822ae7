"""Pydantic v2 models for generator quality checks.

All are serializable to/from JSON so survey results can be stored next
to the configs that produced them.
"""

from __future__ import annotations

from pydantic import BaseModel


class UniformityResult(BaseModel):
    """Chi-square goodness-of-fit of bounded draws against a uniform distribution."""

    generator: str
    """Label of the generator under test (e.g. ``'splitmix'``)."""
    bound: int
    """Exclusive upper bound passed to ``next_bounded_long``."""
    draws: int
    statistic: float
    """Pearson chi-square statistic over the ``bound`` buckets."""
    p_value: float
    degrees_of_freedom: int
    critical_value: float
    """Upper ``alpha`` quantile of the chi-square distribution."""
    alpha: float
    passed: bool
    """True when ``statistic <= critical_value``."""


class UniformitySurvey(BaseModel):
    """Uniformity results for several generators and bounds."""

    draws: int
    alpha: float
    results: list[UniformityResult]

    @property
    def all_passed(self) -> bool:
        return all(r.passed for r in self.results)
