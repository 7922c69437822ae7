"""Chi-square uniformity checks for bounded draws.

These are sanity checks, not a statistical test battery: they catch a
broken derivation (an off-by-one bound, a biased mask) rather than
subtle weaknesses of an algorithm.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

import numpy as np
from scipy import stats

from mixrand.quality.models import UniformityResult, UniformitySurvey
from mixrand.rng import RNG

logger = logging.getLogger(__name__)


def chi_square_critical_value(degrees_of_freedom: int, alpha: float) -> float:
    """Return the upper *alpha* quantile of a chi-square distribution."""
    return float(stats.chi2.ppf(1.0 - alpha, degrees_of_freedom))


def chi_square_uniformity(
    rng: RNG,
    bound: int,
    draws: int = 100_000,
    alpha: float = 0.001,
    generator: str = "rng",
) -> UniformityResult:
    """Check that ``rng.next_bounded_long(bound)`` looks uniform.

    Parameters
    ----------
    rng:
        Generator to sample; it is advanced by at least *draws* draws.
    bound:
        Exclusive upper bound, at least 2.
    draws:
        Number of samples.
    alpha:
        Significance level; the check fails when the statistic exceeds
        the ``1 - alpha`` quantile.
    generator:
        Label stored on the result.
    """
    if bound < 2:
        raise ValueError(f"bound must be at least 2, got {bound}")
    if draws < bound:
        raise ValueError(f"draws ({draws}) must be at least bound ({bound})")

    samples = np.fromiter(
        (rng.next_bounded_long(bound) for _ in range(draws)),
        dtype=np.int64,
        count=draws,
    )
    counts = np.bincount(samples, minlength=bound)
    fit = stats.chisquare(counts)
    statistic = float(fit.statistic)

    dof = bound - 1
    critical = chi_square_critical_value(dof, alpha)
    result = UniformityResult(
        generator=generator,
        bound=bound,
        draws=draws,
        statistic=statistic,
        p_value=float(fit.pvalue),
        degrees_of_freedom=dof,
        critical_value=critical,
        alpha=alpha,
        passed=statistic <= critical,
    )
    logger.debug(
        "%s bound=%d chi2=%.2f p=%.4g critical=%.2f passed=%s",
        generator, bound, statistic, result.p_value, critical, result.passed,
    )
    return result


def survey(
    generators: Mapping[str, RNG],
    bounds: Sequence[int] = (6, 37),
    draws: int = 100_000,
    alpha: float = 0.001,
) -> UniformitySurvey:
    """Run ``chi_square_uniformity`` for every generator and bound."""
    results = [
        chi_square_uniformity(rng, bound, draws=draws, alpha=alpha, generator=name)
        for name, rng in generators.items()
        for bound in bounds
    ]
    return UniformitySurvey(draws=draws, alpha=alpha, results=results)
