"""Quality checks: chi-square uniformity of derived draws."""

from mixrand.quality.models import UniformityResult, UniformitySurvey
from mixrand.quality.uniformity import chi_square_critical_value, chi_square_uniformity, survey

__all__ = [
    "UniformityResult",
    "UniformitySurvey",
    "chi_square_critical_value",
    "chi_square_uniformity",
    "survey",
]
