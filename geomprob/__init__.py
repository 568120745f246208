"""Geometric distribution probabilities: PMF, CDF and directional tails."""

from .core import (
    COMPARISON_TYPES,
    calculate_cumulative_probability,
    exponentiate,
    geometric_cdf,
    geometric_pmf,
    geometric_survival,
)
from .exceptions import InvalidArgumentError

__all__ = [
    "COMPARISON_TYPES",
    "InvalidArgumentError",
    "calculate_cumulative_probability",
    "exponentiate",
    "geometric_cdf",
    "geometric_pmf",
    "geometric_survival",
]
