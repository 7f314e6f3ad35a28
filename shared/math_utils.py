"""
PassForge Statistical Utilities
================================

Goodness-of-fit statistics used by the entropy source self-test. The
chi-squared p-value is computed with the regularised upper incomplete
gamma function, matching ``scipy.stats.chi2.sf`` without requiring SciPy.

References:
    [1] Pearson, K. (1900). On the Criterion that a Given System of
        Deviations ... Philosophical Magazine, 50(302), 157-175.
    [2] Press, W. H. et al. (2007). Numerical Recipes (3rd ed.).
        Cambridge University Press, Section 6.2.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

FloatArray = NDArray[np.floating]

def chi_squared_test(
    observed: ArrayLike, expected: ArrayLike, dof: int | None = None
) -> tuple[float, float]:
    """Perform Pearson's chi-squared goodness-of-fit test.

    .. math::

        \\chi^2 = \\sum_i \\frac{(O_i - E_i)^2}{E_i}

    Args:
        observed: Observed frequency counts (any shape, *k* cells).
        expected: Expected frequency counts (same shape as *observed*).
        dof: Degrees of freedom. Defaults to ``k - 1``; a table with
            fixed row and column totals has ``(r - 1)(c - 1)``.

    Returns:
        Tuple of ``(chi2_statistic, p_value)``.

    Raises:
        ValueError: If the arrays differ in shape or *expected* has a
            non-positive entry.
    """
    obs = np.asarray(observed, dtype=np.float64)
    exp = np.asarray(expected, dtype=np.float64)

    if obs.shape != exp.shape:
        raise ValueError("Array shapes must match")
    if np.any(exp <= 0):
        raise ValueError("Expected values must be > 0")

    chi2 = float(np.sum((obs - exp) ** 2 / exp))
    if dof is None:
        dof = obs.size - 1
    if dof <= 0:
        return chi2, 1.0

    return chi2, upper_incomplete_gamma(dof / 2.0, chi2 / 2.0)


def uniform_expected(samples: int, categories: int) -> FloatArray:
    """Expected counts for *samples* draws over *categories* equal outcomes."""
    return np.full(categories, samples / categories, dtype=np.float64)


def upper_incomplete_gamma(a: float, x: float) -> float:
    """Regularised upper incomplete gamma Q(a, x) = 1 - P(a, x).

    Series expansion for ``x < a + 1``, Lentz continued fraction otherwise.
    """
    if x <= 0.0 or a <= 0.0:
        return 1.0
    if x < a + 1.0:
        return max(0.0, 1.0 - _gamma_p_series(a, x))
    return _gamma_q_cf(a, x)


def _gamma_p_series(a: float, x: float) -> float:
    ap = a
    delta = 1.0 / a
    total = delta
    for _ in range(500):
        ap += 1.0
        delta *= x / ap
        total += delta
        if abs(delta) < abs(total) * 1e-15:
            break
    return total * math.exp(-x + a * math.log(x) - math.lgamma(a))


def _gamma_q_cf(a: float, x: float) -> float:
    tiny = 1e-300
    b = x + 1.0 - a
    c = 1.0 / tiny
    d = 1.0 / b
    f = d
    for i in range(1, 500):
        an = -i * (i - a)
        b += 2.0
        d = an * d + b
        if abs(d) < tiny:
            d = tiny
        c = b + an / c
        if abs(c) < tiny:
            c = tiny
        d = 1.0 / d
        delta = d * c
        f *= delta
        if abs(delta - 1.0) < 1e-15:
            break
    return f * math.exp(-x + a * math.log(x) - math.lgamma(a))
