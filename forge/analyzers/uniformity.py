"""
Entropy Source Self-Test
=========================

Statistical sanity check of the generator's sampling primitives. Two
properties are tested with Pearson's chi-squared goodness of fit:

1. ``uniform(bound)`` hits every value in ``[0, bound)`` equally often.
   A naive modulo reduction with a bound that does not divide ``2^32``
   would show up here as an excess of low values once enough samples
   are drawn.
2. ``shuffle`` sends every original element to every position equally
   often. The full position-by-element table is tallied, so a defect in
   any single swap (including the last) skews some cell.

A test passes when its p-value is at least the configured significance
level. With a small significance (0.001 by default) a sound source
fails about one run in a thousand, so a single failure is a prompt to
re-run, not proof of bias.

References:
    - Pearson, K. (1900). On the criterion that a given system of
      deviations from the probable. Philosophical Magazine, 50(302).
    - NIST SP 800-22 Rev. 1a (2010). A Statistical Test Suite for
      Random and Pseudorandom Number Generators.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from forge.core.models import UniformityResult, UniformitySuiteResult
from forge.generators.random_source import SecureRandomSource
from shared.math_utils import chi_squared_test, uniform_expected


class UniformityTester:
    """Chi-squared checks for :class:`SecureRandomSource`.

    Usage::

        tester = UniformityTester()
        suite = tester.run_suite(samples=20_000, bound=62, shuffle_size=8)
        print(suite.overall_pass)
    """

    def __init__(
        self,
        random_source: Optional[SecureRandomSource] = None,
        significance: float = 0.001,
    ) -> None:
        self._random = random_source or SecureRandomSource()
        self._significance = significance

    def run_suite(
        self, samples: int, bound: int, shuffle_size: int
    ) -> UniformitySuiteResult:
        """Run both uniformity tests and aggregate the verdict."""
        tests = [
            self.test_uniform(samples, bound),
            self.test_shuffle(samples, shuffle_size),
        ]
        return UniformitySuiteResult(
            tests=tests,
            significance=self._significance,
            overall_pass=all(t.passed for t in tests),
        )

    def test_uniform(self, samples: int, bound: int) -> UniformityResult:
        """Tally *samples* draws of ``uniform(bound)``."""
        if bound < 2:
            raise ValueError(f"bound must be at least 2, got {bound}")
        draws = np.fromiter(
            (self._random.uniform(bound) for _ in range(samples)),
            dtype=np.int64,
            count=samples,
        )
        observed = np.bincount(draws, minlength=bound)
        return self._evaluate(f"uniform({bound})", observed, samples)

    def test_shuffle(self, samples: int, size: int) -> UniformityResult:
        """Tally which original index lands in each position after ``shuffle``.

        Every row and column of the table sums to *samples*, which leaves
        ``(size - 1)^2`` degrees of freedom.
        """
        if size < 2:
            raise ValueError(f"shuffle size must be at least 2, got {size}")
        observed = np.zeros((size, size), dtype=np.int64)
        positions = np.arange(size)
        for _ in range(samples):
            items = list(range(size))
            self._random.shuffle(items)
            observed[positions, items] += 1
        return self._evaluate(
            f"shuffle({size}) positions", observed, samples,
            per_cell=samples / size, dof=(size - 1) ** 2,
        )

    def _evaluate(
        self,
        name: str,
        observed: np.ndarray,
        samples: int,
        per_cell: float | None = None,
        dof: int | None = None,
    ) -> UniformityResult:
        if per_cell is None:
            expected = uniform_expected(samples, observed.size)
        else:
            expected = np.full(observed.shape, per_cell, dtype=np.float64)
        chi2, p_value = chi_squared_test(observed, expected, dof=dof)
        return UniformityResult(
            test_name=name,
            categories=int(observed.size),
            samples=samples,
            chi_squared=chi2,
            p_value=p_value,
            passed=p_value >= self._significance,
        )
