"""Tests for the chi-squared entropy self-test."""

import numpy as np
import pytest

from forge.analyzers.uniformity import UniformityTester
from forge.generators.random_source import SecureRandomSource
from shared.math_utils import chi_squared_test, uniform_expected, upper_incomplete_gamma


class _StuckSource(SecureRandomSource):
    """Always returns 0 and never shuffles."""

    def uniform(self, bound: int) -> int:
        return 0

    def shuffle(self, items) -> None:
        return None


class _ShortShuffleSource(SecureRandomSource):
    """Fisher-Yates that stops one swap early, so the last two slots never trade."""

    def shuffle(self, items) -> None:
        n = len(items)
        for i in range(n - 2):
            j = i + self.uniform(n - i)
            items[i], items[j] = items[j], items[i]


def test_suite_passes_for_secure_source(rng):
    tester = UniformityTester(rng, significance=1e-6)
    suite = tester.run_suite(samples=5000, bound=10, shuffle_size=5)
    assert [t.test_name for t in suite.tests] == ["uniform(10)", "shuffle(5) positions"]
    assert suite.overall_pass
    assert suite.significance == 1e-6
    for result in suite.tests:
        assert result.samples == 5000
        assert 0.0 <= result.p_value <= 1.0


def test_biased_source_fails():
    tester = UniformityTester(_StuckSource(), significance=0.001)
    suite = tester.run_suite(samples=1000, bound=4, shuffle_size=4)
    assert not suite.overall_pass
    assert all(not t.passed for t in suite.tests)


@pytest.mark.parametrize("bound", [0, 1])
def test_uniform_test_needs_two_categories(rng, bound):
    with pytest.raises(ValueError):
        UniformityTester(rng).test_uniform(100, bound)


def test_shuffle_test_needs_two_items(rng):
    with pytest.raises(ValueError):
        UniformityTester(rng).test_shuffle(100, 1)


def test_chi_squared_of_perfect_fit():
    chi2, p_value = chi_squared_test([25, 25, 25, 25], uniform_expected(100, 4))
    assert chi2 == 0.0
    assert p_value == pytest.approx(1.0)


def test_chi_squared_known_value():
    # chi2 = 4.0 with 1 degree of freedom has p = 0.0455
    chi2, p_value = chi_squared_test([60, 40], [50, 50])
    assert chi2 == pytest.approx(4.0)
    assert p_value == pytest.approx(0.0455, abs=1e-4)


def test_chi_squared_rejects_shape_mismatch():
    with pytest.raises(ValueError):
        chi_squared_test([1, 2, 3], [2, 2])


def test_chi_squared_rejects_non_positive_expected():
    with pytest.raises(ValueError):
        chi_squared_test([1, 2], [0, 3])


def test_upper_incomplete_gamma_matches_exponential():
    # Q(1, x) = exp(-x)
    for x in (0.1, 1.0, 5.0):
        assert upper_incomplete_gamma(1.0, x) == pytest.approx(np.exp(-x), rel=1e-8)


def test_shuffle_tally_covers_every_position(rng):
    result = UniformityTester(rng).test_shuffle(samples=400, size=4)
    assert result.test_name == "shuffle(4) positions"
    assert result.categories == 16


def test_missing_final_swap_is_detected():
    tester = UniformityTester(_ShortShuffleSource(), significance=0.001)
    result = tester.test_shuffle(samples=4000, size=4)
    assert not result.passed


def test_chi_squared_explicit_degrees_of_freedom():
    # chi2 = 8.0 with 4 degrees of freedom has p = 5 * exp(-4) = 0.0916
    _, p_value = chi_squared_test([[60, 40], [40, 60]], [[50, 50], [50, 50]], dof=4)
    assert p_value == pytest.approx(5 * np.exp(-4.0), rel=1e-6)
