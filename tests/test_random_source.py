"""Tests for the unbiased secure random source."""

from collections import Counter

import pytest

from shared.math_utils import chi_squared_test, uniform_expected

UINT32_MAX = 2**32 - 1


@pytest.mark.parametrize("bound", [1, 2, 3, 7, 10, 26, 62, 95, 1000, 2**31 + 1])
def test_uniform_stays_below_bound(rng, bound):
    for _ in range(500):
        value = rng.uniform(bound)
        assert 0 <= value < bound


def test_uniform_zero_bound_returns_zero(scripted):
    source, entropy = scripted([])
    assert source.uniform(0) == 0
    assert entropy.remaining == 0


@pytest.mark.parametrize("bound", [-1, 2**32 + 1])
def test_uniform_rejects_out_of_range_bound(rng, bound):
    with pytest.raises(ValueError):
        rng.uniform(bound)


def test_uniform_redraws_values_in_the_biased_tail(scripted):
    # 2^32 % 3 == 1, so only UINT32_MAX falls in the tail for bound 3
    source, entropy = scripted([UINT32_MAX, 5])
    assert source.uniform(3) == 2
    assert entropy.remaining == 0


def test_uniform_rejection_threshold_for_large_bound(scripted):
    bound = 3 * 2**30
    # Accepting 3 * 2^30 would map it to 0, doubling the weight of low values
    source, entropy = scripted([bound, bound + 17, 7])
    assert source.uniform(bound) == 7
    assert entropy.remaining == 0


def test_uniform_accepts_everything_when_bound_divides_range(scripted):
    source, _ = scripted([UINT32_MAX, 12345])
    assert source.uniform(2**32) == UINT32_MAX
    assert source.uniform(2) == 1


def test_uniform_reads_little_endian_words(scripted):
    source, _ = scripted([0x01020304])
    assert source.uniform(2**32) == 0x01020304


def test_uniform_is_statistically_uniform(rng):
    samples, bound = 20_000, 10
    counts = Counter(rng.uniform(bound) for _ in range(samples))
    observed = [counts[i] for i in range(bound)]
    _, p_value = chi_squared_test(observed, uniform_expected(samples, bound))
    assert p_value > 1e-5


def test_select_uses_uniform_index(scripted):
    source, _ = scripted([4])
    assert source.select("abcdef") == "e"


def test_select_rejects_empty_alphabet(rng):
    with pytest.raises(ValueError):
        rng.select("")


def test_shuffle_follows_forward_fisher_yates(scripted):
    # i=0 swaps with index 0 + 2, i=1 swaps with itself
    source, entropy = scripted([2, 0])
    items = ["a", "b", "c"]
    source.shuffle(items)
    assert items == ["c", "b", "a"]
    assert entropy.remaining == 0


@pytest.mark.parametrize("items", [[], ["x"]])
def test_shuffle_of_trivial_sequences_draws_nothing(scripted, items):
    source, _ = scripted([])
    source.shuffle(items)
    assert len(items) <= 1


def test_shuffle_preserves_multiset(rng):
    original = list("aabbbc!!9Z")
    for _ in range(50):
        items = original.copy()
        rng.shuffle(items)
        assert sorted(items) == sorted(original)


def test_shuffle_positions_are_uniform(rng):
    size, samples = 6, 12_000
    occupants = [Counter() for _ in range(size)]
    for _ in range(samples):
        items = list(range(size))
        rng.shuffle(items)
        for position, item in enumerate(items):
            occupants[position][item] += 1
    for counts in occupants:
        observed = [counts[i] for i in range(size)]
        _, p_value = chi_squared_test(observed, uniform_expected(samples, size))
        assert p_value > 1e-6


def test_shuffled_returns_permutation_of_text(rng):
    text = "correct-horse"
    result = rng.shuffled(text)
    assert sorted(result) == sorted(text)
