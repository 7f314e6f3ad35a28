"""Tests for minimum-count constraint injection."""

from collections import Counter

import pytest

from forge.analyzers.compliance import ComplianceChecker
from forge.core.errors import InvalidRulesError
from forge.core.models import PasswordRules, PlacementStrategy
from forge.generators.charset import DIGITS, SPECIAL_CHARACTERS, UPPERCASE
from forge.generators.injector import ConstraintInjector


def test_required_characters_cover_each_deficit(rng):
    injector = ConstraintInjector(rng)
    rules = PasswordRules(min_uppercase=2, min_digits=3, min_special=1, min_lowercase=1)
    required = injector.required_characters("aB", rules)
    # "aB" already has one upper and one lower
    assert len(required) == 1 + 3 + 1
    assert sum(c in UPPERCASE for c in required) == 1
    assert sum(c in DIGITS for c in required) == 3
    assert sum(c in SPECIAL_CHARACTERS for c in required) == 1


def test_no_deficit_returns_password_unchanged(scripted):
    source, entropy = scripted([])
    injector = ConstraintInjector(source)
    rules = PasswordRules(min_digits=1, min_lowercase=2)
    assert injector.enforce("ab1", rules) == "ab1"
    assert injector.enforce("anything", PasswordRules()) == "anything"
    assert entropy.remaining == 0


@pytest.mark.parametrize("strategy", list(PlacementStrategy))
def test_enforce_preserves_length(rng, strategy):
    injector = ConstraintInjector(rng)
    rules = PasswordRules(min_digits=2, min_special=2)
    for _ in range(20):
        result = injector.enforce("abcdefghij", rules, strategy)
        assert len(result) == 10


def test_random_placement_single_character(rng):
    injector = ConstraintInjector(rng)
    result = injector.enforce("aaaaaaaa", PasswordRules(min_digits=1))
    counts = Counter(result)
    assert counts["a"] == 7
    assert sum(c in DIGITS for c in result) == 1


def test_beginning_placement_overwrites_prefix_then_shuffles(rng):
    injector = ConstraintInjector(rng)
    result = injector.enforce(
        "abcdefgh", PasswordRules(min_digits=3), PlacementStrategy.BEGINNING
    )
    digits = [c for c in result if c in DIGITS]
    letters = [c for c in result if c not in DIGITS]
    assert len(digits) == 3
    assert sorted(letters) == list("defgh")


def test_end_placement_overwrites_suffix_then_shuffles(rng):
    injector = ConstraintInjector(rng)
    result = injector.enforce(
        "abcdefgh", PasswordRules(min_digits=3), PlacementStrategy.END
    )
    letters = [c for c in result if c not in DIGITS]
    assert sorted(letters) == list("abcde")


def test_fixed_placement_meets_every_minimum(rng, checker):
    injector = ConstraintInjector(rng)
    rules = PasswordRules(min_uppercase=2, min_digits=2, min_special=2)
    for strategy in (PlacementStrategy.BEGINNING, PlacementStrategy.END):
        result = injector.enforce("abcdefghijkl", rules, strategy)
        assert checker.satisfies(result, rules)


def test_too_many_required_characters_raise(rng):
    injector = ConstraintInjector(rng)
    with pytest.raises(InvalidRulesError):
        injector.enforce("ab", PasswordRules(min_digits=3))


def test_random_placement_retry_is_capped(scripted):
    # Select draws index 0 of A-Z, then every position draw lands on the
    # existing "A"; after three draws it is written there regardless.
    source, entropy = scripted([0, 0, 0, 0])
    injector = ConstraintInjector(source, placement_retry_limit=3)
    rules = PasswordRules(min_uppercase=3)
    assert injector.enforce("AB1", rules) == "AB1"
    assert entropy.remaining == 0


def test_random_placement_redraws_onto_a_different_character(scripted):
    source, entropy = scripted([0, 0, 2])
    injector = ConstraintInjector(source, placement_retry_limit=3)
    assert injector.enforce("AB1", PasswordRules(min_uppercase=3)) == "ABA"
    assert entropy.remaining == 0


def test_minimums_may_use_categories_outside_the_alphabet(rng):
    injector = ConstraintInjector(rng)
    result = injector.enforce("xyzxyzxy", PasswordRules(custom_charset="xyz", min_digits=2))
    assert ComplianceChecker.count_by_category(result).digit >= 1
