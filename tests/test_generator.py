"""Tests for the compliant password generation loop."""

import string

import pytest

from forge.core.errors import (
    EmptyAlphabetError,
    GenerationExhaustedError,
    InvalidRulesError,
)
from forge.core.models import PasswordRules, StrengthPreset
from forge.generators.password import PasswordGenerator


@pytest.fixture
def generator(rng, checker):
    return PasswordGenerator(random_source=rng, checker=checker)


def test_basic_preset_uses_alphanumerics(generator):
    rules = PasswordRules.for_preset(StrengthPreset.BASIC)
    allowed = set(string.ascii_letters + string.digits)
    for _ in range(200):
        password = generator.generate(rules)
        assert len(password) == 8
        assert set(password) <= allowed


@pytest.mark.parametrize("preset", list(StrengthPreset))
def test_every_preset_produces_compliant_passwords(generator, checker, preset):
    rules = PasswordRules.for_preset(preset)
    for _ in range(25):
        password = generator.generate(rules)
        assert len(password) == rules.length
        assert checker.satisfies(password, rules)


def test_custom_length_and_minimums(generator):
    rules = PasswordRules(length=16, min_digits=4, min_special=4)
    for _ in range(25):
        password = generator.generate(rules)
        assert len(password) == 16
        assert sum(c.isdigit() for c in password) >= 4
        assert sum(not c.isalnum() for c in password) >= 4


def test_custom_charset_output_uses_charset_plus_injected(generator):
    rules = PasswordRules(length=12, custom_charset="xyz")
    for _ in range(25):
        assert set(generator.generate(rules)) <= set("xyz")


def test_custom_charset_minimums_come_from_category_sets(generator):
    rules = PasswordRules(length=10, custom_charset="xyz", min_digits=2)
    for _ in range(25):
        password = generator.generate(rules)
        assert sum(c.isdigit() for c in password) >= 2


def test_empty_alphabet_raises(generator):
    rules = PasswordRules(
        include_uppercase=False,
        include_lowercase=False,
        include_digits=False,
        include_special=False,
    )
    with pytest.raises(EmptyAlphabetError):
        generator.generate(rules)


def test_empty_custom_charset_raises(generator):
    with pytest.raises(EmptyAlphabetError):
        generator.generate(PasswordRules(custom_charset=""))


def test_minimums_exceeding_length_fail_before_sampling(scripted, checker):
    source, entropy = scripted([])
    generator = PasswordGenerator(random_source=source, checker=checker)
    rules = PasswordRules(length=4, min_digits=3, min_special=2)
    with pytest.raises(InvalidRulesError):
        generator.generate(rules)
    assert entropy.remaining == 0


def test_unsatisfiable_rules_exhaust_attempts(rng, checker):
    generator = PasswordGenerator(random_source=rng, checker=checker, max_attempts=5)
    rules = PasswordRules(length=5, custom_charset="a", avoid_repeated=True)
    with pytest.raises(GenerationExhaustedError) as excinfo:
        generator.generate(rules)
    assert excinfo.value.attempts == 5
    assert "5 attempts" in str(excinfo.value)


def test_generate_many_returns_independent_passwords(generator):
    rules = PasswordRules(length=20)
    passwords = generator.generate_many(rules, 5)
    assert len(passwords) == 5
    assert len(set(passwords)) == 5


def test_generate_many_rejects_non_positive_count(generator):
    with pytest.raises(ValueError):
        generator.generate_many(PasswordRules(), 0)


def test_sample_draws_from_alphabet(generator):
    assert generator.sample("q", 6) == "qqqqqq"
    assert generator.sample("abc", 0) == ""
