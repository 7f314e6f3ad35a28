"""
Forge Core Data Models
=======================

Pydantic models for the Forge password generation and strength analysis
engine. These models describe the declarative composition rules consumed
by the generator, the strength presets that map onto those rules, and the
immutable results produced by the strength analyzer and the entropy
self-test.

Every model is frozen: a rule set or an analysis result is built once per
request and never mutated afterwards. All models are serialisable to JSON
for the CLI ``--output json`` mode.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Pearson, K. (1900). On the criterion that a given system of
      deviations from the probable. Philosophical Magazine, 50(302).
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class StrengthPreset(str, enum.Enum):
    """Named rule sets offered to callers.

    ``CUSTOM`` maps to the default rule set and is the only preset whose
    individual rules may be overridden.
    """

    BASIC = "basic"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "verystrong"
    CUSTOM = "custom"


class PlacementStrategy(str, enum.Enum):
    """Where the constraint injector writes characters it must add."""

    RANDOM = "random"
    BEGINNING = "beginning"
    END = "end"


class StrengthLabel(str, enum.Enum):
    """Qualitative label for the 1-5 strength score."""

    VERY_WEAK = "very_weak"      # score 1
    WEAK = "weak"                # score 2
    MEDIUM = "medium"            # score 3
    STRONG = "strong"            # score 4
    VERY_STRONG = "very_strong"  # score 5

    @classmethod
    def from_score(cls, score: int) -> StrengthLabel:
        """Map a 1-5 score onto its label."""
        order = list(cls)
        return order[max(1, min(5, score)) - 1]

    @property
    def display(self) -> str:
        """Title-cased label, e.g. ``"Very Strong"``."""
        return self.value.replace("_", " ").title()


# ===================================================================== #
#  Rule Models
# ===================================================================== #


class PasswordRules(BaseModel):
    """Declarative composition rules for a generated password.

    Attributes:
        length: Exact number of characters to generate.
        include_uppercase: Add ``A-Z`` to the alphabet.
        include_lowercase: Add ``a-z`` to the alphabet.
        include_digits: Add ``0-9`` to the alphabet.
        include_special: Add the fixed special-character set.
        exclude_similar: Remove look-alike characters (``il1IoO0``).
        exclude_ambiguous: Remove brackets, quotes and punctuation that are
            easily confused in print.
        min_uppercase: Minimum uppercase count, ``None`` when unconstrained.
        min_lowercase: Minimum lowercase count, ``None`` when unconstrained.
        min_digits: Minimum digit count, ``None`` when unconstrained.
        min_special: Minimum special count, ``None`` when unconstrained.
        custom_charset: Alphabet override. When set, the inclusion and
            exclusion flags are ignored.
        avoid_repeated: Reject passwords with three identical characters
            in a row.
        avoid_sequential: Reject passwords containing ``abc``/``321``-style
            runs.
        avoid_dictionary_words: Reject passwords containing a known weak
            word.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    length: int = Field(default=12, ge=1)
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_digits: bool = True
    include_special: bool = True
    exclude_similar: bool = False
    exclude_ambiguous: bool = False
    min_uppercase: Optional[int] = Field(default=None, ge=0)
    min_lowercase: Optional[int] = Field(default=None, ge=0)
    min_digits: Optional[int] = Field(default=None, ge=0)
    min_special: Optional[int] = Field(default=None, ge=0)
    custom_charset: Optional[str] = None
    avoid_repeated: bool = False
    avoid_sequential: bool = False
    avoid_dictionary_words: bool = False

    @property
    def minimum_total(self) -> int:
        """Sum of every specified minimum-count constraint."""
        return sum(
            m or 0
            for m in (
                self.min_uppercase,
                self.min_lowercase,
                self.min_digits,
                self.min_special,
            )
        )

    def with_overrides(self, **changes: Any) -> PasswordRules:
        """Return a validated copy with *changes* applied.

        Unlike :meth:`model_copy`, the new values go through field
        validation, so ``length=0`` is rejected here as well.
        """
        data = self.model_dump()
        data.update(changes)
        return PasswordRules.model_validate(data)

    @classmethod
    def for_preset(cls, preset: StrengthPreset | str) -> PasswordRules:
        """Return the fixed rule set for *preset*."""
        preset = StrengthPreset(preset)
        return _PRESET_RULES[preset]


DEFAULT_RULES = PasswordRules()

_PRESET_RULES: dict[StrengthPreset, PasswordRules] = {
    StrengthPreset.BASIC: DEFAULT_RULES.with_overrides(
        length=8,
        include_special=False,
    ),
    StrengthPreset.MEDIUM: DEFAULT_RULES.with_overrides(
        length=10,
        min_digits=2,
        min_uppercase=1,
    ),
    StrengthPreset.STRONG: DEFAULT_RULES.with_overrides(
        length=14,
        min_digits=2,
        min_uppercase=2,
        min_special=2,
        avoid_repeated=True,
    ),
    StrengthPreset.VERY_STRONG: DEFAULT_RULES.with_overrides(
        length=18,
        min_digits=3,
        min_uppercase=3,
        min_special=3,
        avoid_repeated=True,
        avoid_sequential=True,
        avoid_dictionary_words=True,
        exclude_similar=True,
    ),
    StrengthPreset.CUSTOM: DEFAULT_RULES,
}


# ===================================================================== #
#  Compliance Models
# ===================================================================== #


class CategoryCounts(BaseModel):
    """Per-category character counts of a password."""

    model_config = ConfigDict(frozen=True)

    upper: int = 0
    lower: int = 0
    digit: int = 0
    special: int = 0


# ===================================================================== #
#  Analysis Models
# ===================================================================== #


class AnalysisResult(BaseModel):
    """Strength analysis of a single password.

    Attributes:
        length: Password character length.
        pool_size: Sum of category sizes for the categories present.
        entropy_bits: ``length * log2(pool_size)``; zero for empty input.
        crack_time_seconds: ``2^entropy / guesses_per_second``.
        crack_time: Human-readable bucket of ``crack_time_seconds``.
        suggestions: Ordered improvement suggestions, empty when none apply.
        score: Strength score in ``[1, 5]``.
        strength: Qualitative label for ``score``.
    """

    model_config = ConfigDict(frozen=True)

    length: int = 0
    pool_size: int = 0
    entropy_bits: float = Field(default=0.0, ge=0.0)
    crack_time_seconds: float = 0.0
    crack_time: str = "Instantly"
    suggestions: list[str] = Field(default_factory=list)
    score: int = Field(default=1, ge=1, le=5)
    strength: StrengthLabel = StrengthLabel.VERY_WEAK


# ===================================================================== #
#  Self-Test Models
# ===================================================================== #


class UniformityResult(BaseModel):
    """Result of one chi-squared uniformity test.

    Attributes:
        test_name: Name of the sampled quantity.
        categories: Number of tallied cells, each equally likely.
        samples: Number of draws tallied.
        chi_squared: Pearson chi-squared statistic.
        p_value: Upper-tail probability of ``chi_squared``.
        passed: ``p_value >= significance``.
    """

    model_config = ConfigDict(frozen=True)

    test_name: str
    categories: int
    samples: int
    chi_squared: float = 0.0
    p_value: float = 1.0
    passed: bool = True


class UniformitySuiteResult(BaseModel):
    """Aggregated entropy self-test outcome."""

    model_config = ConfigDict(frozen=True)

    tests: list[UniformityResult] = Field(default_factory=list)
    significance: float = 0.001
    overall_pass: bool = True
