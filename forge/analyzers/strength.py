"""
Password Strength Analyzer
===========================

Estimates the brute-force resistance of an arbitrary password and
suggests improvements.

Entropy uses the combinatorial model ``length * log2(pool_size)``, where
the pool is the sum of the sizes of the character categories that
actually occur in the password:

- Uppercase letters: 26
- Lowercase letters: 26
- Digits: 10
- Special characters: 33

Crack time assumes an offline attacker exhausting the full keyspace at a
fixed throughput (10^10 guesses/second by default). The 1-5 score is a
banding of entropy bits.

Suggestions reuse the generator's compliance predicates, so the analyzer
flags exactly the sequential, dictionary and repeated patterns the
generator's anti-pattern rules reject.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
    - Bonneau, J. (2012). The Science of Guessing: Analyzing an
      Anonymized Corpus of 70 Million Passwords. IEEE S&P.
"""

from __future__ import annotations

import math
from typing import Optional

from forge.analyzers.compliance import ComplianceChecker
from forge.core.models import AnalysisResult, StrengthLabel

_UPPER_POOL: int = 26
_LOWER_POOL: int = 26
_DIGIT_POOL: int = 10
_SPECIAL_POOL: int = 33

_MINUTE: float = 60.0
_HOUR: float = 3600.0
_DAY: float = 86400.0
_YEAR: float = 31536000.0

# 2.0 ** 1024 overflows a double
_MAX_FINITE_EXPONENT: float = 1023.0

# (upper bound in entropy bits, score)
_SCORE_BANDS: tuple[tuple[float, int], ...] = (
    (28.0, 1),
    (36.0, 2),
    (60.0, 3),
    (80.0, 4),
)


class StrengthAnalyzer:
    """Scores passwords by entropy and lists concrete improvements.

    Analysis is a pure function of the password: no randomness, no I/O,
    and no failure mode for any string input, including the empty one.

    Usage::

        analyzer = StrengthAnalyzer()
        result = analyzer.analyze("MyP@ssw0rd!")
        print(f"{result.entropy_bits:.1f} bits, {result.crack_time}")

    Args:
        checker: Compliance predicates for pattern suggestions.
        guesses_per_second: Assumed attacker throughput.
        recommended_length: Length below which a longer password is
            suggested.
    """

    def __init__(
        self,
        checker: Optional[ComplianceChecker] = None,
        guesses_per_second: float = 1e10,
        recommended_length: int = 12,
    ) -> None:
        self._checker = checker or ComplianceChecker()
        self._guesses_per_second = guesses_per_second
        self._recommended_length = recommended_length

    def analyze(self, password: str) -> AnalysisResult:
        """Perform the full strength analysis of *password*."""
        entropy = self.entropy_bits(password)
        seconds = self.crack_time_seconds(entropy)
        score = self.strength_score(entropy)
        return AnalysisResult(
            length=len(password),
            pool_size=self.pool_size(password),
            entropy_bits=entropy,
            crack_time_seconds=seconds,
            crack_time=self.format_crack_time(seconds),
            suggestions=self.suggestions(password),
            score=score,
            strength=StrengthLabel.from_score(score),
        )

    # ------------------------------------------------------------------ #
    #  Entropy
    # ------------------------------------------------------------------ #

    @staticmethod
    def pool_size(password: str) -> int:
        """Sum of category sizes for the categories present in *password*."""
        pool = 0
        if any(c.isupper() for c in password):
            pool += _UPPER_POOL
        if any(c.islower() for c in password):
            pool += _LOWER_POOL
        if any(c.isdigit() for c in password):
            pool += _DIGIT_POOL
        if any(not c.isalnum() for c in password):
            pool += _SPECIAL_POOL
        return pool

    @classmethod
    def entropy_bits(cls, password: str) -> float:
        """Combinatorial entropy ``len * log2(pool)``; zero when pool is 0."""
        pool = cls.pool_size(password)
        if pool == 0:
            return 0.0
        return len(password) * math.log2(pool)

    # ------------------------------------------------------------------ #
    #  Crack time
    # ------------------------------------------------------------------ #

    def crack_time_seconds(self, entropy_bits: float) -> float:
        """Seconds to exhaust ``2^entropy_bits`` guesses; ``inf`` if huge."""
        if entropy_bits > _MAX_FINITE_EXPONENT:
            return math.inf
        return 2.0 ** entropy_bits / self._guesses_per_second

    @staticmethod
    def format_crack_time(seconds: float) -> str:
        """Bucket a duration into a human-readable string."""
        if seconds < 1.0:
            return "Instantly"
        if seconds < _MINUTE:
            return f"{seconds:.1f} seconds"
        if seconds < _HOUR:
            return f"{seconds / _MINUTE:.1f} minutes"
        if seconds < _DAY:
            return f"{seconds / _HOUR:.1f} hours"
        if seconds < _YEAR:
            return f"{seconds / _DAY:.1f} days"
        if seconds < _YEAR * 100:
            return f"{seconds / _YEAR:.1f} years"
        if seconds < _YEAR * 1000:
            return f"{seconds / (_YEAR * 100):.1f} centuries"
        return "Millions of years or more"

    def estimate_crack_time(self, entropy_bits: float) -> str:
        """Human-readable crack time for *entropy_bits*."""
        return self.format_crack_time(self.crack_time_seconds(entropy_bits))

    # ------------------------------------------------------------------ #
    #  Scoring and suggestions
    # ------------------------------------------------------------------ #

    @staticmethod
    def strength_score(entropy_bits: float) -> int:
        """Band *entropy_bits* into a score from 1 (very weak) to 5."""
        for upper, score in _SCORE_BANDS:
            if entropy_bits < upper:
                return score
        return 5

    def suggestions(self, password: str) -> list[str]:
        """Return improvement suggestions in a fixed order."""
        suggestions: list[str] = []

        if len(password) < self._recommended_length:
            suggestions.append(
                f"Consider using a longer password ({self._recommended_length}+ characters)"
            )
        if not any(c.isupper() for c in password):
            suggestions.append("Add uppercase letters")
        if not any(c.islower() for c in password):
            suggestions.append("Add lowercase letters")
        if not any(c.isdigit() for c in password):
            suggestions.append("Add numbers")
        if all(c.isalnum() for c in password):
            suggestions.append("Add special characters")
        if self._checker.has_sequential_run(password):
            suggestions.append("Avoid sequential characters (e.g., '123', 'abc')")
        if self._checker.has_dictionary_word(password):
            suggestions.append("Avoid common dictionary words")
        if self._checker.has_repeated_run(password):
            suggestions.append("Avoid repeated characters (e.g., 'aaa')")

        return suggestions
