"""
Password Compliance Checks
===========================

Pure predicates over a password string. The generator uses them to
accept or reject candidates; the strength analyzer reports on the same
checks, so a generated password and an analysed one are judged by
identical rules.

Pattern checks:
- Repeated runs: three identical characters in a row (``aaa``).
- Sequential runs: three consecutive letters or digits, forward or
  backward, in either case (``abc``, ``CBA``, ``789``).
- Dictionary words: case-insensitive containment of any word longer
  than three characters from the configured word list.

References:
    - NIST SP 800-63B (2017). Section 5.1.1.2: verifiers SHALL compare
      prospective secrets against dictionary words and repetitive or
      sequential characters.
"""

from __future__ import annotations

import string
from typing import Iterable, Optional

from forge.analyzers.dictionary import COMMON_WORDS
from forge.core.models import CategoryCounts, PasswordRules

_REFERENCE_SEQUENCES: tuple[str, ...] = (
    string.ascii_lowercase,
    string.ascii_uppercase,
    string.digits,
    string.ascii_lowercase[::-1],
    string.ascii_uppercase[::-1],
    string.digits[::-1],
)

_SEQUENTIAL_TRIPLETS: frozenset[str] = frozenset(
    seq[i : i + 3] for seq in _REFERENCE_SEQUENCES for i in range(len(seq) - 2)
)

# Words this short match too many random strings to be meaningful
_MIN_WORD_LENGTH: int = 4


class ComplianceChecker:
    """Stateless rule checks shared by generation and analysis.

    Usage::

        checker = ComplianceChecker()
        checker.has_sequential_run("xyzabc")   # True
        checker.satisfies("Tr0ub4dor&3", rules)

    Args:
        words: Dictionary word list. Defaults to the built-in list.
    """

    def __init__(self, words: Optional[Iterable[str]] = None) -> None:
        source = COMMON_WORDS if words is None else words
        self._words: tuple[str, ...] = tuple(
            w.lower() for w in source if len(w) >= _MIN_WORD_LENGTH
        )

    @property
    def words(self) -> tuple[str, ...]:
        """The lower-cased words that take part in matching."""
        return self._words

    @staticmethod
    def count_by_category(password: str) -> CategoryCounts:
        """Count uppercase, lowercase, digit and special characters.

        A character is special when it is neither a letter nor a digit.
        """
        upper = lower = digit = special = 0
        for c in password:
            if c.isupper():
                upper += 1
            elif c.islower():
                lower += 1
            if c.isdigit():
                digit += 1
            if not c.isalnum():
                special += 1
        return CategoryCounts(upper=upper, lower=lower, digit=digit, special=special)

    @staticmethod
    def has_repeated_run(password: str) -> bool:
        """True if any three consecutive characters are identical."""
        return any(
            password[i] == password[i + 1] == password[i + 2]
            for i in range(len(password) - 2)
        )

    @staticmethod
    def has_sequential_run(password: str) -> bool:
        """True if the password contains an alphabetic or numeric run of 3."""
        return any(
            password[i : i + 3] in _SEQUENTIAL_TRIPLETS
            for i in range(len(password) - 2)
        )

    def has_dictionary_word(self, password: str) -> bool:
        """True if any dictionary word occurs in *password*, ignoring case."""
        lowered = password.lower()
        return any(word in lowered for word in self._words)

    def satisfies(self, password: str, rules: PasswordRules) -> bool:
        """Check *password* against every minimum and anti-pattern rule."""
        counts = self.count_by_category(password)
        minimums = (
            (rules.min_uppercase, counts.upper),
            (rules.min_lowercase, counts.lower),
            (rules.min_digits, counts.digit),
            (rules.min_special, counts.special),
        )
        if any(required is not None and actual < required for required, actual in minimums):
            return False
        if rules.avoid_repeated and self.has_repeated_run(password):
            return False
        if rules.avoid_sequential and self.has_sequential_run(password):
            return False
        if rules.avoid_dictionary_words and self.has_dictionary_word(password):
            return False
        return True
