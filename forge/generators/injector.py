"""
Minimum-Count Constraint Injection
===================================

Tops up a raw candidate so that every category with a minimum count has
at least that many characters. Replacement characters are drawn from the
category's fixed set, never from the sampling alphabet, so a minimum is
honoured even for a category the alphabet does not include.

Three placement strategies are supported:

- ``RANDOM``: overwrite uniformly chosen positions, one per character.
- ``BEGINNING``: overwrite the first *k* positions, then shuffle.
- ``END``: overwrite the last *k* positions, then shuffle.

The shuffle after fixed-position placement removes the positional
signal; without it the required characters would always sit at the
same end of the password.
"""

from __future__ import annotations

from typing import Optional

from forge.analyzers.compliance import ComplianceChecker
from forge.core.errors import InvalidRulesError
from forge.core.models import PasswordRules, PlacementStrategy
from forge.generators.charset import (
    DIGITS,
    LOWERCASE,
    SPECIAL_CHARACTERS,
    UPPERCASE,
)
from forge.generators.random_source import SecureRandomSource


class ConstraintInjector:
    """Enforces per-category minimum counts on a candidate password.

    Args:
        random_source: Source for replacement characters and positions.
        placement_retry_limit: Maximum position draws per character under
            ``RANDOM`` placement. When every draw lands on a position that
            already holds the character being placed, it is written at the
            last drawn position anyway.
    """

    def __init__(
        self,
        random_source: Optional[SecureRandomSource] = None,
        placement_retry_limit: int = 64,
    ) -> None:
        self._random = random_source or SecureRandomSource()
        self._retry_limit = max(1, placement_retry_limit)

    def required_characters(self, password: str, rules: PasswordRules) -> list[str]:
        """Draw the characters needed to cover every category deficit."""
        counts = ComplianceChecker.count_by_category(password)
        categories = (
            (rules.min_uppercase, counts.upper, UPPERCASE),
            (rules.min_lowercase, counts.lower, LOWERCASE),
            (rules.min_digits, counts.digit, DIGITS),
            (rules.min_special, counts.special, SPECIAL_CHARACTERS),
        )
        required: list[str] = []
        for minimum, current, charset in categories:
            if minimum is None:
                continue
            for _ in range(max(0, minimum - current)):
                required.append(self._random.select(charset))
        return required

    def enforce(
        self,
        password: str,
        rules: PasswordRules,
        strategy: PlacementStrategy = PlacementStrategy.RANDOM,
    ) -> str:
        """Return *password* with category deficits filled in.

        The length of the result always equals ``len(password)``. The
        password is returned unchanged when no category is short.

        Raises:
            InvalidRulesError: If more characters are required than the
                password can hold.
        """
        required = self.required_characters(password, rules)
        if not required:
            return password
        if len(required) > len(password):
            raise InvalidRulesError(
                f"{len(required)} required characters do not fit in a "
                f"password of length {len(password)}"
            )

        strategy = PlacementStrategy(strategy)
        if strategy is PlacementStrategy.RANDOM:
            return self._place_at_random(password, required)
        if strategy is PlacementStrategy.BEGINNING:
            return self._random.shuffled("".join(required) + password[len(required):])
        return self._random.shuffled(password[: len(password) - len(required)] + "".join(required))

    def _place_at_random(self, password: str, required: list[str]) -> str:
        chars = list(password)
        for char in required:
            position = self._random.uniform(len(chars))
            for _ in range(self._retry_limit - 1):
                if chars[position] != char:
                    break
                position = self._random.uniform(len(chars))
            chars[position] = char
        return "".join(chars)
