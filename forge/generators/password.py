"""
Compliant Password Generation
==============================

The generation loop: build the alphabet, sample a raw candidate
character by character, top up minimum counts, and keep the candidate
only if it passes every compliance check. Rejected candidates are
discarded whole and the loop starts over, up to a fixed attempt budget.

Rejection sampling keeps the output distribution honest: an accepted
password is a uniform draw from the alphabet conditioned on compliance,
with no structure imposed on where the required characters end up.
"""

from __future__ import annotations

from typing import Optional

from forge.analyzers.compliance import ComplianceChecker
from forge.core.errors import (
    EmptyAlphabetError,
    GenerationExhaustedError,
    InvalidRulesError,
)
from forge.core.models import PasswordRules, PlacementStrategy
from forge.generators.charset import CharsetBuilder
from forge.generators.injector import ConstraintInjector
from forge.generators.random_source import SecureRandomSource
from shared.logger import ForgeLogger

DEFAULT_MAX_ATTEMPTS: int = 100


class PasswordGenerator:
    """Generates passwords that satisfy a :class:`PasswordRules`.

    Usage::

        generator = PasswordGenerator()
        rules = PasswordRules.for_preset("strong")
        password = generator.generate(rules)

    Args:
        random_source: Secure sampling primitives.
        checker: Compliance predicates (carries the dictionary word list).
        injector: Minimum-count enforcement; built on *random_source*
            when omitted.
        max_attempts: Candidates to try before giving up.
        logger: Logger for attempt diagnostics.
    """

    def __init__(
        self,
        random_source: Optional[SecureRandomSource] = None,
        checker: Optional[ComplianceChecker] = None,
        injector: Optional[ConstraintInjector] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        logger: Optional[ForgeLogger] = None,
    ) -> None:
        self._random = random_source or SecureRandomSource()
        self._checker = checker or ComplianceChecker()
        self._injector = injector or ConstraintInjector(self._random)
        self._max_attempts = max_attempts
        self.logger = logger or ForgeLogger("generator")

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def sample(self, alphabet: str, length: int) -> str:
        """Draw *length* independent uniform characters from *alphabet*."""
        return "".join(self._random.select(alphabet) for _ in range(length))

    def generate(self, rules: PasswordRules) -> str:
        """Return one password of ``rules.length`` characters satisfying *rules*.

        Raises:
            EmptyAlphabetError: If the rules select no characters at all.
            InvalidRulesError: If the minimum counts add up to more than
                the password length.
            GenerationExhaustedError: If no candidate passed within
                ``max_attempts`` tries.
        """
        alphabet = CharsetBuilder.build(rules)
        if not alphabet:
            raise EmptyAlphabetError(
                "No character categories selected and no custom charset given"
            )
        if rules.minimum_total > rules.length:
            raise InvalidRulesError(
                f"Minimum character counts sum to {rules.minimum_total}, "
                f"which exceeds the password length of {rules.length}"
            )

        with self.logger.operation("generate"):
            for attempt in range(1, self._max_attempts + 1):
                candidate = self.sample(alphabet, rules.length)
                candidate = self._injector.enforce(
                    candidate, rules, PlacementStrategy.RANDOM
                )
                if self._checker.satisfies(candidate, rules):
                    self.logger.debug(
                        "Compliant password found on attempt %d", attempt,
                        length=rules.length, alphabet_size=len(alphabet),
                    )
                    return candidate
                self.logger.debug("Attempt %d rejected", attempt)

            self.logger.warning(
                "No compliant password after %d attempts", self._max_attempts,
                attempts=self._max_attempts, length=rules.length,
                alphabet_size=len(alphabet),
            )
        raise GenerationExhaustedError(self._max_attempts)

    def generate_many(self, rules: PasswordRules, count: int) -> list[str]:
        """Generate *count* independent passwords for the same *rules*."""
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")
        return [self.generate(rules) for _ in range(count)]
