"""
Forge Exceptions
=================

Failure values surfaced by the password generator. Generation never
returns a partial or non-compliant password: it either succeeds or
raises one of these.
"""

from __future__ import annotations


class ForgeError(Exception):
    """Base class for every Forge generation failure."""

    pass


class EmptyAlphabetError(ForgeError):
    """No character category selected and no custom alphabet given."""

    pass


class InvalidRulesError(ForgeError):
    """The rule set can never be satisfied (e.g. minimums exceed length)."""

    pass


class GenerationExhaustedError(ForgeError):
    """No compliant password was found within the attempt budget.

    Attributes:
        attempts: Number of candidates generated before giving up.
    """

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(
            f"Failed to generate a compliant password after {attempts} attempts"
        )
