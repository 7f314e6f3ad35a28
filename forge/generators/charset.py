"""
Character Set Construction
===========================

Builds the alphabet the generator samples from. The fixed category sets
defined here are also the sources the constraint injector draws from
when a minimum count has to be topped up.
"""

from __future__ import annotations

import string

from forge.core.models import PasswordRules

UPPERCASE: str = string.ascii_uppercase
LOWERCASE: str = string.ascii_lowercase
DIGITS: str = string.digits
SPECIAL_CHARACTERS: str = "!@#$%^&*()-_=+[]{};:,.<>/?|~"

# Characters that look alike in common fonts
SIMILAR_CHARACTERS: str = "il1IoO0"

# Brackets, quotes and punctuation that are easy to mistype or misread
AMBIGUOUS_CHARACTERS: str = "{}[]()/\\'\"`~,;:.<>"


def remove_characters(source: str, unwanted: str) -> str:
    """Return *source* without any character that appears in *unwanted*."""
    return "".join(c for c in source if c not in unwanted)


class CharsetBuilder:
    """Derives the sampling alphabet from a :class:`PasswordRules`.

    A custom charset wins outright. Otherwise the enabled categories are
    concatenated in a fixed order (upper, lower, digits, special) and the
    exclusion filters applied afterwards.
    """

    @staticmethod
    def build(rules: PasswordRules) -> str:
        """Return the alphabet for *rules*; may be the empty string."""
        if rules.custom_charset is not None:
            return rules.custom_charset

        charset = ""
        if rules.include_uppercase:
            charset += UPPERCASE
        if rules.include_lowercase:
            charset += LOWERCASE
        if rules.include_digits:
            charset += DIGITS
        if rules.include_special:
            charset += SPECIAL_CHARACTERS

        if rules.exclude_similar:
            charset = remove_characters(charset, SIMILAR_CHARACTERS)
        if rules.exclude_ambiguous:
            charset = remove_characters(charset, AMBIGUOUS_CHARACTERS)

        return charset
