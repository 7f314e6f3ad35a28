"""
Forge Generators
=================

Sampling primitives and the compliant password generation loop.
"""

from forge.generators.charset import CharsetBuilder
from forge.generators.injector import ConstraintInjector
from forge.generators.password import PasswordGenerator
from forge.generators.random_source import SecureRandomSource

__all__ = [
    "CharsetBuilder",
    "ConstraintInjector",
    "PasswordGenerator",
    "SecureRandomSource",
]
