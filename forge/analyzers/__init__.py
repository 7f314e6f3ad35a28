"""
Forge Analyzers
================

Compliance predicates, dictionary loading, strength analysis and the
entropy source self-test.
"""

from forge.analyzers.compliance import ComplianceChecker
from forge.analyzers.dictionary import COMMON_WORDS, load_words
from forge.analyzers.strength import StrengthAnalyzer
from forge.analyzers.uniformity import UniformityTester

__all__ = [
    "COMMON_WORDS",
    "ComplianceChecker",
    "StrengthAnalyzer",
    "UniformityTester",
    "load_words",
]
