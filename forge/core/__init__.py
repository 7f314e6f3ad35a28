"""
Forge Core Module
==================

Data models and error types for PassForge. The orchestrating engine
lives in :mod:`forge.core.engine`.
"""

from forge.core.errors import (
    EmptyAlphabetError,
    ForgeError,
    GenerationExhaustedError,
    InvalidRulesError,
)
from forge.core.models import (
    AnalysisResult,
    CategoryCounts,
    PasswordRules,
    PlacementStrategy,
    StrengthLabel,
    StrengthPreset,
    UniformityResult,
    UniformitySuiteResult,
)

__all__ = [
    "AnalysisResult",
    "CategoryCounts",
    "EmptyAlphabetError",
    "ForgeError",
    "GenerationExhaustedError",
    "InvalidRulesError",
    "PasswordRules",
    "PlacementStrategy",
    "StrengthLabel",
    "StrengthPreset",
    "UniformityResult",
    "UniformitySuiteResult",
]
