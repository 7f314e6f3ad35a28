"""Shared fixtures for the PassForge test suite."""

from __future__ import annotations

from collections import deque
from typing import Iterable

import pytest

from forge.analyzers.compliance import ComplianceChecker
from forge.generators.random_source import SecureRandomSource


class ScriptedEntropy:
    """Byte source that replays a fixed list of 32-bit values.

    Raises once the script is exhausted, so a test fails loudly if code
    draws more randomness than expected.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = deque(values)

    def __call__(self, n: int) -> bytes:
        assert n == 4, f"expected 4-byte draws, got {n}"
        if not self._values:
            raise AssertionError("entropy script exhausted")
        return self._values.popleft().to_bytes(4, "little")

    @property
    def remaining(self) -> int:
        return len(self._values)


@pytest.fixture
def scripted():
    """Factory: ``scripted([v1, v2, ...])`` -> (source, entropy)."""

    def _make(values: Iterable[int]) -> tuple[SecureRandomSource, ScriptedEntropy]:
        entropy = ScriptedEntropy(values)
        return SecureRandomSource(entropy), entropy

    return _make


@pytest.fixture
def rng() -> SecureRandomSource:
    return SecureRandomSource()


@pytest.fixture
def checker() -> ComplianceChecker:
    return ComplianceChecker()
