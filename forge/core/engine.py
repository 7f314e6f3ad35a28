"""
Forge Engine
=============

Central orchestrator for PassForge. :class:`ForgeEngine` wires the
configured components together (one secure random source, one word
list, one compliance checker shared by generator and analyzer) and
offers the operations the CLI exposes: rule resolution, generation,
analysis and the entropy self-test.

Architecture follows the Facade pattern (Gamma et al., 1994), giving a
simple interface over the generator and analyzer subsystems. Everything
runs synchronously; independent engines share no mutable state.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
"""

from __future__ import annotations

from typing import Any, Optional

from shared.config import ForgeConfig
from shared.logger import ForgeLogger

from forge.analyzers.compliance import ComplianceChecker
from forge.analyzers.dictionary import load_words
from forge.analyzers.strength import StrengthAnalyzer
from forge.analyzers.uniformity import UniformityTester
from forge.core.errors import InvalidRulesError
from forge.core.models import (
    AnalysisResult,
    PasswordRules,
    StrengthPreset,
    UniformitySuiteResult,
)
from forge.generators.injector import ConstraintInjector
from forge.generators.password import PasswordGenerator
from forge.generators.random_source import SecureRandomSource


class ForgeEngine:
    """Orchestrates password generation, analysis and self-testing.

    Usage::

        engine = ForgeEngine()
        rules = engine.resolve_rules("strong", length=20)
        passwords = engine.generate(rules, count=3)
        analysis = engine.analyze(passwords[0])

    Attributes:
        config: PassForge configuration instance.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[ForgeConfig] = None,
        random_source: Optional[SecureRandomSource] = None,
    ) -> None:
        self.config = config or ForgeConfig()
        settings = self.config.global_settings
        self.logger = ForgeLogger.from_settings("engine", settings)

        words = load_words(
            self.config.analyzer.dictionary_path,
            ForgeLogger.from_settings("dictionary", settings),
        )
        self._random = random_source or SecureRandomSource()
        self._checker = ComplianceChecker(words)

        self._generator = PasswordGenerator(
            random_source=self._random,
            checker=self._checker,
            injector=ConstraintInjector(
                self._random,
                placement_retry_limit=self.config.generator.placement_retry_limit,
            ),
            max_attempts=self.config.generator.max_attempts,
            logger=ForgeLogger.from_settings("generator", settings),
        )
        self._analyzer = StrengthAnalyzer(
            checker=self._checker,
            guesses_per_second=self.config.analyzer.guesses_per_second,
            recommended_length=self.config.analyzer.recommended_length,
        )
        self._uniformity = UniformityTester(
            random_source=self._random,
            significance=self.config.selftest.significance,
        )

    @property
    def checker(self) -> ComplianceChecker:
        return self._checker

    # ------------------------------------------------------------------ #
    #  Rules
    # ------------------------------------------------------------------ #

    def resolve_rules(
        self,
        preset: StrengthPreset | str | None = None,
        length: Optional[int] = None,
        **overrides: Any,
    ) -> PasswordRules:
        """Resolve a preset plus caller overrides into a rule set.

        A *length* override applies to every preset; any other override is
        accepted only for :attr:`StrengthPreset.CUSTOM`.

        Raises:
            InvalidRulesError: If rule overrides target a fixed preset.
            pydantic.ValidationError: If an override value is invalid.
        """
        preset = StrengthPreset(preset or self.config.generator.default_preset)
        changes = {k: v for k, v in overrides.items() if v is not None}
        if changes and preset is not StrengthPreset.CUSTOM:
            raise InvalidRulesError(
                f"Preset '{preset.value}' is fixed; rule overrides "
                f"({', '.join(sorted(changes))}) require the 'custom' preset"
            )
        if length is not None:
            changes["length"] = length

        rules = PasswordRules.for_preset(preset)
        return rules.with_overrides(**changes) if changes else rules

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def generate(self, rules: PasswordRules, count: int = 1) -> list[str]:
        """Generate *count* independent passwords satisfying *rules*."""
        self.logger.info(
            "Generating %d password(s)", count,
            length=rules.length, minimum_total=rules.minimum_total,
        )
        with self.logger.timed("generation"):
            return self._generator.generate_many(rules, count)

    # ------------------------------------------------------------------ #
    #  Analysis
    # ------------------------------------------------------------------ #

    def analyze(self, password: str) -> AnalysisResult:
        """Analyse the strength of *password*."""
        return self._analyzer.analyze(password)

    # ------------------------------------------------------------------ #
    #  Self-test
    # ------------------------------------------------------------------ #

    def self_test(
        self,
        samples: Optional[int] = None,
        bound: Optional[int] = None,
    ) -> UniformitySuiteResult:
        """Run the chi-squared uniformity suite on the random source."""
        cfg = self.config.selftest
        samples = samples or cfg.samples
        bound = bound or cfg.bound
        self.logger.info("Running uniformity self-test", samples=samples, bound=bound)
        with self.logger.timed("self-test"):
            suite = self._uniformity.run_suite(samples, bound, cfg.shuffle_size)
        if not suite.overall_pass:
            failed = [t.test_name for t in suite.tests if not t.passed]
            self.logger.warning("Uniformity self-test failed: %s", ", ".join(failed))
        return suite
