"""
PassForge Configuration Management
===================================

Centralized configuration for the PassForge toolkit using Python
dataclasses and TOML-based persistence.

Configuration is separated from code: every tunable (attempt budget,
dictionary location, attacker throughput, self-test sample size, logging)
lives in one TOML file whose sections map onto the dataclasses below.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file, looked up in the current working directory
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path("passforge.toml")


# ========================== Component Configs ==============================


@dataclass(slots=True)
class GeneratorConfig:
    """Configuration for the password generator.

    ``max_attempts`` bounds the compliance loop; ``placement_retry_limit``
    bounds the per-character position redraw of random placement.
    """

    max_attempts: int = 100
    placement_retry_limit: int = 64
    default_preset: str = "medium"
    default_count: int = 1


@dataclass(slots=True)
class AnalyzerConfig:
    """Configuration for strength analysis and dictionary matching.

    Reference:
        NIST SP 800-63B (2017). Section 5.1.1.2, Memorized Secret
        Verifiers.
    """

    dictionary_path: str = "dictionary.txt"
    guesses_per_second: float = 1e10
    recommended_length: int = 12


@dataclass(slots=True)
class SelfTestConfig:
    """Parameters of the entropy source self-test.

    Reference:
        Pearson, K. (1900). On the criterion that a given system of
        deviations from the probable. Philosophical Magazine, 50(302).
    """

    samples: int = 20_000
    bound: int = 62
    shuffle_size: int = 8
    significance: float = 0.001


@dataclass(slots=True)
class GlobalConfig:
    """Settings shared by every component: logging and versioning."""

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(slots=True)
class ForgeConfig:
    """Master configuration aggregating all sections.

    Usage:
        >>> config = ForgeConfig.load()                   # ./passforge.toml
        >>> config = ForgeConfig.load("custom.toml")
        >>> config.generator.max_attempts
        100
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    selftest: SelfTestConfig = field(default_factory=SelfTestConfig)

    @classmethod
    def load(cls, path: str | Path | None = None) -> ForgeConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``passforge.toml`` in the
        working directory and silently falls back to defaults when it is
        absent. Missing keys fall back to dataclass defaults.

        Raises:
            FileNotFoundError: If *path* was given explicitly and does not
                exist.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            generator=cls._build_section(GeneratorConfig, raw.get("generator", {})),
            analyzer=cls._build_section(AnalyzerConfig, raw.get("analyzer", {})),
            selftest=cls._build_section(SelfTestConfig, raw.get("selftest", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(section: type, data: dict[str, Any]) -> Any:
        """Instantiate *section* using only the keys it declares.

        Unknown keys are ignored so newer config files still load.
        """
        valid_keys = {f.name for f in fields(section)}
        return section(**{k: v for k, v in data.items() if k in valid_keys})
