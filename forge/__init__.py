"""
PassForge Forge -- Password Generation & Strength Analysis
===========================================================

Generates passwords from declarative composition rules using unbiased
CSPRNG sampling, and analyses arbitrary passwords for strength.

Modules:
    - forge.core.engine: Central orchestrator
    - forge.core.models: Pydantic data models
    - forge.core.errors: Generation failure types
    - forge.generators: Random source, charset, constraint injection, generation loop
    - forge.analyzers: Compliance checks, dictionary, strength, uniformity self-test
    - forge.output: Console output
    - forge.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - NIST SP 800-90A Rev. 1 (2015). Random Number Generation Using DRBGs.
"""

__version__ = "1.0.0"
__tool_name__ = "forge"
