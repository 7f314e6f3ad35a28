"""
Forge Output Module
====================

Console display for PassForge results.
"""

from forge.output.console import ForgeConsoleOutput

__all__ = ["ForgeConsoleOutput"]
