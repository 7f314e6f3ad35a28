"""
PassForge Shared Module
=======================

Configuration, logging, console and statistics utilities shared by the
PassForge tools.
"""

from shared.config import ForgeConfig

__all__ = ["ForgeConfig"]
