"""
Config Module

YAML and environment configuration loading and validation.
"""

from .loader import ConfigLoader, AnalysisConfig

__all__ = [
    "ConfigLoader",
    "AnalysisConfig",
]
