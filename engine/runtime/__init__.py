"""
Runtime Module

Analysis coordinator, report rendering and the command line entry point.
"""

from .coordinator import GraphCoordinator

__all__ = [
    "GraphCoordinator",
]
