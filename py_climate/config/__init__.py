"""
Runtime configuration for the climate simulation.
"""

from .config import Settings, settings

__all__ = ['Settings', 'settings']
