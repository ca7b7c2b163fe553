"""
Shared utilities: seeded random streams and logging setup.
"""

from .random import RandomStream
from .logging import configure_logging

__all__ = ['RandomStream', 'configure_logging']
