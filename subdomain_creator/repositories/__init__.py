"""
Repositories and factories - Factory Pattern implementation.
"""

from .checker_factory import CheckerFactory

__all__ = ['CheckerFactory']
