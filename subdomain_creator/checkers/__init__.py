"""
Availability checker implementations - Strategy Pattern.
Each checker decides whether a validated domain candidate is available.
"""

from .base_checker import AvailabilityChecker, CheckerType
from .simulated_checker import SimulatedChecker

__all__ = [
    'AvailabilityChecker',
    'CheckerType',
    'SimulatedChecker',
]
