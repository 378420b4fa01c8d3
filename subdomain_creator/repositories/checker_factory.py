"""
Checker Factory - Factory Pattern implementation.
Creates availability checker instances based on checker type.
"""

import logging
from typing import Any, Dict, Type

from ..checkers import AvailabilityChecker, CheckerType, SimulatedChecker

logger = logging.getLogger(__name__)


class CheckerFactory:
    """
    Factory for creating availability checker instances.

    Design Pattern: Factory Pattern + Registry Pattern
    Registers all available checkers and creates instances on demand.
    """

    # Checker registry
    _CHECKERS: Dict[CheckerType, Type[AvailabilityChecker]] = {
        CheckerType.SIMULATED: SimulatedChecker,
    }

    @classmethod
    def create_checker(cls, checker_type: CheckerType, **options: Any) -> AvailabilityChecker:
        """
        Create an availability checker instance.

        Args:
            checker_type: Type of checker
            **options: Checker-specific constructor arguments

        Returns:
            Initialized checker instance

        Raises:
            ValueError: If checker type is not supported
        """
        checker_class = cls._CHECKERS.get(checker_type)

        if not checker_class:
            raise ValueError(f"Unknown checker type: {checker_type}")

        logger.debug(f"Creating availability checker: {checker_type.value}")
        return checker_class(**options)

    @classmethod
    def create_from_name(cls, name: str, **options: Any) -> AvailabilityChecker:
        """
        Create a checker from its configured name (e.g. 'simulated').

        Raises:
            ValueError: If no checker is registered under that name
        """
        try:
            checker_type = CheckerType(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown checker type: {name}") from None
        return cls.create_checker(checker_type, **options)

    @classmethod
    def get_supported_checkers(cls) -> list[CheckerType]:
        """
        Get list of supported checkers.

        Returns:
            List of supported CheckerType values
        """
        return list(cls._CHECKERS.keys())

    @classmethod
    def register_checker(cls, checker_type: CheckerType, checker_class: Type[AvailabilityChecker]):
        """
        Register a new checker (for extensibility).

        Args:
            checker_type: Checker type
            checker_class: Checker class to register
        """
        cls._CHECKERS[checker_type] = checker_class
        logger.info(f"Registered availability checker: {checker_type.value}")
