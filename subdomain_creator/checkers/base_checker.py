"""
Base availability checker - Abstract base class using Strategy Pattern.
Defines the interface that all availability checkers must implement.
"""

from abc import ABC, abstractmethod
from enum import Enum

from ..models import AvailabilityResult, DomainCandidate


class CheckerType(Enum):
    """Availability checker enumeration"""
    SIMULATED = "simulated"


class AvailabilityChecker(ABC):
    """
    Abstract base class for availability checkers.

    Design Pattern: Strategy Pattern
    Callers depend only on this interface; a registry lookup checker can
    be registered alongside the simulated one without changing them.

    Checkers are only invoked for candidates that passed validation.
    """

    AVAILABLE_MESSAGE = "Domain is available"
    TAKEN_MESSAGE = "Domain may be taken"

    @property
    @abstractmethod
    def checker_name(self) -> str:
        """Return checker name"""
        pass

    @abstractmethod
    def check(self, candidate: DomainCandidate) -> AvailabilityResult:
        """
        Decide whether a domain candidate is available.

        Args:
            candidate: Validated domain candidate

        Returns:
            AvailabilityResult for candidate.full_domain
        """
        pass

    def _result(self, candidate: DomainCandidate, available: bool) -> AvailabilityResult:
        """Build a result with the standard message for the flag"""
        return AvailabilityResult(
            domain=candidate.full_domain,
            available=available,
            message=self.AVAILABLE_MESSAGE if available else self.TAKEN_MESSAGE
        )
