"""
Simulated availability checker

Reports a weighted random result instead of querying WHOIS or a registrar.
"""

import logging
import random
from typing import Optional

from .base_checker import AvailabilityChecker
from ..models import AvailabilityResult, DomainCandidate

logger = logging.getLogger(__name__)


class SimulatedChecker(AvailabilityChecker):
    """
    Coin-flip availability checker for demos and tests.

    No lookup is performed. A domain is reported available with probability
    `availability_rate` (70% by default).
    """

    DEFAULT_AVAILABILITY_RATE = 0.7

    def __init__(self,
                 availability_rate: float = DEFAULT_AVAILABILITY_RATE,
                 rng: Optional[random.Random] = None,
                 seed: Optional[int] = None):
        """
        Initialize checker.

        Args:
            availability_rate: Probability of reporting a domain as available
            rng: Random source to draw from (takes precedence over seed)
            seed: Seed for a private random source, for reproducible runs

        Without rng or seed, draws come from random.SystemRandom.
        """
        if not 0.0 <= availability_rate <= 1.0:
            raise ValueError(f"Availability rate must be between 0 and 1 (got {availability_rate})")

        self.availability_rate = availability_rate
        if rng is not None:
            self._rng = rng
        elif seed is not None:
            self._rng = random.Random(seed)
        else:
            self._rng = random.SystemRandom()

    @property
    def checker_name(self) -> str:
        return "simulated"

    def check(self, candidate: DomainCandidate) -> AvailabilityResult:
        """Flip a weighted coin for the candidate"""
        available = self._rng.random() < self.availability_rate
        logger.debug(f"Simulated availability for {candidate.full_domain}: {available}")
        return self._result(candidate, available)
