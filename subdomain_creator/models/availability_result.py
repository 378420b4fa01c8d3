"""
Availability result model.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AvailabilityResult:
    """
    Availability decision for one domain. Computed per request, never cached.

    Attributes:
        domain: Full domain name that was checked
        available: Whether the domain is (notionally) available
        message: Optional human-readable summary
    """
    domain: str
    available: bool
    message: Optional[str] = None

    def __post_init__(self):
        """Validate invariants"""
        if not self.domain:
            raise ValueError("Domain cannot be empty")
