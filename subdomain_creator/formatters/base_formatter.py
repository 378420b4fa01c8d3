"""
Base output formatter - Abstract base class for formatters.
"""

from abc import ABC, abstractmethod
from ..models import DnsConfiguration


class OutputFormatter(ABC):
    """
    Abstract base class for output formatters.

    Design Pattern: Strategy Pattern
    Different formatters for different output styles (list, table, JSON, zone file).
    """

    @abstractmethod
    def format(self, config: DnsConfiguration) -> str:
        """
        Format a DNS configuration for output.

        Args:
            config: DNS configuration to format

        Returns:
            Formatted string for output
        """
        pass
