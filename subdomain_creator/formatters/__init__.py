"""
Output formatters - Strategy Pattern for different output formats.
"""

from .base_formatter import OutputFormatter
from .dns_config_formatter import DnsConfigFormatter

__all__ = ['OutputFormatter', 'DnsConfigFormatter']
