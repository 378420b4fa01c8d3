"""
Data models and value objects.
Following Domain-Driven Design patterns for immutable data structures.
"""

from .extension_catalog import ExtensionCatalog, DEFAULT_EXTENSIONS
from .domain_candidate import DomainCandidate
from .validation_result import ValidationResult
from .availability_result import AvailabilityResult
from .dns_config import (
    ForwardType,
    DnsRecord,
    RedirectRule,
    PathForwardRule,
    DnsConfiguration,
)

__all__ = [
    'ExtensionCatalog',
    'DEFAULT_EXTENSIONS',
    'DomainCandidate',
    'ValidationResult',
    'AvailabilityResult',
    'ForwardType',
    'DnsRecord',
    'RedirectRule',
    'PathForwardRule',
    'DnsConfiguration',
]
