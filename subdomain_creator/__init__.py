"""
Subdomain Creator Package

Checks proposed subdomain + extension pairs, suggests alternatives for
taken names, and generates DNS records plus forwarding rules that point
a domain at a target URL. Availability is simulated; no registrar or
DNS provider is contacted.

Architecture:
- Strategy Pattern for availability checkers
- Factory Pattern for creating checkers
- Facade Pattern for the domain service
- Value Object Pattern for immutable data models
"""

from .errors import (
    DomainRequestError,
    MissingInputError,
    InvalidTargetUrlError,
    UnsupportedForwardTypeError,
)
from .models import (
    ExtensionCatalog,
    DomainCandidate,
    ValidationResult,
    AvailabilityResult,
    ForwardType,
    DnsRecord,
    RedirectRule,
    PathForwardRule,
    DnsConfiguration,
)
from .validators import SubdomainValidator
from .checkers import AvailabilityChecker, CheckerType, SimulatedChecker
from .repositories import CheckerFactory
from .services import DomainService, SuggestionGenerator, ConfigurationSynthesizer
from .formatters import DnsConfigFormatter

__all__ = [
    # Errors
    "DomainRequestError",
    "MissingInputError",
    "InvalidTargetUrlError",
    "UnsupportedForwardTypeError",
    # Models
    "ExtensionCatalog",
    "DomainCandidate",
    "ValidationResult",
    "AvailabilityResult",
    "ForwardType",
    "DnsRecord",
    "RedirectRule",
    "PathForwardRule",
    "DnsConfiguration",
    # Validation
    "SubdomainValidator",
    # Checkers
    "AvailabilityChecker",
    "CheckerType",
    "SimulatedChecker",
    # Factory
    "CheckerFactory",
    # Services
    "DomainService",
    "SuggestionGenerator",
    "ConfigurationSynthesizer",
    # Formatters
    "DnsConfigFormatter",
]
