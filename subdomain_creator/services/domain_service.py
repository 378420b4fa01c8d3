"""
Domain Service - Main business logic for domain requests.

Coordinates validation, availability checking, suggestions and
DNS configuration generation.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .config_synthesizer import ConfigurationSynthesizer
from .suggestion_service import SuggestionGenerator
from ..checkers import AvailabilityChecker, SimulatedChecker
from ..errors import MissingInputError
from ..models import (
    AvailabilityResult,
    DnsConfiguration,
    DomainCandidate,
    ExtensionCatalog,
    ValidationResult,
)
from ..validators import SubdomainValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DomainCheckOutcome:
    """
    Result of checking a domain request.

    availability is only set when validation passed.
    """
    candidate: DomainCandidate
    validation: ValidationResult
    availability: Optional[AvailabilityResult] = None

    @property
    def is_valid(self) -> bool:
        return self.validation.is_valid


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class DomainService:
    """
    Main domain service - orchestrates a domain request.

    Design Pattern: Facade Pattern
    Provides a simple interface to the validator, availability checker,
    suggestion generator and configuration synthesizer.
    """

    def __init__(self,
                 catalog: Optional[ExtensionCatalog] = None,
                 checker: Optional[AvailabilityChecker] = None,
                 suggestion_generator: Optional[SuggestionGenerator] = None,
                 synthesizer: Optional[ConfigurationSynthesizer] = None):
        """
        Initialize domain service.

        Args:
            catalog: Allowed extensions (default catalog if not given)
            checker: Availability checker (simulated if not given)
            suggestion_generator: Suggestion generator
            synthesizer: DNS configuration synthesizer
        """
        self.catalog = catalog or ExtensionCatalog()
        self.validator = SubdomainValidator(self.catalog)
        self.checker = checker or SimulatedChecker()
        self.suggestion_generator = suggestion_generator or SuggestionGenerator()
        self.synthesizer = synthesizer or ConfigurationSynthesizer(catalog=self.catalog)

    def list_extensions(self) -> List[str]:
        """Get the extension catalog in display order"""
        return self.catalog.to_list()

    def check_domain(self, subdomain: Optional[str], extension: Optional[str]) -> DomainCheckOutcome:
        """
        Validate a domain request and, if valid, check availability.

        Args:
            subdomain: Proposed subdomain
            extension: Proposed extension

        Returns:
            DomainCheckOutcome

        Raises:
            MissingInputError: If subdomain or extension is missing or blank
        """
        if _is_blank(subdomain) or _is_blank(extension):
            raise MissingInputError("Subdomain and extension are required")

        candidate = DomainCandidate(subdomain=subdomain, extension=extension)
        validation = self.validator.validate_candidate(candidate)

        if not validation.is_valid:
            logger.info(f"Rejected {candidate.full_domain}: {len(validation.errors)} validation error(s)")
            return DomainCheckOutcome(candidate=candidate, validation=validation)

        availability = self.checker.check(candidate)
        logger.info(f"Checked {candidate.full_domain} with {self.checker.checker_name} checker: "
                    f"{'available' if availability.available else 'taken'}")
        return DomainCheckOutcome(candidate=candidate, validation=validation, availability=availability)

    def suggest(self, keyword: Optional[str], extension: Optional[str]) -> List[str]:
        """Generate alternative names for a keyword"""
        return self.suggestion_generator.suggest(keyword, extension)

    def generate_config(self,
                        subdomain: Optional[str],
                        extension: Optional[str],
                        target_url: Optional[str],
                        forward_type: Optional[str] = None) -> DnsConfiguration:
        """
        Generate DNS configuration for a chosen domain.

        Raises:
            MissingInputError: If subdomain, extension or target_url is missing
            InvalidTargetUrlError: If target_url is not an absolute URL
            UnsupportedForwardTypeError: If forward_type is not supported
        """
        if _is_blank(subdomain) or _is_blank(extension) or _is_blank(target_url):
            raise MissingInputError("All fields are required")

        candidate = DomainCandidate(subdomain=subdomain, extension=extension)
        return self.synthesizer.generate_config(
            candidate.full_domain,
            target_url,
            forward_type=forward_type,
            subdomain=candidate.subdomain
        )


def initialize_domain_service() -> DomainService:
    """
    Initialize domain service from configuration.

    Returns:
        Configured DomainService instance
    """
    from ..config import AvailabilityConfig, DnsConfig
    from ..repositories import CheckerFactory

    catalog = ExtensionCatalog.from_string(DnsConfig.SUPPORTED_EXTENSIONS)
    seed = AvailabilityConfig.get_seed()

    checker = CheckerFactory.create_from_name(
        AvailabilityConfig.CHECKER_TYPE,
        availability_rate=AvailabilityConfig.AVAILABILITY_RATE,
        seed=seed
    )

    # Offset so the two components do not replay the same sequence
    suggestion_generator = SuggestionGenerator(seed=seed + 1 if seed is not None else None)

    synthesizer = ConfigurationSynthesizer(
        platform_host=DnsConfig.PLATFORM_HOST,
        ttl=DnsConfig.RECORD_TTL,
        catalog=catalog
    )

    logger.info(f"Domain service initialized: {len(catalog)} extensions, "
                f"checker={checker.checker_name}, seeded={seed is not None}")

    return DomainService(
        catalog=catalog,
        checker=checker,
        suggestion_generator=suggestion_generator,
        synthesizer=synthesizer
    )
