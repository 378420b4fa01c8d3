"""
Subdomain validator - syntax and extension rules for domain candidates.

Every rule is evaluated independently and all violations are reported
together, in rule order:
1. Length between 3 and 63 characters
2. Only letters, numbers, and hyphens
3. No leading or trailing hyphen
4. Extension is in the catalog
"""

import logging
import re
from typing import Callable, List, Optional, Tuple

from ..models import DomainCandidate, ExtensionCatalog, ValidationResult

logger = logging.getLogger(__name__)

Rule = Callable[[str, str], bool]


class SubdomainValidator:
    """
    Validator for subdomain + extension pairs.

    Stateless once constructed; validate() is a pure function of its inputs.
    """

    MIN_LENGTH = 3
    MAX_LENGTH = 63

    # At least one character, so the empty string fails this rule too
    ALLOWED_CHARS_PATTERN = re.compile(r'[A-Za-z0-9-]+')

    TOO_SHORT = "Subdomain must be at least 3 characters long"
    TOO_LONG = "Subdomain must be less than 64 characters"
    INVALID_CHARACTERS = "Subdomain can only contain letters, numbers, and hyphens"
    HYPHEN_PLACEMENT = "Subdomain cannot start or end with a hyphen"
    UNSUPPORTED_EXTENSION = "Unsupported domain extension"

    def __init__(self, catalog: Optional[ExtensionCatalog] = None):
        """
        Initialize validator.

        Args:
            catalog: Allowed extensions (default catalog if not given)
        """
        self.catalog = catalog or ExtensionCatalog()

        # (violation predicate, error message) in reporting order
        self._rules: List[Tuple[Rule, str]] = [
            (lambda sub, ext: len(sub) < self.MIN_LENGTH, self.TOO_SHORT),
            (lambda sub, ext: len(sub) > self.MAX_LENGTH, self.TOO_LONG),
            (lambda sub, ext: not self.ALLOWED_CHARS_PATTERN.fullmatch(sub), self.INVALID_CHARACTERS),
            (lambda sub, ext: sub.startswith('-') or sub.endswith('-'), self.HYPHEN_PLACEMENT),
            (lambda sub, ext: not self.catalog.contains(ext), self.UNSUPPORTED_EXTENSION),
        ]

    def validate(self, subdomain: str, extension: str) -> ValidationResult:
        """
        Validate a subdomain and extension.

        Args:
            subdomain: Proposed subdomain
            extension: Proposed extension

        Returns:
            ValidationResult carrying every triggered error message
        """
        errors = [message for violated, message in self._rules if violated(subdomain, extension)]

        if errors:
            logger.debug(f"Validation failed for '{subdomain}{extension}': {errors}")
            return ValidationResult.invalid(errors)

        return ValidationResult.valid()

    def validate_candidate(self, candidate: DomainCandidate) -> ValidationResult:
        """Validate a DomainCandidate"""
        return self.validate(candidate.subdomain, candidate.extension)
