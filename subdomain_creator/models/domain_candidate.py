"""
Domain candidate - Value Object pattern.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DomainCandidate:
    """
    A proposed domain, as submitted by the user.

    Not validated on construction: the extension may be arbitrary input
    until the validator has run.

    Attributes:
        subdomain: Name portion preceding the extension
        extension: Domain suffix (e.g. '.dev')
    """
    subdomain: str
    extension: str

    @property
    def full_domain(self) -> str:
        return f"{self.subdomain}{self.extension}"

    def __str__(self) -> str:
        return self.full_domain
