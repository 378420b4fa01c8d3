"""
Domain parser for splitting full domain names into subdomain and extension.

Examples:
- myshop.dev → ('myshop', '.dev')
- myshop.is.dev → ('myshop', '.is.dev') (longest catalog match)
- myshop.example → ('myshop', '.example') (no catalog match, first dot)
"""

from typing import Optional

from ..models import DomainCandidate, ExtensionCatalog


class DomainParser:
    """
    Parser for full domain names.

    Catalog extensions are matched first so multi-label extensions
    such as '.is.dev' are kept whole.
    """

    @classmethod
    def split_domain(cls, domain: str, catalog: Optional[ExtensionCatalog] = None) -> DomainCandidate:
        """
        Split a full domain into subdomain and extension.

        Args:
            domain: Full domain name
            catalog: Catalog used to recognise the extension

        Returns:
            DomainCandidate (extension is empty if the domain has no dot)
        """
        domain = domain.strip()

        if catalog is not None:
            extension = catalog.match_extension(domain)
            if extension:
                return DomainCandidate(subdomain=domain[:-len(extension)], extension=extension)

        subdomain, dot, rest = domain.partition('.')
        return DomainCandidate(subdomain=subdomain, extension=f"{dot}{rest}")

    @classmethod
    def subdomain_of(cls, domain: str, catalog: Optional[ExtensionCatalog] = None) -> str:
        """
        Get the subdomain portion of a full domain name.

        >>> DomainParser.subdomain_of('abc.is.dev', ExtensionCatalog())
        'abc'
        """
        return cls.split_domain(domain, catalog).subdomain
