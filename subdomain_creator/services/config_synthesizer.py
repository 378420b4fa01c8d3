"""
Configuration Synthesizer - DNS records and forwarding rules for a domain.

For every domain:
- CNAME @   → platform host
- CNAME www → platform host
- redirect from the domain to the target URL
and, in path mode, a path-forward rule /<subdomain> → target URL.
"""

import logging
from typing import Optional

from ..errors import UnsupportedForwardTypeError
from ..models import (
    DnsConfiguration,
    DnsRecord,
    ExtensionCatalog,
    ForwardType,
    PathForwardRule,
    RedirectRule,
)
from ..parsers import DomainParser, TargetUrlParser

logger = logging.getLogger(__name__)


class ConfigurationSynthesizer:
    """
    Builds DnsConfiguration objects.

    The domain is assumed to be validated already and is not checked again.
    """

    DEFAULT_PLATFORM_HOST = "cname.render.com"
    DEFAULT_TTL = 3600
    RECORD_NAMES = ('@', 'www')

    def __init__(self,
                 platform_host: str = DEFAULT_PLATFORM_HOST,
                 ttl: int = DEFAULT_TTL,
                 catalog: Optional[ExtensionCatalog] = None):
        """
        Initialize synthesizer.

        Args:
            platform_host: Canonical CNAME endpoint of the hosting platform
            ttl: TTL for generated records, in seconds
            catalog: Catalog used to find the subdomain portion of a domain
        """
        if not platform_host:
            raise ValueError("Platform host cannot be empty")
        if ttl <= 0:
            raise ValueError(f"TTL must be positive (got {ttl})")

        self.platform_host = platform_host
        self.ttl = ttl
        self.catalog = catalog or ExtensionCatalog()

    @staticmethod
    def parse_forward_type(forward_type: Optional[str]) -> ForwardType:
        """
        Resolve a requested forwarding type.

        Args:
            forward_type: '301', '302', '307', '308', 'path', or None/'' for the default

        Raises:
            UnsupportedForwardTypeError: For any other value
        """
        if not forward_type:
            return ForwardType.default()
        try:
            return ForwardType(forward_type.strip().lower())
        except ValueError:
            supported = ", ".join(t.value for t in ForwardType)
            raise UnsupportedForwardTypeError(
                f"Unsupported forwarding type '{forward_type}' (supported: {supported})"
            ) from None

    def generate_config(self,
                        domain: str,
                        target_url: str,
                        forward_type: Optional[str] = None,
                        subdomain: Optional[str] = None) -> DnsConfiguration:
        """
        Generate the DNS configuration for a domain.

        Args:
            domain: Full domain name (already validated)
            target_url: Absolute URL to forward to
            forward_type: Forwarding mode (see parse_forward_type)
            subdomain: Subdomain portion, when the caller already knows it

        Returns:
            DnsConfiguration

        Raises:
            InvalidTargetUrlError: If target_url is not an absolute URL
            UnsupportedForwardTypeError: If forward_type is not supported
        """
        TargetUrlParser.require_valid(target_url)
        mode = self.parse_forward_type(forward_type)

        records = tuple(
            DnsRecord(type="CNAME", name=name, value=self.platform_host, ttl=self.ttl)
            for name in self.RECORD_NAMES
        )

        forwarding = RedirectRule(kind=mode.value, source=domain, target=target_url)

        path_forwarding = None
        if mode is ForwardType.PATH:
            if subdomain is None:
                subdomain = DomainParser.subdomain_of(domain, self.catalog)
            path_forwarding = PathForwardRule(source=f"/{subdomain}", destination=target_url)

        logger.info(f"Generated DNS configuration for {domain} ({mode.value} → {target_url})")
        return DnsConfiguration(
            domain=domain,
            records=records,
            forwarding=forwarding,
            path_forwarding=path_forwarding
        )
