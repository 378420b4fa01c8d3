"""
Target URL parser for forwarding rules.

A target must be an absolute URL: scheme plus a well-formed host.
- https://example.com → valid
- https://example.com/path?q=1 → valid
- example.com → invalid (no scheme)
- https://exa mple.com → invalid (space in host)
- https://. → invalid (empty host labels)
- not-a-url → invalid
"""

import re
from typing import Optional

from pydantic import AnyUrl, TypeAdapter, ValidationError

from ..errors import InvalidTargetUrlError


class TargetUrlParser:
    """Parser for forwarding target URLs"""

    # Host labels after IDNA encoding
    HOST_LABEL_PATTERN = re.compile(r'[A-Za-z0-9_-]+')

    _url_adapter = TypeAdapter(AnyUrl)

    @classmethod
    def is_valid(cls, url: Optional[str]) -> bool:
        """
        Check if a string is an absolute URL with a scheme and host.

        Args:
            url: Candidate URL

        Returns:
            True if url can be used as a forwarding target
        """
        if not url or url != url.strip():
            return False

        try:
            parsed = cls._url_adapter.validate_python(url)
        except ValidationError:
            return False

        return cls.is_valid_host(parsed.host)

    @classmethod
    def is_valid_host(cls, host: Optional[str]) -> bool:
        """
        Check host syntax: IPv6 literal, or dot-separated non-empty labels.

        A single trailing dot (fully qualified name) is allowed.
        """
        if not host:
            return False

        # IPv6 literals are checked by the URL parser
        if ":" in host:
            return True

        if host.endswith("."):
            host = host[:-1]

        return all(cls.HOST_LABEL_PATTERN.fullmatch(label) for label in host.split("."))

    @classmethod
    def require_valid(cls, url: Optional[str]) -> str:
        """
        Return url unchanged if valid.

        Raises:
            InvalidTargetUrlError: If url is not an absolute URL
        """
        if not cls.is_valid(url):
            raise InvalidTargetUrlError(f"Invalid target URL: {url!r} (expected e.g. https://example.com)")
        return url
