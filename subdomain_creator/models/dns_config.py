"""
DNS configuration models - records and forwarding rules.
Immutable value objects with a dict form matching the public API contract.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class ForwardType(Enum):
    """Forwarding mode requested for a domain"""
    PERMANENT = "301"
    TEMPORARY = "302"
    TEMPORARY_KEEP_METHOD = "307"
    PERMANENT_KEEP_METHOD = "308"
    PATH = "path"

    @classmethod
    def default(cls) -> 'ForwardType':
        return cls.PERMANENT

    @property
    def is_redirect(self) -> bool:
        return self is not ForwardType.PATH


@dataclass(frozen=True)
class DnsRecord:
    """
    Single DNS record.

    Attributes:
        type: Record type (e.g. 'CNAME')
        name: Record name relative to the zone ('@' or 'www')
        value: Record target
        ttl: Time to live in seconds
    """
    type: str
    name: str
    value: str
    ttl: int

    def __post_init__(self):
        """Validate invariants"""
        if not self.type or not self.name or not self.value:
            raise ValueError("DNS record type, name and value cannot be empty")
        if self.ttl <= 0:
            raise ValueError(f"TTL must be positive (got {self.ttl})")

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "name": self.name, "value": self.value, "ttl": self.ttl}


@dataclass(frozen=True)
class RedirectRule:
    """Whole-domain redirect from `source` to `target`"""
    kind: str
    source: str
    target: str

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.kind, "from": self.source, "to": self.target}


@dataclass(frozen=True)
class PathForwardRule:
    """Forward a path on the platform host to a destination URL"""
    source: str
    destination: str

    def to_dict(self) -> Dict[str, str]:
        return {"source": self.source, "destination": self.destination}


@dataclass(frozen=True)
class DnsConfiguration:
    """
    Generated DNS configuration for a domain.

    Attributes:
        domain: Full domain name the configuration is for
        records: DNS records, in order (never empty)
        forwarding: Optional whole-domain redirect
        path_forwarding: Optional path-forward rule
    """
    domain: str
    records: Tuple[DnsRecord, ...]
    forwarding: Optional[RedirectRule] = None
    path_forwarding: Optional[PathForwardRule] = None

    def __post_init__(self):
        """Validate invariants"""
        object.__setattr__(self, 'records', tuple(self.records))
        if not self.domain:
            raise ValueError("Domain cannot be empty")
        if not self.records:
            raise ValueError(f"DNS configuration for {self.domain} has no records")

    def to_dict(self) -> Dict[str, Any]:
        """Dict form with the public field names (forwarding, pathForwarding)"""
        data: Dict[str, Any] = {
            "domain": self.domain,
            "records": [record.to_dict() for record in self.records],
        }
        if self.forwarding:
            data["forwarding"] = self.forwarding.to_dict()
        if self.path_forwarding:
            data["pathForwarding"] = self.path_forwarding.to_dict()
        return data
