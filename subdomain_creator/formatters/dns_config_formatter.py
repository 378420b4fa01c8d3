"""
DNS configuration formatter.

List output:
Domain: myshop.dev
  Records:
    - CNAME @ → cname.render.com (TTL 3600)
    - CNAME www → cname.render.com (TTL 3600)
  Forwarding:
    - 301: myshop.dev → https://example.com

Zone output (BIND style):
@    3600 IN CNAME cname.render.com.
www  3600 IN CNAME cname.render.com.
"""

import json
from .base_formatter import OutputFormatter
from ..models import DnsConfiguration


class DnsConfigFormatter(OutputFormatter):
    """
    Formatter for generated DNS configurations.

    Design Pattern: Strategy Pattern implementation
    """

    FORMATS = ("list", "table", "json", "zone")

    def __init__(self, output_format: str = "list"):
        """
        Initialize formatter.

        Args:
            output_format: Output format type ('list', 'table', 'json', 'zone')
        """
        if output_format not in self.FORMATS:
            raise ValueError(f"Unknown output format: {output_format}")
        self.output_format = output_format

    def format(self, config: DnsConfiguration) -> str:
        """
        Format a DNS configuration.

        Args:
            config: DNS configuration

        Returns:
            Formatted output string
        """
        if self.output_format == "json":
            return self._format_json(config)
        elif self.output_format == "table":
            return self._format_table(config)
        elif self.output_format == "zone":
            return self._format_zone(config)
        else:  # list (default)
            return self._format_list(config)

    def _format_list(self, config: DnsConfiguration) -> str:
        """Format as simple indented list"""
        lines = [f"\nDomain: {config.domain}", "=" * 60, "\n  Records:"]

        for record in config.records:
            lines.append(f"    - {record.type} {record.name} → {record.value} (TTL {record.ttl})")

        if config.forwarding or config.path_forwarding:
            lines.append("\n  Forwarding:")
        if config.forwarding:
            fwd = config.forwarding
            lines.append(f"    - {fwd.kind}: {fwd.source} → {fwd.target}")
        if config.path_forwarding:
            path = config.path_forwarding
            lines.append(f"    - path: {path.source} → {path.destination}")

        return "\n".join(lines)

    def _format_table(self, config: DnsConfiguration) -> str:
        """Format records as a table"""
        lines = []

        lines.append("\n{:<8} {:<10} {:<40} {:>6}".format("TYPE", "NAME", "VALUE", "TTL"))
        lines.append("=" * 67)

        for record in config.records:
            lines.append("{:<8} {:<10} {:<40} {:>6}".format(
                record.type,
                record.name,
                record.value,
                record.ttl
            ))

        if config.forwarding:
            lines.append("")
            lines.append("{:<8} {:<30} {:<40}".format("REDIRECT", "FROM", "TO"))
            lines.append("=" * 80)
            lines.append("{:<8} {:<30} {:<40}".format(
                config.forwarding.kind,
                config.forwarding.source,
                config.forwarding.target
            ))

        if config.path_forwarding:
            lines.append("{:<8} {:<30} {:<40}".format(
                "path",
                config.path_forwarding.source,
                config.path_forwarding.destination
            ))

        return "\n".join(lines)

    def _format_json(self, config: DnsConfiguration) -> str:
        """Format as JSON using the public API field names"""
        return json.dumps(config.to_dict(), indent=2, ensure_ascii=False)

    def _format_zone(self, config: DnsConfiguration) -> str:
        """Format records as zone file lines (forwarding has no DNS form)"""
        lines = [f"; {config.domain}"]
        for record in config.records:
            value = record.value if record.value.endswith(".") else f"{record.value}."
            lines.append(f"{record.name:<4} {record.ttl} IN {record.type} {value}")
        return "\n".join(lines)
