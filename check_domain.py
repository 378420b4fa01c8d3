#!/usr/bin/env python3
"""
Subdomain Checker - command-line front end for the domain service

Checks a proposed subdomain, suggests alternatives when it is taken,
and prints the DNS configuration that points it at a target URL.

Usage:
    python check_domain.py myshop --extension .dev
    python check_domain.py myshop -x .io --suggest
    python check_domain.py myshop -x .dev --target-url https://example.com
    python check_domain.py myshop -x .dev --target-url https://example.com --type path --format zone
    python check_domain.py --list-extensions
"""

import argparse
import json
import logging
import sys

from subdomain_creator.config import AppConfig, load_environment, validate_config
from subdomain_creator.errors import DomainRequestError
from subdomain_creator.formatters import DnsConfigFormatter
from subdomain_creator.models import ForwardType
from subdomain_creator.services import DomainService, SuggestionGenerator, initialize_domain_service
from subdomain_creator.checkers import SimulatedChecker


# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check a subdomain and generate its DNS forwarding configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check availability
  python check_domain.py myshop --extension .dev

  # Always show suggestions
  python check_domain.py myshop -x .io --suggest

  # Generate DNS records and a 302 redirect
  python check_domain.py myshop -x .dev --target-url https://example.com --type 302

  # Reproducible simulated result, JSON output
  python check_domain.py myshop -x .dev --seed 42 --format json
        """
    )

    parser.add_argument(
        "subdomain",
        nargs="?",
        help="Subdomain to check (e.g. myshop)"
    )

    parser.add_argument(
        "--extension", "-x",
        help="Domain extension (e.g. .dev); see --list-extensions"
    )

    parser.add_argument(
        "--list-extensions",
        action="store_true",
        help="List supported extensions and exit"
    )

    parser.add_argument(
        "--suggest", "-s",
        action="store_true",
        help="Show suggestions even if the domain is available"
    )

    parser.add_argument(
        "--target-url", "-t",
        help="Generate DNS configuration forwarding to this URL"
    )

    parser.add_argument(
        "--type",
        dest="forward_type",
        choices=[t.value for t in ForwardType],
        default=ForwardType.default().value,
        help="Forwarding type (default: 301)"
    )

    parser.add_argument(
        "--format", "-f",
        choices=list(DnsConfigFormatter.FORMATS),
        default=AppConfig.DEFAULT_OUTPUT_FORMAT,
        help=f"Output format: list, table, json, or zone (default: {AppConfig.DEFAULT_OUTPUT_FORMAT})"
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Seed the simulated availability check and suggestions"
    )

    parser.add_argument(
        "--env-file", "-e",
        help="Path to .env file"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser


def create_service(seed=None) -> DomainService:
    """Build the service from configuration, optionally with seeded randomness"""
    service = initialize_domain_service()
    if seed is None:
        return service

    checker = service.checker
    if isinstance(checker, SimulatedChecker):
        checker = SimulatedChecker(availability_rate=checker.availability_rate, seed=seed)

    return DomainService(
        catalog=service.catalog,
        checker=checker,
        suggestion_generator=SuggestionGenerator(seed=seed + 1),
        synthesizer=service.synthesizer
    )


def run(args, out=None) -> int:
    """
    Execute a parsed command line.

    Returns:
        Process exit code
    """
    service = create_service(args.seed)

    if args.list_extensions:
        if args.format == "json":
            print(json.dumps({"extensions": service.list_extensions()}, indent=2), file=out)
        else:
            print("\n".join(service.list_extensions()), file=out)
        return 0

    outcome = service.check_domain(args.subdomain, args.extension)
    json_output = args.format == "json"
    result = {}

    if not outcome.is_valid:
        if json_output:
            print(json.dumps({"valid": False, "errors": list(outcome.validation.errors)}, indent=2), file=out)
        else:
            print(f"\n❌ {outcome.candidate.full_domain} is not a valid domain:", file=out)
            for error in outcome.validation.errors:
                print(f"  - {error}", file=out)
        return 1

    availability = outcome.availability
    result.update({
        "valid": True,
        "available": availability.available,
        "domain": availability.domain,
        "message": availability.message,
    })
    if not json_output:
        icon = "✅" if availability.available else "⚠️"
        print(f"\n{icon} {availability.domain}: {availability.message}", file=out)

    if args.suggest or not availability.available:
        suggestions = service.suggest(args.subdomain, args.extension)
        result["suggestions"] = suggestions
        if not json_output:
            print("\nSuggestions:", file=out)
            for suggestion in suggestions:
                print(f"  - {suggestion}", file=out)

    if args.target_url:
        config = service.generate_config(args.subdomain, args.extension, args.target_url, args.forward_type)
        if json_output:
            result["config"] = config.to_dict()
        else:
            print(DnsConfigFormatter(output_format=args.format).format(config), file=out)

    if json_output:
        print(json.dumps(result, indent=2, ensure_ascii=False), file=out)

    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.list_extensions and not args.subdomain:
        parser.error("subdomain is required unless --list-extensions is given")

    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)
        logging.getLogger('subdomain_creator').setLevel(logging.DEBUG)

    if args.env_file:
        load_environment(args.env_file)
        logger.info(f"Loaded environment from {args.env_file}")

    try:
        validate_config()
    except ValueError as e:
        print(f"\n❌ {e}", file=sys.stderr)
        return 1

    try:
        return run(args)
    except DomainRequestError as e:
        print(f"\n❌ {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        return 130
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        print(f"\n❌ Unexpected error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
