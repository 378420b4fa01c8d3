"""
Tests for the domain service facade
"""
import pytest

from subdomain_creator.checkers import SimulatedChecker
from subdomain_creator.config import AvailabilityConfig, DnsConfig
from subdomain_creator.errors import InvalidTargetUrlError, MissingInputError
from subdomain_creator.services import DomainService, initialize_domain_service
from subdomain_creator.validators import SubdomainValidator


def test_list_extensions(available_service):
    """Test catalog is exposed in order"""
    extensions = available_service.list_extensions()
    assert extensions[0] == ".net"
    assert ".is.dev" in extensions


def test_check_valid_available(available_service):
    """Test valid domain gets an availability result"""
    outcome = available_service.check_domain("myshop", ".dev")
    assert outcome.is_valid
    assert outcome.availability.domain == "myshop.dev"
    assert outcome.availability.available is True
    assert outcome.availability.message == "Domain is available"


def test_check_valid_taken(taken_service):
    """Test taken domain"""
    outcome = taken_service.check_domain("myshop", ".dev")
    assert outcome.availability.available is False
    assert outcome.availability.message == "Domain may be taken"


def test_check_invalid_skips_availability(available_service):
    """Test availability is not computed for invalid input"""
    outcome = available_service.check_domain("ab", ".zz")
    assert not outcome.is_valid
    assert outcome.availability is None
    assert outcome.validation.errors == (
        SubdomainValidator.TOO_SHORT,
        SubdomainValidator.UNSUPPORTED_EXTENSION,
    )


@pytest.mark.parametrize("subdomain,extension", [
    (None, ".dev"),
    ("", ".dev"),
    ("   ", ".dev"),
    ("myshop", None),
    ("myshop", ""),
])
def test_check_missing_input(available_service, subdomain, extension):
    """Test blank fields are a missing-input error, not a validation failure"""
    with pytest.raises(MissingInputError, match="Subdomain and extension are required"):
        available_service.check_domain(subdomain, extension)


def test_suggest(available_service):
    """Test suggestions delegate to the generator"""
    suggestions = available_service.suggest("myshop", ".io")
    assert suggestions[:3] == ["myshop.io", "myshop-app.io", "my-myshop.io"]
    assert len(suggestions) <= 8


def test_generate_config(available_service):
    """Test configuration for subdomain + extension"""
    config = available_service.generate_config("shop", ".is.dev", "https://example.com", "path")
    assert config.domain == "shop.is.dev"
    assert config.path_forwarding.source == "/shop"


@pytest.mark.parametrize("fields", [
    (None, ".dev", "https://example.com"),
    ("shop", "", "https://example.com"),
    ("shop", ".dev", None),
])
def test_generate_config_missing_input(available_service, fields):
    """Test every generate field is required"""
    with pytest.raises(MissingInputError, match="All fields are required"):
        available_service.generate_config(*fields)


def test_generate_config_invalid_url(available_service):
    """Test invalid target URL propagates"""
    with pytest.raises(InvalidTargetUrlError):
        available_service.generate_config("shop", ".dev", "not-a-url", "301")


def test_initialize_from_config(monkeypatch):
    """Test service is assembled from settings"""
    monkeypatch.setattr(DnsConfig, "PLATFORM_HOST", "edge.example.net")
    monkeypatch.setattr(DnsConfig, "RECORD_TTL", 600)
    monkeypatch.setattr(DnsConfig, "SUPPORTED_EXTENSIONS", ".dev,.test")
    monkeypatch.setattr(AvailabilityConfig, "CHECKER_TYPE", "simulated")
    monkeypatch.setattr(AvailabilityConfig, "AVAILABILITY_RATE", 1.0)
    monkeypatch.setattr(AvailabilityConfig, "RANDOM_SEED", "5")

    service = initialize_domain_service()

    assert isinstance(service, DomainService)
    assert service.list_extensions() == [".dev", ".test"]
    assert isinstance(service.checker, SimulatedChecker)
    assert service.check_domain("shop", ".test").availability.available is True

    config = service.generate_config("shop", ".dev", "https://example.com")
    assert {(r.value, r.ttl) for r in config.records} == {("edge.example.net", 600)}


def test_initialize_with_seed_is_reproducible(monkeypatch):
    """Test a configured seed makes two services agree"""
    monkeypatch.setattr(AvailabilityConfig, "RANDOM_SEED", "99")
    first = initialize_domain_service()
    second = initialize_domain_service()

    assert first.suggest("", ".dev") == second.suggest("", ".dev")
    assert ([first.check_domain("shop", ".dev").availability.available for _ in range(10)] ==
            [second.check_domain("shop", ".dev").availability.available for _ in range(10)])
