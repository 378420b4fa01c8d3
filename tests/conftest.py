"""
Shared pytest fixtures for subdomain_creator tests
"""
import random

import pytest
from fastapi.testclient import TestClient

from subdomain_creator.checkers import SimulatedChecker
from subdomain_creator.models import ExtensionCatalog
from subdomain_creator.services import ConfigurationSynthesizer, DomainService, SuggestionGenerator
from subdomain_creator.validators import SubdomainValidator
from subdomain_creator.web_ui import create_app


@pytest.fixture
def catalog():
    """Default extension catalog"""
    return ExtensionCatalog()


@pytest.fixture
def validator(catalog):
    """Validator over the default catalog"""
    return SubdomainValidator(catalog)


@pytest.fixture
def synthesizer(catalog):
    """Synthesizer with the default platform host and TTL"""
    return ConfigurationSynthesizer(catalog=catalog)


def make_service(availability_rate, seed=7):
    """Domain service with seeded randomness"""
    return DomainService(
        checker=SimulatedChecker(availability_rate=availability_rate, rng=random.Random(seed)),
        suggestion_generator=SuggestionGenerator(rng=random.Random(seed + 1))
    )


@pytest.fixture
def available_service():
    """Service whose checker always reports available"""
    return make_service(availability_rate=1.0)


@pytest.fixture
def taken_service():
    """Service whose checker always reports taken"""
    return make_service(availability_rate=0.0)


@pytest.fixture
def client(available_service):
    """API client backed by the always-available service"""
    return TestClient(create_app(domain_service=available_service))


@pytest.fixture
def taken_client(taken_service):
    """API client backed by the always-taken service"""
    return TestClient(create_app(domain_service=taken_service))
