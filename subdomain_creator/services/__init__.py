"""
Services - domain request orchestration.
"""

from .domain_service import DomainService, DomainCheckOutcome, initialize_domain_service
from .suggestion_service import SuggestionGenerator
from .config_synthesizer import ConfigurationSynthesizer

__all__ = [
    'DomainService',
    'DomainCheckOutcome',
    'initialize_domain_service',
    'SuggestionGenerator',
    'ConfigurationSynthesizer',
]
