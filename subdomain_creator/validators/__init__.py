"""
Input validators.
"""

from .subdomain_validator import SubdomainValidator

__all__ = ['SubdomainValidator']
