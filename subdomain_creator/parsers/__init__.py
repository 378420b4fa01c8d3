"""
Parser utilities for extracting structured data from user input.
"""

from .domain_parser import DomainParser
from .url_parser import TargetUrlParser

__all__ = ['DomainParser', 'TargetUrlParser']
