"""
Validation result model.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating a domain candidate.

    Valid when no errors were collected, Invalid otherwise.

    Attributes:
        errors: Error messages in rule order (empty when valid)
    """
    errors: Tuple[str, ...] = ()

    @classmethod
    def valid(cls) -> 'ValidationResult':
        return cls()

    @classmethod
    def invalid(cls, errors: Iterable[str]) -> 'ValidationResult':
        """
        Create an Invalid result.

        Raises:
            ValueError: If no error messages are given
        """
        errors = tuple(errors)
        if not errors:
            raise ValueError("Invalid result requires at least one error")
        return cls(errors=errors)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid
