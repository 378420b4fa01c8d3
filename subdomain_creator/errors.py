"""
Client-facing error types.

Validation failures are not exceptions: they come back as a ValidationResult.
These cover requests that cannot be processed at all.
"""


class DomainRequestError(Exception):
    """Base exception for rejected domain requests"""
    pass


class MissingInputError(DomainRequestError):
    """A required request field is absent or blank"""
    pass


class InvalidTargetUrlError(DomainRequestError):
    """Forwarding target is not an absolute URL"""
    pass


class UnsupportedForwardTypeError(DomainRequestError):
    """Forwarding type is not one of the supported modes"""
    pass
