"""Domain-level exceptions.

The price resolver itself never raises for malformed promotional data.
These cover the edges: invalid value objects built by callers and lookups
of products or variants that do not exist. The CLI layer catches
DomainException uniformly and displays a user-friendly message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value object invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
