"""Domain-level exceptions.

All contract and business rule violations are expressed as subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.

Note that a conflicting recurring schedule in a cart is *not* an
exception: it is reported as data on ``RecurringCycleInfo``.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidArgumentError(DomainException):
    """A required argument was None."""


class DataIntegrityError(DomainException):
    """Stored data references something that cannot be resolved."""
