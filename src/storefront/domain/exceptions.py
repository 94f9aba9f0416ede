"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and turn them into
user-facing messages or status codes.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input is malformed or a business rule was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


NotFoundError = EntityNotFoundError


class AuthError(DomainException):
    """A session or privileged credential is missing or invalid."""


class ForbiddenError(AuthError):
    """The caller is authenticated but lacks the required privilege."""


class ConflictError(DomainException):
    """The request conflicts with the current state of an entity."""


class PaymentNotConfirmedError(ConflictError):
    """Approval needed a confirmed payment and none was reported."""


class ExternalServiceError(DomainException):
    """An external collaborator was unreachable or answered nonsense."""
