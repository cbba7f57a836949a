"""Domain error classes.

Business failures raised by the domain and use-case layers. They carry no
transport knowledge; the HTTP entrypoint translates them by ``error_code``.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all marketplace domain errors.

    ``error_code`` is a stable machine-readable key (also usable for i18n).
    ``context`` holds structured details (ids, field names) that adapters may
    expose to clients or logs.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Structured form used by protocol adapters."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Input or invariant violation, reported per field.

    Examples:
        - car year outside [1900, next year]
        - negative offer price
        - rating outside 1..10

    Maps to REST 422.
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall message (defaults depend on whether errors are given)
            errors: Field errors, each with 'field', 'message' and optionally 'code'
                   Example: [{"field": "price", "message": "Must be >= 0"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Unknown car, offer, dealership, buyer, purchase or favorite.

    Maps to REST 404.
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Car", "Offer")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """Business constraint conflict.

    Examples:
        - dealership already offers this car
        - buyer already has this car as favorite
        - purchasing an offer that is no longer available

    Maps to REST 409.
    """

    error_code: str = "CONFLICT"


class InvalidTransitionError(ConflictError):
    """Purchase status change not present in the transition table.

    Maps to REST 409.
    """

    error_code: str = "INVALID_TRANSITION"

    def __init__(self, current: str, target: str, **context: Any) -> None:
        super().__init__(
            f"Cannot change purchase status from {current} to {target}",
            current=current,
            target=target,
            **context,
        )


class UnauthorizedError(DomainError):
    """No usable session context on the request.

    Maps to REST 401.
    """

    error_code: str = "UNAUTHORIZED"


class ForbiddenError(DomainError):
    """Session present but its role may not perform the operation.

    Maps to REST 403.
    """

    error_code: str = "FORBIDDEN"


class InternalError(DomainError):
    """Unexpected internal condition. Always logged.

    Maps to REST 500.
    """

    error_code: str = "INTERNAL_ERROR"


def field_error(field: str, message: str, code: str = "INVALID_VALUE") -> dict[str, str]:
    """Build one entry of ``ValidationError.errors``."""
    return {"field": field, "message": message, "code": code}
