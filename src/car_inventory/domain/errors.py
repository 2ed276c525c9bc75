"""Domain error classes.

Protocol-agnostic errors that represent business failures.
The HTTP entrypoint translates them to status codes and structured bodies.

Absence of a car is not an error inside the core: ports and use cases return
``None`` and only the HTTP layer turns that into ``NotFoundError``.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message, a stable ``error_code`` and optional
    context that protocol adapters can expose.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for error (e.g., car id, field values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Field bound or input format violation.

    Examples:
        - make longer than 50 characters
        - year outside 1900..2030
        - non-positive price

    Protocol mappings:
        - REST: 422 Unprocessable Entity
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
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "price", "message": "Must be greater than 0"}]
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
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Raised by the HTTP entrypoint only, when a use case reports an absent car.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Car")
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

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"


class DuplicateCarError(ConflictError):
    """A car with the same make, model, year and color already exists."""

    def __init__(self, make: str, model: str, year: int, color: str) -> None:
        super().__init__(
            "A car with the same make, model, year, and color already exists.",
            make=make,
            model=model,
            year=year,
            color=color,
        )


class InvalidStateError(DomainError):
    """Operation not allowed in the record's current state.

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "INVALID_STATE"


class CarNotAvailableError(InvalidStateError):
    """Raised when deleting a car that is marked as not available."""

    def __init__(self, car_id: int) -> None:
        super().__init__("Cannot delete a car that is not available.", car_id=car_id)

