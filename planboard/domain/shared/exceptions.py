"""
Domain Exceptions

Defines the exceptions raised by the planning board domain. Value objects
raise ``ValidationError`` when built from inconsistent data; application
services collect several of them into ``MultipleValidationError`` and raise
``BusinessRuleError`` for request-level rules.
"""

from enum import Enum


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert error to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainError):
    """Raised when domain validation rules are violated."""

    def __init__(
        self,
        field_name: str,
        value: str | int | float | bool | None,
        message: str,
        error_code: str | None = None,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        self.field_name = field_name
        self.value = value
        self.error_code = error_code or "VALIDATION_ERROR"

        full_message = f"Validation failed for field '{field_name}': {message}"
        details = details or {}
        details.update(
            {
                "field": field_name,
                "value": str(value) if value is not None else None,
                "error_code": self.error_code,
            }
        )

        super().__init__(full_message, ErrorType.VALIDATION, details)

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "field": self.field_name,
            "value": str(self.value) if self.value is not None else None,
            "message": self.message,
            "error_code": self.error_code,
        }


class MultipleValidationError(ValidationError):
    """Raised when multiple validation errors occur."""

    def __init__(self, validation_errors: list[ValidationError]) -> None:
        self.validation_errors = validation_errors
        messages = [error.message for error in validation_errors]
        combined_message = "Multiple validation errors: " + "; ".join(messages)

        super().__init__(
            "multiple_fields",
            None,
            combined_message,
            "MULTIPLE_VALIDATION_ERRORS",
            {"error_count": len(validation_errors)},
        )

    @property
    def error_count(self) -> int:
        """Get the number of validation errors."""
        return len(self.validation_errors)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["errors"] = [error.to_dict() for error in self.validation_errors]
        return data


class BusinessRuleError(DomainError):
    """Raised when business rules are violated."""

    def __init__(
        self, message: str, details: dict[str, str | int | bool | None] | None = None
    ) -> None:
        super().__init__(message, ErrorType.BUSINESS_RULE, details)
