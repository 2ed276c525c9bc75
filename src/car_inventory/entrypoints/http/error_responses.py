"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "year",
                "message": "Must be between 1900 and 2030",
                "code": "OUT_OF_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Car with identifier '42' not found",
                "code": "NOT_FOUND"
            }

        Validation error with fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "price", "message": "Must be greater than 0", "code": "NOT_POSITIVE"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Car with identifier '42' not found", "code": "NOT_FOUND"},
                {
                    "detail": "A car with the same make, model, year, and color already exists.",
                    "code": "CONFLICT",
                },
                {"detail": "Cannot delete a car that is not available.", "code": "INVALID_STATE"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "price",
                            "message": "Must be greater than 0",
                            "code": "NOT_POSITIVE",
                        },
                    ],
                },
            ]
        }
    )
