"""REST API error response models.

Every error body has the same shape, documented once here and referenced
from the route ``responses=`` tables.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """One offending field of a validation error."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "price",
                "message": "Price must be greater than or equal to 0",
                "code": "OUT_OF_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {"detail": "Car with identifier '...' not found", "code": "NOT_FOUND"}

        Invalid purchase status change:
            {"detail": "Cannot change purchase status from DELIVERED to PENDING",
             "code": "INVALID_TRANSITION"}

        Validation error with field details:
            {"detail": "Validation failed", "code": "VALIDATION_ERROR",
             "errors": [{"field": "year", "message": "...", "code": "OUT_OF_RANGE"}]}
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Offer with identifier 'abc' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Cannot change purchase status from DELIVERED to PENDING",
                    "code": "INVALID_TRANSITION",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "year",
                            "message": "Year must be between 1900 and 2027",
                            "code": "OUT_OF_RANGE",
                        },
                        {
                            "field": "images",
                            "message": "At least one image URL is required",
                            "code": "REQUIRED",
                        },
                    ],
                },
            ]
        }
    )


def error_responses(*status_codes: int) -> dict[int | str, dict]:
    """``responses=`` entries pointing at ErrorResponse for the given codes."""
    descriptions = {
        401: "Missing or invalid session headers",
        403: "Role not allowed to perform this operation",
        404: "Resource not found",
        409: "Conflict with current state",
        422: "Validation error",
    }
    return {
        code: {"model": ErrorResponse, "description": descriptions.get(code, "Error")}
        for code in status_codes
    }
