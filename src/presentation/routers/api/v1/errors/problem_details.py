"""RFC 9457 Problem Details models.

Exports:
    ErrorDetail: One field-specific error
    ProblemDetails: Error response body
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Field-specific error inside a ProblemDetails body.

    Examples:
        >>> ErrorDetail(field="quantity", code="invalid_quantity",
        ...             message="Quantity must be greater than zero")
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details body.

    Attributes:
        type: URI identifying the problem type
        title: Short summary of the problem type
        status: HTTP status code
        detail: Explanation specific to this occurrence
        instance: Request path
        errors: Field-specific errors for validation failures
        trace_id: Request trace ID for debugging
    """

    type: str = Field(..., description="URI reference identifying the problem type")
    title: str = Field(..., description="Short summary of the problem type")
    status: int = Field(..., description="HTTP status code", ge=400, le=599)
    detail: str = Field(..., description="Explanation specific to this occurrence")
    instance: str = Field(..., description="URI of the specific occurrence")
    errors: list[ErrorDetail] | None = Field(
        default=None, description="Field-specific errors"
    )
    trace_id: str | None = Field(default=None, description="Request trace ID")
