"""Build RFC 9457 responses from domain errors.

Each DomainError subclass maps to exactly one status:

    ValidationError           -> 400
    InsufficientBalanceError  -> 400
    AuthenticationError       -> 401
    AuthorizationError        -> 403
    NotFoundError             -> 404
    ConflictError             -> 409
    AbortedError              -> 499 (client closed request)
    anything else             -> 500
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.errors import (
    AbortedError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    InsufficientBalanceError,
    NotFoundError,
    ValidationError,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

HTTP_499_CLIENT_CLOSED_REQUEST = 499

_STATUS_BY_ERROR: list[tuple[type[DomainError], int, str]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST, "Validation Failed"),
    (InsufficientBalanceError, status.HTTP_400_BAD_REQUEST, "Insufficient Balance"),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED, "Authentication Required"),
    (AuthorizationError, status.HTTP_403_FORBIDDEN, "Access Denied"),
    (NotFoundError, status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    (ConflictError, status.HTTP_409_CONFLICT, "Resource Conflict"),
    (AbortedError, HTTP_499_CLIENT_CLOSED_REQUEST, "Request Aborted"),
]


class ErrorResponseBuilder:
    """Convert DomainError results into RFC 9457 JSON responses.

    Example:
        >>> match await handler.handle(command):
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(error, request)
    """

    @staticmethod
    def status_for(error: DomainError) -> tuple[int, str]:
        """HTTP status and title for a domain error."""
        for error_type, status_code, title in _STATUS_BY_ERROR:
            if isinstance(error, error_type):
                return status_code, title
        return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"

    @staticmethod
    def from_domain_error(error: DomainError, request: Request) -> JSONResponse:
        status_code, title = ErrorResponseBuilder.status_for(error)
        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=title,
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            trace_id=getattr(request.state, "trace_id", None),
        )
        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]
        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )
