"""RFC 9457 error responses and global exception handlers.

Exports:
    ErrorDetail: Field-specific error
    ProblemDetails: Error response body
    ErrorResponseBuilder: DomainError -> JSONResponse
    register_exception_handlers: Install global handlers on the app
"""

from src.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
