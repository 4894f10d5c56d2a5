"""Global exception handlers.

Anything that escapes a route is rendered as an RFC 9457 problem. That covers
HTTPException from dependencies and request validation failures. Any other
exception is logged with the trace ID and reported as a generic 500.
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# status -> (title, problem type slug); slugs follow ErrorCode spelling
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad_request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not_found"),
    405: ("Method Not Allowed", "method_not_allowed"),
    409: ("Resource Conflict", "conflict"),
    500: ("Internal Server Error", "internal_error"),
}

_INTERNAL_DETAIL = "An unexpected error occurred. Quote the trace ID when reporting it."


def _problem_response(
    request: Request,
    status_code: int,
    detail: str,
    *,
    slug: str | None = None,
    title: str | None = None,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    default_title, default_slug = _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug or default_slug}",
        title=title or default_title,
        status=status_code,
        detail=detail,
        instance=request.url.path,
        errors=errors,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Covers the 401 raised by ``get_current_user`` and Starlette's 404/405."""
    assert isinstance(exc, HTTPException)
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _problem_response(
        request, exc.status_code, detail, headers=getattr(exc, "headers", None)
    )


def _field_errors(exc: RequestValidationError) -> list[ErrorDetail]:
    field_errors = []
    for error in exc.errors():
        location = [str(p) for p in error.get("loc", ()) if p not in ("body", "query")]
        field_errors.append(
            ErrorDetail(
                field=".".join(location) or "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )
    return field_errors


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Malformed bodies are a 400 here, not FastAPI's default 422."""
    assert isinstance(exc, RequestValidationError)
    return _problem_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Request validation failed. Check 'errors' for details.",
        slug="validation_failed",
        title="Validation Failed",
        errors=_field_errors(exc) or None,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=getattr(request.state, "trace_id", None),
        request_path=request.url.path,
        request_method=request.method,
    )
    return _problem_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, _INTERNAL_DETAIL
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
