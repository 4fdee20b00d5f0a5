"""Exception handlers for the FastAPI application."""

import functools
import inspect
import traceback
from collections.abc import Callable
from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import settings
from core.exceptions import (
    AppException,
    FieldErrors,
    from_status,
    internal_server_error,
    too_many_requests,
    unprocessable_entity,
)

logger = structlog.get_logger()

# Statuses the router produces when nothing matches the method and path.
_ROUTE_MISS_STATUSES = frozenset({404, 405})


def render_fault(request: Request | None, exc: Exception) -> ORJSONResponse:
    """Render any raised error as the standard failure envelope.

    An ``AppException`` is rendered from the error it carries; anything else
    is a 500 with the exception's own message.
    """
    if isinstance(exc, AppException):
        error = exc.error
    else:
        error = internal_server_error(str(exc) or "Internal Server Error")

    method = request.method if request is not None else "-"
    path = request.url.path if request is not None else "-"
    if error.status_code >= 500:
        logger.error(
            "unhandled_exception",
            method=method,
            path=path,
            status_code=error.status_code,
            message=error.message,
            error_type=type(exc).__name__,
            exc_info=exc,
        )
    else:
        logger.warning(
            "app_exception",
            method=method,
            path=path,
            status_code=error.status_code,
            message=error.message,
            kind=error.kind.value,
        )

    content = error.envelope()
    if settings.is_development:
        content["stack"] = "".join(traceback.format_exception(exc))
    return ORJSONResponse(status_code=error.status_code, content=content)


def forward_errors(handler: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap a route handler so anything it raises goes to ``render_fault``.

    Works for both plain and ``async`` handlers. The handler must take the
    ``Request`` as one of its parameters so the fault can be logged against it.
    """

    @functools.wraps(handler)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            result = handler(*args, **kwargs)
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as exc:
            return render_fault(_find_request(args, kwargs), exc)

    return wrapper


def _find_request(args: tuple[Any, ...], kwargs: dict[str, Any]) -> Request | None:
    for value in (*args, *kwargs.values()):
        if isinstance(value, Request):
            return value
    return None


def _field_errors(exc: RequestValidationError) -> FieldErrors:
    """Collapse Pydantic error locations into a field -> messages mapping."""
    errors: FieldErrors = {}
    for error in exc.errors():
        location = [str(part) for part in error["loc"] if part not in ("body", "path", "query")]
        field = ".".join(location) or "body"
        errors.setdefault(field, []).append(error["msg"])
    return errors


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> ORJSONResponse:
        """Handle errors carrying a structured HttpError."""
        return render_fault(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> ORJSONResponse:
        """Handle HTTP exceptions from FastAPI/Starlette.

        Unmatched routes keep their own bare ``{"error": "Not Found"}`` body.
        """
        if exc.status_code in _ROUTE_MISS_STATUSES:
            logger.info(
                "route_not_found",
                method=request.method,
                path=request.url.path,
            )
            return ORJSONResponse(status_code=404, content={"error": "Not Found"})

        error = from_status(exc.status_code, str(exc.detail))
        return render_fault(request, AppException(error))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> ORJSONResponse:
        """Handle Pydantic validation errors."""
        error = unprocessable_entity(errors=_field_errors(exc))
        return render_fault(request, AppException(error))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
        """Handle unexpected exceptions."""
        return render_fault(request, exc)

    # SlowAPIMiddleware only calls synchronous handlers.
    @app.exception_handler(RateLimitExceeded)
    def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> ORJSONResponse:
        """Handle rate limit exceeded errors."""
        error = too_many_requests(f"Rate limit exceeded: {exc.detail}")
        return render_fault(request, AppException(error))
