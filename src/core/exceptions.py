"""Structured HTTP errors and the exception that carries them."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

FieldErrors = dict[str, list[str]]
ErrorDetails = FieldErrors | list[str]


class ErrorKind(StrEnum):
    """Tag naming the condition an error represents."""

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNPROCESSABLE_ENTITY = "unprocessable_entity"
    TOO_MANY_REQUESTS = "too_many_requests"
    INTERNAL_SERVER_ERROR = "internal_server_error"


@dataclass(frozen=True)
class HttpError:
    """An error that knows how it should be rendered to the client."""

    kind: ErrorKind
    status_code: int
    message: str
    errors: ErrorDetails | None = None

    def envelope(self) -> dict[str, Any]:
        """Render the error as the standard failure envelope."""
        body: dict[str, Any] = {
            "success": False,
            "status": self.status_code,
            "message": self.message,
        }
        if self.errors:
            body["errors"] = self.errors
        return body


def bad_request(message: str = "Bad Request", errors: ErrorDetails | None = None) -> HttpError:
    return HttpError(ErrorKind.BAD_REQUEST, 400, message, errors)


def unauthorized(message: str = "Unauthorized") -> HttpError:
    return HttpError(ErrorKind.UNAUTHORIZED, 401, message)


def forbidden(message: str = "Forbidden") -> HttpError:
    return HttpError(ErrorKind.FORBIDDEN, 403, message)


def not_found(message: str = "Resource not found") -> HttpError:
    return HttpError(ErrorKind.NOT_FOUND, 404, message)


def conflict(message: str = "Conflict") -> HttpError:
    return HttpError(ErrorKind.CONFLICT, 409, message)


def unprocessable_entity(
    message: str = "Validation failed", errors: ErrorDetails | None = None
) -> HttpError:
    return HttpError(ErrorKind.UNPROCESSABLE_ENTITY, 422, message, errors)


def too_many_requests(message: str = "Too Many Requests") -> HttpError:
    return HttpError(ErrorKind.TOO_MANY_REQUESTS, 429, message)


def internal_server_error(message: str = "Internal server error") -> HttpError:
    return HttpError(ErrorKind.INTERNAL_SERVER_ERROR, 500, message)


class AppException(Exception):
    """Carries an :class:`HttpError` up to the exception handlers."""

    def __init__(self, error: HttpError) -> None:
        self.error = error
        super().__init__(error.message)


_KIND_BY_STATUS = {
    400: ErrorKind.BAD_REQUEST,
    401: ErrorKind.UNAUTHORIZED,
    403: ErrorKind.FORBIDDEN,
    404: ErrorKind.NOT_FOUND,
    409: ErrorKind.CONFLICT,
    422: ErrorKind.UNPROCESSABLE_ENTITY,
    429: ErrorKind.TOO_MANY_REQUESTS,
}


def from_status(status_code: int, message: str) -> HttpError:
    """Build an error for an arbitrary status raised by the framework."""
    default = ErrorKind.INTERNAL_SERVER_ERROR if status_code >= 500 else ErrorKind.BAD_REQUEST
    return HttpError(_KIND_BY_STATUS.get(status_code, default), status_code, message)
