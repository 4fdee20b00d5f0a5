"""Dependency injection factories for API v1."""

from typing import Annotated, Any, TypeVar
from uuid import UUID

import orjson
from fastapi import Depends, Request

from api.v1.schemas.todo import TodoCreate, TodoUpdate
from api.v1.validators import validate_create_todo, validate_todo_id, validate_update_todo
from core.exceptions import AppException, bad_request, unprocessable_entity
from core.result import Err, Result
from domain.services.todo_service import TodoService
from infrastructure.memory.todo_repo import InMemoryTodoRepository

T = TypeVar("T")

JSON_MEDIA_TYPE = "application/json"
FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"


def get_todo_repository(request: Request) -> InMemoryTodoRepository:
    """Get the store the application was created with."""
    return request.app.state.todo_repository  # type: ignore[no-any-return]


def get_todo_service(
    repository: InMemoryTodoRepository = Depends(get_todo_repository),
) -> TodoService:
    """Get Todo service instance."""
    return TodoService(repository)


def require_valid(result: Result[T]) -> T:
    """Unwrap a validation result, rejecting the request on ``Err``."""
    if isinstance(result, Err):
        raise AppException(unprocessable_entity(errors=result.errors))
    return result.value


async def read_request_body(request: Request) -> dict[str, Any]:
    """Read the request body into a plain mapping of fields.

    JSON bodies are parsed with orjson and url-encoded forms through
    Starlette's form parser. Any other content type, an empty body, or JSON
    that is not an object is treated as ``{}`` so the field rules report what
    is missing.
    """
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if media_type == FORM_MEDIA_TYPE:
        form = await request.form()
        return {key: value for key, value in form.items()}

    if media_type != JSON_MEDIA_TYPE:
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = orjson.loads(raw)
    except orjson.JSONDecodeError:
        raise AppException(bad_request("Invalid JSON body")) from None
    return payload if isinstance(payload, dict) else {}


async def valid_todo_id(todo_id: str) -> UUID:
    """Validated ``todo_id`` path parameter."""
    return require_valid(validate_todo_id(todo_id))


async def valid_create_body(
    body: dict[str, Any] = Depends(read_request_body),
) -> TodoCreate:
    """Validated creation body."""
    return require_valid(validate_create_todo(body))


async def valid_update_body(
    body: dict[str, Any] = Depends(read_request_body),
) -> TodoUpdate:
    """Validated update body."""
    return require_valid(validate_update_todo(body))


TodoId = Annotated[UUID, Depends(valid_todo_id)]
