"""Input validation for Todo requests.

Each validator checks one request part and returns ``Ok`` with the cleaned
value, or ``Err`` with every violation found, keyed by field name.
"""

import re
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from api.v1.schemas.todo import TodoCreate, TodoUpdate
from core.exceptions import FieldErrors
from core.result import Err, Ok, Result

TITLE_MIN_LENGTH = 2
TITLE_MAX_LENGTH = 100

_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
_TITLE_LENGTH_MESSAGE = (
    f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters"
)


def validate_todo_id(raw: str | None) -> Result[UUID]:
    """Validate the ``id`` path parameter."""
    errors: FieldErrors = {}
    value = raw or ""

    if not _UUID_PATTERN.match(value):
        _add_error(errors, "id", "Invalid todo ID format")
    if not value:
        _add_error(errors, "id", "Todo ID is required")

    if errors:
        return Err(errors)
    return Ok(UUID(value))


def validate_create_todo(body: Mapping[str, Any]) -> Result[TodoCreate]:
    """Validate a creation body; ``title`` is required."""
    errors: FieldErrors = {}
    title = _check_title(body.get("title"), errors, empty_message="Title is required")

    if errors or title is None:
        return Err(errors)
    return Ok(TodoCreate(title=title))


def validate_update_todo(body: Mapping[str, Any]) -> Result[TodoUpdate]:
    """Validate an update body.

    Only ``title`` and ``completed`` are considered, and only when present.
    Other keys are dropped.
    """
    errors: FieldErrors = {}
    changes: dict[str, Any] = {}

    if "title" in body:
        title = _check_title(
            body["title"], errors, empty_message="Title cannot be empty if provided"
        )
        if title is not None:
            changes["title"] = title

    if "completed" in body:
        completed = body["completed"]
        if isinstance(completed, bool):
            changes["completed"] = completed
        else:
            _add_error(errors, "completed", "Completed must be a boolean value")

    if errors:
        return Err(errors)
    return Ok(TodoUpdate(**changes))


def _check_title(value: Any, errors: FieldErrors, empty_message: str) -> str | None:
    """Trim and check a title, recording violations under ``title``."""
    if value is None:
        value = ""
    if not isinstance(value, str):
        _add_error(errors, "title", "Title must be a string")
        return None

    title = value.strip()
    if not title:
        _add_error(errors, "title", empty_message)
    if not TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
        _add_error(errors, "title", _TITLE_LENGTH_MESSAGE)
    return title


def _add_error(errors: FieldErrors, field: str, message: str) -> None:
    errors.setdefault(field, []).append(message)
