"""Todo service layer."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID, uuid4

import structlog

from domain.entities.todo import Todo
from domain.repositories.todo_repository import ITodoRepository

logger = structlog.get_logger()


class TodoService:
    """Service layer for Todo operations.

    Input is assumed to be validated already. Lookups by id hand ``None``
    back to the caller instead of raising when the todo does not exist.
    """

    def __init__(self, repository: ITodoRepository) -> None:
        self._repo = repository

    def get_all(self) -> list[Todo]:
        """Get all todos in insertion order."""
        return self._repo.find_all()

    def get_detail(self, todo_id: UUID) -> Todo | None:
        """Get a specific todo, or None if it does not exist."""
        return self._repo.find_by_id(todo_id)

    def create(self, title: str) -> Todo:
        """Create a new, not yet completed todo with a fresh id."""
        todo = Todo(id=uuid4(), title=title)
        created = self._repo.save(todo)
        logger.info("todo_created", todo_id=str(created.id))
        return created

    def update(self, todo_id: UUID, changes: Mapping[str, Any]) -> Todo | None:
        """Apply a partial update; fields not in ``changes`` keep their values."""
        updated = self._repo.update(todo_id, changes)
        if updated is not None:
            logger.info("todo_updated", todo_id=str(todo_id), fields=sorted(changes))
        return updated

    def remove(self, todo_id: UUID) -> Todo | None:
        """Delete a todo and return it, or None if it did not exist."""
        removed = self._repo.remove(todo_id)
        if removed is not None:
            logger.info("todo_deleted", todo_id=str(todo_id))
        return removed

    def remove_all(self) -> list[Todo]:
        """Delete every todo and return what was removed."""
        removed = self._repo.remove_all()
        logger.info("todos_cleared", deleted_count=len(removed))
        return removed
