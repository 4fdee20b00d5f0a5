"""In-memory implementation of the Todo repository."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from domain.entities.todo import Todo

# Fields a partial update may touch; the id is fixed at creation.
UPDATABLE_FIELDS = frozenset({"title", "completed"})


class InMemoryTodoRepository:
    """In-memory implementation of ITodoRepository backed by an ordered list."""

    def __init__(self) -> None:
        self._todos: list[Todo] = []

    def find_all(self) -> list[Todo]:
        """Get every todo in insertion order."""
        return list(self._todos)

    def find_by_id(self, id: UUID) -> Todo | None:
        """Get a todo by ID."""
        index = self._index_of(id)
        return self._todos[index] if index is not None else None

    def save(self, todo: Todo) -> Todo:
        """Append a new todo."""
        self._todos.append(todo)
        return todo

    def update(self, id: UUID, changes: Mapping[str, Any]) -> Todo | None:
        """Merge the supplied fields over an existing todo, in place."""
        todo = self.find_by_id(id)
        if todo is None:
            return None

        for name, value in changes.items():
            if name in UPDATABLE_FIELDS:
                setattr(todo, name, value)
        return todo

    def remove(self, id: UUID) -> Todo | None:
        """Detach a todo and return it."""
        index = self._index_of(id)
        if index is None:
            return None
        return self._todos.pop(index)

    def remove_all(self) -> list[Todo]:
        """Detach every todo and return them."""
        removed, self._todos = self._todos, []
        return removed

    def __len__(self) -> int:
        return len(self._todos)

    def _index_of(self, id: UUID) -> int | None:
        for index, todo in enumerate(self._todos):
            if todo.id == id:
                return index
        return None
