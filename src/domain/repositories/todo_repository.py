"""Todo repository protocol."""

from collections.abc import Mapping
from typing import Any, Protocol
from uuid import UUID

from domain.entities.todo import Todo


class ITodoRepository(Protocol):
    """Repository interface for Todo entities.

    Lookups signal absence with ``None`` rather than raising.
    """

    def find_all(self) -> list[Todo]:
        """Get every todo in insertion order."""
        ...

    def find_by_id(self, id: UUID) -> Todo | None:
        """Get a todo by ID."""
        ...

    def save(self, todo: Todo) -> Todo:
        """Append a new todo."""
        ...

    def update(self, id: UUID, changes: Mapping[str, Any]) -> Todo | None:
        """Merge the given fields into an existing todo."""
        ...

    def remove(self, id: UUID) -> Todo | None:
        """Detach a todo and return it."""
        ...

    def remove_all(self) -> list[Todo]:
        """Detach every todo and return them."""
        ...
