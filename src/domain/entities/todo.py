"""Todo domain entity."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Todo:
    """Domain entity for a Todo."""

    id: UUID
    title: str
    completed: bool = False
