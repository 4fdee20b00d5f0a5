"""Pydantic schemas for Todo API."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class TodoCreate(BaseModel):
    """Validated input for creating a Todo."""

    title: str


class TodoUpdate(BaseModel):
    """Validated input for updating a Todo (all fields optional)."""

    title: str | None = None
    completed: bool | None = None


class TodoResponse(BaseModel):
    """Schema for Todo response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-42d3-a456-426614174000",
                "title": "Buy milk",
                "completed": False,
            }
        },
    )

    id: UUID
    title: str
    completed: bool


class TodoListResponse(BaseModel):
    """Schema for list of Todos response."""

    success: bool = True
    data: list[TodoResponse]


class TodoDetailResponse(BaseModel):
    """Schema for single Todo response.

    ``data`` is left out of the body when the todo does not exist.
    """

    success: bool = True
    data: TodoResponse | None = None
