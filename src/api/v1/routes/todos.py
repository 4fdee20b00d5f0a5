"""Todo API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.exception_handlers import forward_errors
from api.v1.dependencies import (
    TodoId,
    get_todo_service,
    valid_create_body,
    valid_update_body,
)
from api.v1.schemas.common import ErrorResponse, MessageResponse
from api.v1.schemas.todo import (
    TodoCreate,
    TodoDetailResponse,
    TodoListResponse,
    TodoResponse,
    TodoUpdate,
)
from domain.entities.todo import Todo
from domain.services.todo_service import TodoService

router = APIRouter(prefix="/todo", tags=["todos"])

_VALIDATION_ERROR = {422: {"model": ErrorResponse, "description": "Validation error"}}


@router.get(
    "",
    response_model=TodoListResponse,
    summary="List all todos",
    responses={
        200: {"description": "Every todo in creation order"},
    },
)
@router.get("/", include_in_schema=False)
@forward_errors
async def list_todos(
    request: Request,
    service: TodoService = Depends(get_todo_service),
) -> TodoListResponse:
    """Get all todos in the order they were created."""
    todos = service.get_all()
    return TodoListResponse(data=[_build_todo_response(t) for t in todos])


@router.get(
    "/{todo_id}",
    response_model=TodoDetailResponse,
    response_model_exclude_none=True,
    summary="Get a todo",
    responses={
        200: {"description": "The todo, or no `data` when it does not exist"},
        **_VALIDATION_ERROR,
    },
)
@forward_errors
async def get_todo(
    request: Request,
    todo_id: TodoId,
    service: TodoService = Depends(get_todo_service),
) -> TodoDetailResponse:
    """Get a specific todo by ID."""
    return _build_detail_response(service.get_detail(todo_id))


@router.post(
    "",
    response_model=TodoDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new todo",
    responses={
        201: {"description": "Todo created successfully"},
        **_VALIDATION_ERROR,
    },
)
@router.post("/", status_code=status.HTTP_201_CREATED, include_in_schema=False)
@forward_errors
async def create_todo(
    request: Request,
    body: TodoCreate = Depends(valid_create_body),
    service: TodoService = Depends(get_todo_service),
) -> TodoDetailResponse:
    """
    Create a new todo.

    The title is stored trimmed and the todo starts out not completed.
    """
    todo = service.create(body.title)
    return _build_detail_response(todo)


@router.put(
    "/{todo_id}",
    response_model=TodoDetailResponse,
    response_model_exclude_none=True,
    summary="Update a todo",
    responses={
        200: {"description": "The updated todo, or no `data` when it does not exist"},
        **_VALIDATION_ERROR,
    },
)
@forward_errors
async def update_todo(
    request: Request,
    todo_id: TodoId,
    body: TodoUpdate = Depends(valid_update_body),
    service: TodoService = Depends(get_todo_service),
) -> TodoDetailResponse:
    """
    Update an existing todo. All fields are optional (partial update).

    Only fields present in the request body are changed.
    """
    changes = body.model_dump(exclude_unset=True)
    return _build_detail_response(service.update(todo_id, changes))


@router.delete(
    "/{todo_id}",
    response_model=TodoDetailResponse,
    response_model_exclude_none=True,
    summary="Delete a todo",
    responses={
        200: {"description": "The deleted todo, or no `data` when it did not exist"},
        **_VALIDATION_ERROR,
    },
)
@forward_errors
async def delete_todo(
    request: Request,
    todo_id: TodoId,
    service: TodoService = Depends(get_todo_service),
) -> TodoDetailResponse:
    """Delete a todo and return it."""
    return _build_detail_response(service.remove(todo_id))


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete all todos",
)
@router.delete("/", include_in_schema=False)
@forward_errors
async def delete_all_todos(
    request: Request,
    service: TodoService = Depends(get_todo_service),
) -> MessageResponse:
    """Delete every todo."""
    service.remove_all()
    return MessageResponse(message="All todos deleted successfully.")


def _build_todo_response(todo: Todo) -> TodoResponse:
    """Convert domain entity to response schema."""
    return TodoResponse.model_validate(todo)


def _build_detail_response(todo: Todo | None) -> TodoDetailResponse:
    return TodoDetailResponse(data=_build_todo_response(todo) if todo is not None else None)
