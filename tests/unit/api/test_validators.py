"""Unit tests for request validators."""

from uuid import UUID, uuid4

import pytest

from api.v1.schemas.todo import TodoCreate, TodoUpdate
from api.v1.validators import validate_create_todo, validate_todo_id, validate_update_todo
from core.result import Err, Ok

LENGTH_MESSAGE = "Title must be between 2 and 100 characters"


class TestValidateTodoId:
    def test_accepts_uuid(self) -> None:
        raw = str(uuid4())

        assert validate_todo_id(raw) == Ok(UUID(raw))

    def test_accepts_uppercase_uuid(self) -> None:
        raw = str(uuid4()).upper()

        assert isinstance(validate_todo_id(raw), Ok)

    @pytest.mark.parametrize(
        "raw",
        [
            "not-a-uuid",
            "123e4567e89b12d3a456426614174000",
            "{123e4567-e89b-12d3-a456-426614174000}",
            "123e4567-e89b-12d3-a456-42661417400",
        ],
    )
    def test_rejects_malformed(self, raw: str) -> None:
        assert validate_todo_id(raw) == Err({"id": ["Invalid todo ID format"]})

    @pytest.mark.parametrize("raw", ["", None])
    def test_rejects_missing(self, raw: str | None) -> None:
        assert validate_todo_id(raw) == Err(
            {"id": ["Invalid todo ID format", "Todo ID is required"]}
        )


class TestValidateCreateTodo:
    def test_trims_title(self) -> None:
        assert validate_create_todo({"title": "  Buy milk \n"}) == Ok(TodoCreate(title="Buy milk"))

    @pytest.mark.parametrize("length", [2, 50, 100])
    def test_accepts_lengths_in_range(self, length: int) -> None:
        assert isinstance(validate_create_todo({"title": "x" * length}), Ok)

    @pytest.mark.parametrize("length", [1, 101])
    def test_rejects_lengths_out_of_range(self, length: int) -> None:
        assert validate_create_todo({"title": "x" * length}) == Err({"title": [LENGTH_MESSAGE]})

    def test_length_is_measured_after_trimming(self) -> None:
        assert isinstance(validate_create_todo({"title": "  a  "}), Err)

    @pytest.mark.parametrize("body", [{}, {"title": None}, {"title": "   "}])
    def test_missing_title_reports_both_rules(self, body: dict) -> None:
        assert validate_create_todo(body) == Err({"title": ["Title is required", LENGTH_MESSAGE]})

    @pytest.mark.parametrize("title", [42, True, ["a", "b"]])
    def test_rejects_non_string_title(self, title: object) -> None:
        assert validate_create_todo({"title": title}) == Err({"title": ["Title must be a string"]})


class TestValidateUpdateTodo:
    def test_empty_body_is_a_no_op_update(self) -> None:
        result = validate_update_todo({})

        assert isinstance(result, Ok)
        assert result.value.model_dump(exclude_unset=True) == {}

    def test_only_supplied_fields_are_set(self) -> None:
        result = validate_update_todo({"completed": False})

        assert isinstance(result, Ok)
        assert result.value.model_dump(exclude_unset=True) == {"completed": False}

    def test_trims_title(self) -> None:
        result = validate_update_todo({"title": " Renamed "})

        assert result == Ok(TodoUpdate(title="Renamed"))

    def test_drops_unknown_fields(self) -> None:
        result = validate_update_todo({"id": str(uuid4()), "title": "Kept", "extra": 1})

        assert isinstance(result, Ok)
        assert result.value.model_dump(exclude_unset=True) == {"title": "Kept"}

    @pytest.mark.parametrize("completed", ["true", 1, 0, None, "yes"])
    def test_rejects_non_boolean_completed(self, completed: object) -> None:
        assert validate_update_todo({"completed": completed}) == Err(
            {"completed": ["Completed must be a boolean value"]}
        )

    def test_accumulates_errors_across_fields(self) -> None:
        result = validate_update_todo({"title": "", "completed": "no"})

        assert result == Err(
            {
                "title": ["Title cannot be empty if provided", LENGTH_MESSAGE],
                "completed": ["Completed must be a boolean value"],
            }
        )
