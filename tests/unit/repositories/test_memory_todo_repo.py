"""Unit tests for the in-memory Todo repository."""

from uuid import uuid4

from domain.entities.todo import Todo
from infrastructure.memory.todo_repo import InMemoryTodoRepository


def _todo(title: str = "Task", completed: bool = False) -> Todo:
    return Todo(id=uuid4(), title=title, completed=completed)


class TestFind:
    def test_find_all_empty(self, repository: InMemoryTodoRepository) -> None:
        assert repository.find_all() == []

    def test_find_all_keeps_insertion_order(self, repository: InMemoryTodoRepository) -> None:
        todos = [_todo("a1"), _todo("b2"), _todo("c3")]
        for todo in todos:
            repository.save(todo)

        assert repository.find_all() == todos

    def test_find_all_returns_a_new_list(self, repository: InMemoryTodoRepository) -> None:
        repository.save(_todo())

        listing = repository.find_all()
        listing.clear()

        assert len(repository) == 1

    def test_find_by_id(self, repository: InMemoryTodoRepository) -> None:
        wanted = _todo("wanted")
        repository.save(_todo("other"))
        repository.save(wanted)

        assert repository.find_by_id(wanted.id) is wanted

    def test_find_by_id_missing(self, repository: InMemoryTodoRepository) -> None:
        repository.save(_todo())

        assert repository.find_by_id(uuid4()) is None


class TestUpdate:
    def test_update_merges_supplied_fields(self, repository: InMemoryTodoRepository) -> None:
        todo = repository.save(_todo("before"))

        updated = repository.update(todo.id, {"completed": True})

        assert updated is todo
        assert todo.title == "before"
        assert todo.completed is True

    def test_update_never_changes_id(self, repository: InMemoryTodoRepository) -> None:
        todo = repository.save(_todo())
        original_id = todo.id

        repository.update(original_id, {"id": uuid4(), "title": "renamed"})

        assert todo.id == original_id
        assert todo.title == "renamed"

    def test_update_missing(self, repository: InMemoryTodoRepository) -> None:
        assert repository.update(uuid4(), {"title": "nobody"}) is None


class TestRemove:
    def test_remove_detaches_and_returns(self, repository: InMemoryTodoRepository) -> None:
        keep = repository.save(_todo("keep"))
        drop = repository.save(_todo("drop"))

        assert repository.remove(drop.id) is drop
        assert repository.find_all() == [keep]

    def test_remove_missing(self, repository: InMemoryTodoRepository) -> None:
        repository.save(_todo())

        assert repository.remove(uuid4()) is None
        assert len(repository) == 1

    def test_remove_all_returns_previous_records(
        self, repository: InMemoryTodoRepository
    ) -> None:
        todos = [repository.save(_todo(f"t{n}")) for n in range(3)]

        assert repository.remove_all() == todos
        assert repository.find_all() == []
        assert repository.remove_all() == []
