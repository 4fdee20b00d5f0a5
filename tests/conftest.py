"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Disable rate limiting and development-only error details in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["APP_ENV"] = "test"

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.services.todo_service import TodoService
from infrastructure.memory.todo_repo import InMemoryTodoRepository


@pytest.fixture
def repository() -> InMemoryTodoRepository:
    """A fresh, empty in-memory store."""
    return InMemoryTodoRepository()


@pytest.fixture
def todo_service(repository: InMemoryTodoRepository) -> TodoService:
    """Service wired to the fresh store."""
    return TodoService(repository)


@pytest.fixture
def app() -> FastAPI:
    """A fresh application with its own empty store."""
    from main import create_app

    return create_app()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
