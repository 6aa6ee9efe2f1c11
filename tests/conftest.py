"""Shared fixtures for the todo app test suite."""

from typing import List

import pytest
from fastapi.testclient import TestClient

from todo_app.app.core.config import Settings
from todo_app.app.core.storage import MemStorage, Storage
from todo_app.app.main import create_app
from todo_app.app.schemas.todo import TodoCreate, TodoRead


class FailingStorage(Storage):
    """Storage double whose todo operations always raise."""

    def __init__(self, message: str = "disk on fire") -> None:
        self.message = message
        self.create_calls = 0

    async def get_user(self, user_id):
        return None

    async def get_user_by_username(self, username):
        return None

    async def create_user(self, data):
        raise RuntimeError(self.message)

    async def get_all_todos(self) -> List[TodoRead]:
        raise RuntimeError(self.message)

    async def create_todo(self, data: TodoCreate) -> TodoRead:
        self.create_calls += 1
        raise RuntimeError(self.message)


@pytest.fixture
def storage():
    store = MemStorage()
    yield store
    store.clear()


@pytest.fixture
def client(storage):
    return TestClient(create_app(storage=storage))


@pytest.fixture
def failing_storage():
    return FailingStorage()


@pytest.fixture
def failing_client(failing_storage):
    return TestClient(create_app(storage=failing_storage))


@pytest.fixture
def masked_failing_client(failing_storage):
    app_settings = Settings(expose_error_details=False)
    return TestClient(create_app(storage=failing_storage, app_settings=app_settings))
