import asyncio
import uuid
from concurrent.futures import ThreadPoolExecutor

import pytest

from todo_app.app.core.storage import MemStorage, UsernameTakenError
from todo_app.app.schemas.todo import TodoCreate
from todo_app.app.schemas.user import UserCreate


def run(coro):
    return asyncio.run(coro)


def is_uuid(value: str) -> bool:
    try:
        return str(uuid.UUID(value)) == value
    except ValueError:
        return False


class TestTodos:

    def test_empty_store_lists_nothing(self, storage):
        assert run(storage.get_all_todos()) == []

    def test_create_then_list(self, storage):
        created = run(storage.create_todo(TodoCreate(title="  Buy milk  ")))
        todos = run(storage.get_all_todos())
        assert len(todos) == 1
        assert todos[0] == created
        assert todos[0].title == "Buy milk"
        assert is_uuid(todos[0].id)

    def test_insertion_order(self, storage):
        for title in ["one", "two", "three"]:
            run(storage.create_todo(TodoCreate(title=title)))
        assert [t.title for t in run(storage.get_all_todos())] == ["one", "two", "three"]

    def test_reads_are_idempotent(self, storage):
        run(storage.create_todo(TodoCreate(title="a")))
        run(storage.create_todo(TodoCreate(title="b")))
        assert run(storage.get_all_todos()) == run(storage.get_all_todos())

    def test_ids_are_unique(self, storage):
        for i in range(1000):
            run(storage.create_todo(TodoCreate(title=f"todo {i}")))
        ids = {t.id for t in run(storage.get_all_todos())}
        assert len(ids) == 1000

    def test_snapshot_is_a_copy(self, storage):
        run(storage.create_todo(TodoCreate(title="keep me")))
        snapshot = run(storage.get_all_todos())
        snapshot[0].title = "changed"
        snapshot.clear()
        todos = run(storage.get_all_todos())
        assert [t.title for t in todos] == ["keep me"]

    def test_created_record_is_a_copy(self, storage):
        created = run(storage.create_todo(TodoCreate(title="original")))
        created.title = "changed"
        assert run(storage.get_all_todos())[0].title == "original"

    def test_concurrent_creates_from_threads(self, storage):
        def create(i):
            return run(storage.create_todo(TodoCreate(title=f"t{i}"))).id

        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(create, range(200)))
        assert len(set(ids)) == 200
        assert len(run(storage.get_all_todos())) == 200


class TestUsers:

    def test_create_and_get_by_id(self, storage):
        user = run(storage.create_user(UserCreate(username="alice", password="pw")))
        assert is_uuid(user.id)
        assert user.username == "alice"
        assert user.password == "pw"
        assert run(storage.get_user(user.id)) == user

    def test_get_by_username(self, storage):
        run(storage.create_user(UserCreate(username="alice", password="pw")))
        bob = run(storage.create_user(UserCreate(username="bob", password="pw")))
        assert run(storage.get_user_by_username("bob")) == bob

    def test_unknown_user_is_none(self, storage):
        assert run(storage.get_user("missing")) is None
        assert run(storage.get_user_by_username("nobody")) is None

    def test_username_match_is_exact(self, storage):
        run(storage.create_user(UserCreate(username="Alice", password="pw")))
        assert run(storage.get_user_by_username("alice")) is None

    def test_duplicate_username_is_rejected(self, storage):
        run(storage.create_user(UserCreate(username="alice", password="pw")))
        with pytest.raises(UsernameTakenError):
            run(storage.create_user(UserCreate(username="alice", password="other")))
        assert run(storage.get_user_by_username("alice")).password == "pw"

    def test_returned_user_is_a_copy(self, storage):
        user = run(storage.create_user(UserCreate(username="alice", password="pw")))
        user.password = "changed"
        assert run(storage.get_user(user.id)).password == "pw"

    def test_user_found_by_username_is_a_copy(self, storage):
        run(storage.create_user(UserCreate(username="alice", password="pw")))
        found = run(storage.get_user_by_username("alice"))
        found.password = "changed"
        found.username = "mallory"
        assert run(storage.get_user_by_username("alice")).password == "pw"
        assert run(storage.get_user_by_username("mallory")) is None

    def test_users_and_todos_are_independent(self, storage):
        run(storage.create_user(UserCreate(username="alice", password="pw")))
        assert run(storage.get_all_todos()) == []


def test_clear_drops_everything():
    store = MemStorage()
    user = run(store.create_user(UserCreate(username="alice", password="pw")))
    run(store.create_todo(TodoCreate(title="x")))
    store.clear()
    assert run(store.get_all_todos()) == []
    assert run(store.get_user(user.id)) is None
