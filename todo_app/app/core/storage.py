"""
In‑memory storage for users and todos.

``Storage`` is the interface the routing layer talks to; ``MemStorage``
is the only backend and keeps both collections in process memory, so
everything is lost on restart.  A durable backend (SQLite, an external
database) can be added by implementing the same five coroutines.

One storage object is created by ``create_app`` and stored on
``app.state``; endpoints receive it through a FastAPI dependency
instead of importing a global.

Stored records are pydantic models.  Every method hands out copies so
that callers can never mutate what the store holds.
"""

import logging
import threading
import uuid
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..schemas.todo import TodoCreate, TodoRead
from ..schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)


class UsernameTakenError(ValueError):
    """Raised by ``create_user`` when the username is already stored."""


class Storage(ABC):
    """Creation and read operations over users and todos."""

    @abstractmethod
    async def get_user(self, user_id: str) -> Optional[UserRead]:
        """Return the user with ``user_id`` or ``None``."""

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[UserRead]:
        """Return the user with exactly ``username`` or ``None``."""

    @abstractmethod
    async def create_user(self, data: UserCreate) -> UserRead:
        """Store a new user under a freshly generated id."""

    @abstractmethod
    async def get_all_todos(self) -> List[TodoRead]:
        """Return a snapshot of all todos in insertion order."""

    @abstractmethod
    async def create_todo(self, data: TodoCreate) -> TodoRead:
        """Store a new todo under a freshly generated id."""


def _new_id() -> str:
    return str(uuid.uuid4())


class MemStorage(Storage):
    """Dictionary backed storage.

    Both collections share one lock, so a read never observes a
    half‑applied write even when the store is used from several
    threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: Dict[str, UserRead] = {}
        self._todos: Dict[str, TodoRead] = {}

    async def get_user(self, user_id: str) -> Optional[UserRead]:
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy() if user else None

    async def get_user_by_username(self, username: str) -> Optional[UserRead]:
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return user.model_copy()
        return None

    async def create_user(self, data: UserCreate) -> UserRead:
        """Store a new user.

        Usernames are unique; a second user with the same name raises
        ``UsernameTakenError``.  The password is stored verbatim.
        """
        with self._lock:
            if any(u.username == data.username for u in self._users.values()):
                raise UsernameTakenError(f"Username {data.username!r} is already taken")
            user_id = _new_id()
            user = UserRead(id=user_id, **data.model_dump())
            self._users[user_id] = user
        logger.info("Created user %s", user_id)
        return user.model_copy()

    async def get_all_todos(self) -> List[TodoRead]:
        with self._lock:
            return [todo.model_copy() for todo in self._todos.values()]

    async def create_todo(self, data: TodoCreate) -> TodoRead:
        with self._lock:
            todo_id = _new_id()
            todo = TodoRead(id=todo_id, **data.model_dump())
            self._todos[todo_id] = todo
        logger.info("Created todo %s", todo_id)
        return todo.model_copy()

    def clear(self) -> None:
        """Drop every stored user and todo."""
        with self._lock:
            self._users.clear()
            self._todos.clear()
