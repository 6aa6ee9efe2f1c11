"""Todo page controller and console front end.

:class:`TodoPage` holds the state of the todo page independently of
how it is drawn: the cached list and its fetch status, the title
field, the inline field error and whether a creation request is in
flight.  The browser page served by the server implements the same
behaviour in JavaScript; this module drives it from Python and backs
the interactive console started by :func:`main`.

List states are mutually exclusive and checked in this order:

``error``
    The last fetch failed.
``loading``
    No data has been received yet.
``empty``
    The fetch succeeded with zero todos.
``populated``
    At least one todo is available.

Submitting the form validates the title with the same rule the server
applies.  While the request is pending the input and the button are
disabled; ``submit`` returns only after the request settled, and the
page is usable again in every outcome.

The console reads one environment variable:

``TODO_API_BASE_URL``
    Base URL of the todo server.  Defaults to ``http://localhost:8000``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from todo_api_client import TodoAPI
from todo_app.app.schemas.validation import validate_insert_todo


logger = logging.getLogger(__name__)

EMPTY_TITLE_MESSAGE = "Please enter a todo title"
CREATE_FAILED_MESSAGE = "Failed to create todo"
LOAD_FAILED_MESSAGE = "Failed to load todos. Please try refreshing the page."
EMPTY_LIST_MESSAGE = "No todos yet. Create your first one above!"
TITLE_PLACEHOLDER = "What needs to be done?"
SHORT_ID_LENGTH = 8


class ListState(str, Enum):
    ERROR = "error"
    LOADING = "loading"
    EMPTY = "empty"
    POPULATED = "populated"


@dataclass
class Notification:
    """A transient message shown to the user (a toast)."""

    title: str
    description: str
    variant: str = "default"


def log_notification(notification: Notification) -> None:
    level = logging.WARNING if notification.variant == "destructive" else logging.INFO
    logger.log(level, "%s: %s", notification.title, notification.description)


def print_notification(notification: Notification) -> None:
    marker = "!!" if notification.variant == "destructive" else "**"
    print(f"{marker} {notification.title}: {notification.description}")


def short_id(todo_id: str) -> str:
    return "#" + str(todo_id)[:SHORT_ID_LENGTH]


class TodoPage:
    """State and behaviour of the todo page."""

    def __init__(
        self,
        api: TodoAPI,
        notify: Optional[Callable[[Notification], None]] = None,
    ) -> None:
        self.api = api
        self.notify = notify or log_notification
        # Cached list.  ``None`` until the first successful fetch.
        self.todos: Optional[List[Dict[str, Any]]] = None
        self.query_error: Optional[Dict[str, Any]] = None
        self.stale = True
        # Form state
        self.title = ""
        self.field_error: Optional[str] = None
        self.is_pending = False

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------
    @property
    def state(self) -> ListState:
        if self.query_error:
            return ListState.ERROR
        if self.todos is None:
            return ListState.LOADING
        if not self.todos:
            return ListState.EMPTY
        return ListState.POPULATED

    def mount(self) -> None:
        """Fetch the list for the first time."""
        self.refresh()

    def refresh(self) -> None:
        todos, error = self.api.list_todos()
        if error:
            self.query_error = error
            return
        self.todos = todos
        self.query_error = None
        self.stale = False

    def invalidate(self) -> None:
        """Mark the cached list stale and fetch it again."""
        self.stale = True
        self.refresh()

    # ------------------------------------------------------------------
    # Form
    # ------------------------------------------------------------------
    @property
    def is_disabled(self) -> bool:
        """Whether the title input and the submit button are disabled."""
        return self.is_pending

    def set_title(self, value: str) -> None:
        self.title = value
        self.field_error = None

    def submit(self) -> bool:
        """Submit the form and return whether a todo was created.

        Invalid titles set :attr:`field_error` and never reach the
        server.  On success the field is cleared, the list is fetched
        again and a success notification is sent.  On failure the field
        keeps its value and an error notification carries the server's
        message.
        """
        if self.is_pending:
            return False

        result = validate_insert_todo({"title": self.title}, empty_message=EMPTY_TITLE_MESSAGE)
        if not result.ok:
            self.field_error = result.errors[0].message
            return False
        self.field_error = None

        self.is_pending = True
        try:
            todo, error = self.api.create_todo(result.value.title)
            if error:
                self.notify(Notification(
                    title="Error",
                    description=error.get("message") or CREATE_FAILED_MESSAGE,
                    variant="destructive",
                ))
                return False
            logger.debug("Created todo %s", todo.get("id") if todo else None)
            self.title = ""
            self.invalidate()
            self.notify(Notification(title="Success", description="Todo created successfully"))
            return True
        finally:
            self.is_pending = False

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self) -> str:
        """Render the page as plain text."""
        lines = ["Todo App", "=" * 8, ""]

        field = self.title or TITLE_PLACEHOLDER
        button = "Creating..." if self.is_pending else "Create"
        suffix = " (disabled)" if self.is_disabled else ""
        lines.append(f"[ {field} ] [ {button} ]{suffix}")
        if self.field_error:
            lines.append(f"  ! {self.field_error}")
        lines.append("")

        state = self.state
        if state is ListState.ERROR:
            lines.append(f"! {LOAD_FAILED_MESSAGE}")
        elif state is ListState.LOADING:
            lines.extend(["  ..."] * 3)
        elif state is ListState.EMPTY:
            lines.append(EMPTY_LIST_MESSAGE)
        else:
            for todo in self.todos:
                lines.append(f"- {todo.get('title', '')}  {short_id(todo.get('id', ''))}")
        return "\n".join(lines)


def main() -> None:
    """Run an interactive todo page in the terminal.

    Each input line is submitted as a new todo title.  ``/refresh``
    fetches the list again and ``/quit`` leaves.
    """
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(levelname)s] %(message)s")
    base_url = os.getenv("TODO_API_BASE_URL", "http://localhost:8000")
    api = TodoAPI(base_url=base_url)
    page = TodoPage(api, notify=print_notification)
    page.mount()
    print(page.render())
    try:
        while True:
            line = input("> ")
            command = line.strip()
            if command in {"/quit", "/exit"}:
                break
            if command == "/refresh":
                page.invalidate()
            else:
                page.set_title(line)
                page.submit()
            print(page.render())
    except (KeyboardInterrupt, EOFError):
        print()


if __name__ == "__main__":
    main()
