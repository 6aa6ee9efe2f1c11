"""Todo App API client.

A thin wrapper around the two JSON endpoints of the todo server,
built on the ``requests`` library:

* :meth:`TodoAPI.list_todos` – return every stored todo.
* :meth:`TodoAPI.create_todo` – create a todo from a title.

Methods never raise on HTTP or network failures.  Each returns a
tuple ``(data, error)`` where exactly one side is set; ``error`` is a
dictionary with the keys ``status_code`` and ``message``.  The message
is taken from the server's ``{"error", "message"}`` body when one is
available so that callers can show it to the user as is.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

TODOS_PATH = "/api/todos"
DEFAULT_TIMEOUT = 15


class TodoAPI:
    """Client for the todo server's JSON API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for the server before giving up.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            return body.get("message") or body.get("detail") or body.get("error") or str(body)
        return str(body)

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/todos``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` is a dictionary with keys
            ``status_code`` and ``message`` describing the issue.
        """
        url = f"{self.base_url}{path}"
        headers = {"Accept": "application/json"}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = self._error_message(exc.response) if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            # Also covers a 2xx answer whose body is not JSON.
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Todo operations
    # ------------------------------------------------------------------
    def list_todos(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all todos.

        Returns:
            A tuple ``(todos, error)``. ``todos`` is empty on failure.
        """
        data, error = self._request("GET", TODOS_PATH)
        if error:
            return [], error
        if not isinstance(data, list):
            logger.error("Expected a list of todos, got %r", type(data).__name__)
            return [], {"status_code": None, "message": "Invalid response from server"}
        return data, None

    def create_todo(self, title: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a todo.

        Args:
            title: Title of the new todo.  The server trims it.
        Returns:
            A tuple ``(todo, error)``.
        """
        return self._request("POST", TODOS_PATH, json_body={"title": title})
