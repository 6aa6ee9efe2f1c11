"""
FastAPI dependencies shared by the endpoints.

Both the storage backend and the settings are attached to
``app.state`` by ``create_app``.  Reading them from the request keeps
the routers free of module level globals, so tests can build an app
around their own storage object.
"""

from fastapi import Request

from ..core.config import Settings
from ..core.storage import Storage


def get_storage(request: Request) -> Storage:
    """Return the storage object the application was created with."""
    return request.app.state.storage


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
