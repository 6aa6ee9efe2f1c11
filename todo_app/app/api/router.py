"""
Top‑level router for the JSON API.

Aggregates the domain routers.  The application mounts it under the
``/api`` prefix.
"""

from fastapi import APIRouter

from .endpoints import todos

router = APIRouter()

# The todos router defines its own "/todos" paths.  Do not add a prefix
# here or the endpoints would appear under ``/todos/todos``.
router.include_router(todos.router, tags=["todos"])
