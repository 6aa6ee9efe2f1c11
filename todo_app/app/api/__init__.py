"""
API package.

``router`` aggregates the JSON endpoints mounted under ``/api``;
``endpoints.pages`` serves the browser client.  Shared FastAPI
dependencies live in ``deps``.
"""
