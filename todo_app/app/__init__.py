"""
Application package initializer.

The server is split into a few small pieces: ``core`` holds settings,
logging and the storage backend, ``schemas`` holds the pydantic
models and input validation, and ``api`` holds the routers that
translate HTTP requests into storage calls.

The ASGI application itself lives in ``main``.  It is not imported
here so that clients can reuse ``schemas`` without building a server.
"""
