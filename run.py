"""Entry point for the todo server.

Serves ``todo_app.app.main:app`` with uvicorn.  It is intended to be
executed from the project root, for example in Docker, where you only
specify a single Python file to run.

Host, port and log level come from ``Settings`` (``TODO_HOST``,
``TODO_PORT`` and ``LOG_LEVEL``).  Defaults are ``0.0.0.0``, ``8000``
and ``INFO``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from todo_app.app.core.config import settings
from todo_app.app.main import app


async def main() -> None:
    """Serve the application until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving todo app on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
