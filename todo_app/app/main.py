"""
Main entrypoint for the Todo App server.

This module assembles the FastAPI application, sets up logging and
includes the routers.  ``create_app`` builds and configures the app,
which is then instantiated at module import time as ``app`` so it can
be served directly, e.g.::

    uvicorn todo_app.app.main:app --reload

The storage backend is created here, once per application, and
handed to the endpoints through ``app.state``.  Pass your own
``storage`` (or ``app_settings``) to ``create_app`` to replace the
defaults, for example with a test double.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.endpoints import pages
from .api.router import router as api_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.storage import MemStorage, Storage

logger = logging.getLogger(__name__)


def create_app(
    storage: Optional[Storage] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    storage : Optional[Storage]
        Storage backend used by the endpoints.  A fresh ``MemStorage``
        is created when omitted.
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings

    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.storage = storage if storage is not None else MemStorage()
    logger.info("Using %s storage", type(app.state.storage).__name__)

    app.include_router(api_router, prefix="/api")
    app.include_router(pages.router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
