"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
application starts without any configuration at all.  Tests and
embedding code may construct their own ``Settings`` instance and pass
it to ``create_app`` instead of relying on the module‑level one.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Todo App")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Address used by ``run.py`` when serving the app with uvicorn.
    host: str = os.getenv("TODO_HOST", "0.0.0.0")
    port: int = int(os.getenv("TODO_PORT", "8000"))

    # When enabled, 500 responses carry the text of the underlying
    # exception in their ``message`` field.  This leaks internal detail
    # to clients; switch it off to send a generic message instead.
    expose_error_details: bool = _env_flag("EXPOSE_ERROR_DETAILS", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before this module is imported.
settings = Settings()
