"""
Todo endpoints.

``GET /todos`` lists every stored todo and ``POST /todos`` creates
one.  Both translate failures into a JSON body of the form
``{"error": ..., "message": ...}``:

* 400 ``Validation failed`` when the payload is rejected; storage is
  not called in that case.
* 500 ``Failed to fetch todos`` / ``Failed to create todo`` for any
  other error raised while talking to storage.

The POST body is read by hand rather than declared as a pydantic
parameter so that validation failures produce the 400 body above
instead of FastAPI's default 422 response.
"""

import json
import logging
from typing import Any, List

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from ...core.config import Settings
from ...core.storage import Storage
from ...schemas.error import ErrorResponse
from ...schemas.todo import TodoRead
from ...schemas.validation import validate_insert_todo
from ..deps import get_settings, get_storage

logger = logging.getLogger(__name__)

router = APIRouter()

GENERIC_ERROR_MESSAGE = "Internal server error"


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _failure_message(exc: Exception, app_settings: Settings) -> str:
    if not app_settings.expose_error_details:
        return GENERIC_ERROR_MESSAGE
    return str(exc) or "Unknown error"


async def _read_json_body(request: Request) -> Any:
    """Return the decoded JSON body; an empty body decodes to ``{}``.

    Raises ``ValueError`` when the body is not valid JSON and
    ``RecursionError`` when it nests deeper than the decoder can follow.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    return json.loads(raw)


@router.get(
    "/todos",
    response_model=List[TodoRead],
    responses={500: {"model": ErrorResponse}},
    summary="List all todos",
)
async def list_todos(
    storage: Storage = Depends(get_storage),
    app_settings: Settings = Depends(get_settings),
):
    """Return every stored todo in insertion order."""
    try:
        return await storage.get_all_todos()
    except Exception as exc:
        logger.exception("Error fetching todos")
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to fetch todos",
            _failure_message(exc, app_settings),
        )


@router.post(
    "/todos",
    response_model=TodoRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Create a todo",
)
async def create_todo(
    request: Request,
    storage: Storage = Depends(get_storage),
    app_settings: Settings = Depends(get_settings),
):
    """Validate ``{"title": ...}`` and store it.

    The title is trimmed before it is stored.  Any other field in the
    body, including ``id``, is ignored.
    """
    try:
        payload = await _read_json_body(request)
    except (ValueError, RecursionError):
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            "Validation failed",
            "Request body must be valid JSON",
        )

    result = validate_insert_todo(payload)
    if not result.ok:
        logger.info("Rejected todo: %s", result.message)
        return _error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", result.message)

    try:
        return await storage.create_todo(result.value)
    except Exception as exc:
        logger.exception("Error creating todo")
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to create todo",
            _failure_message(exc, app_settings),
        )
