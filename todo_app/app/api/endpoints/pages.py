"""Serves the single page browser client at ``/``."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parent.parent.parent / "static"
INDEX_PAGE = STATIC_DIR / "index.html"

router = APIRouter()


@router.get("/", include_in_schema=False)
async def index() -> FileResponse:
    return FileResponse(INDEX_PAGE, media_type="text/html")
