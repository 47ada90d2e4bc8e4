"""
Employee List Backend — Frontend Bundle Serving
=================================================

What:  Serves the prebuilt frontend: index.html at "/" and every other file
       in the bundle directory as a static asset.
Why:   The backend and the single-page frontend ship as one process.
How:   An explicit GET / route returns the entry document; the bundle
       directory is mounted with Starlette's StaticFiles *after* all API
       routers, so /api/* and /health always win.
"""

import logging
from pathlib import Path

from fastapi import APIRouter, FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from employee_api.config import settings
from employee_api.exceptions import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Frontend"])

ENTRY_DOCUMENT = "index.html"


@router.get(
    "/",
    include_in_schema=False,
    responses={
        200: {"description": "Frontend entry document"},
        404: {"description": "Frontend bundle not built"},
    },
)
async def serve_index() -> FileResponse:
    """Return the frontend's index.html, or 404 if the bundle is missing."""
    index_path = Path(settings.frontend_dist).resolve() / ENTRY_DOCUMENT
    if not index_path.is_file():
        raise NotFoundError(
            resource="frontend entry document",
            message="Frontend bundle not found. Build the frontend into FRONTEND_DIST.",
            context={"path": str(index_path)},
        )
    return FileResponse(path=str(index_path), media_type="text/html")


def mount_frontend(app: FastAPI, directory: str) -> bool:
    """
    Mount the bundle directory at "/" for static assets.

    Must be called after every API router is included: a mount at "/" matches
    any path, so anything registered later would be unreachable.

    Returns:
        True if mounted, False if the directory does not exist.
    """
    path = Path(directory)
    if not path.is_dir():
        logger.warning("Frontend bundle directory %s not found; static assets disabled", path.resolve())
        return False
    app.mount("/", StaticFiles(directory=str(path)), name="frontend")
    return True
