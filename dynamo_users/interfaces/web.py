"""
Index page router.

Serves the bundled single-page client at ``/``. The asset is read on
every request; a missing file yields a 500 instead of a crash.
"""

import logging
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"
INDEX_FILE = "index.html"

router = APIRouter(tags=["web"])


def read_index(static_dir: Path | None = None) -> str | None:
    """Return the index page, or None if the asset is missing."""
    static_dir = static_dir or STATIC_DIR
    try:
        return (static_dir / INDEX_FILE).read_text(encoding="utf-8")
    except OSError:
        logger.error("Index page not found in %s", static_dir)
        return None


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index() -> HTMLResponse:
    """Return the static index page."""
    content = read_index()
    if content is None:
        return HTMLResponse("internal error", status_code=500)
    return HTMLResponse(content)
