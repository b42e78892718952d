"""
Static asset router.

Maps request paths to files under the configured static directory with
extension-based content types. `/` serves `/index.html`.
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Request, Response, status

from punchcalc.config import get_config

logger = logging.getLogger(__name__)

router = APIRouter(tags=["static"])

MIME_TYPES = {
    ".html": "text/html",
    ".js": "text/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".gif": "image/gif",
    ".ico": "image/x-icon",
}
DEFAULT_MIME_TYPE = "application/octet-stream"

NOT_FOUND_BODY = "<h1>404 - File Not Found</h1>"
SERVER_ERROR_BODY = "<h1>500 - Server Error</h1>"


def content_type_for(path: Path) -> str:
    return MIME_TYPES.get(path.suffix, DEFAULT_MIME_TYPE)


def resolve_static_path(root: Path, url_path: str) -> Path | None:
    """
    Map a URL path onto a file under root.

    Returns None if the path escapes the root directory or is not a valid
    file name.
    """
    if "\x00" in url_path:
        return None
    if url_path in ("", "/"):
        url_path = "/index.html"
    root = root.resolve()
    candidate = (root / url_path.lstrip("/")).resolve()
    if candidate != root and root not in candidate.parents:
        return None
    return candidate


@router.get("/{file_path:path}", include_in_schema=False)
async def serve_static(request: Request, file_path: str) -> Response:
    """Serve a file from the static directory."""
    root = get_config().static_dir
    target = resolve_static_path(root, file_path)

    url = request.url
    logger.info("Request: %s -> %s", f"{url.path}?{url.query}" if url.query else url.path, target)

    if target is None:
        return Response(NOT_FOUND_BODY, status_code=status.HTTP_404_NOT_FOUND, media_type="text/html")

    try:
        data = target.read_bytes()
    except FileNotFoundError:
        return Response(NOT_FOUND_BODY, status_code=status.HTTP_404_NOT_FOUND, media_type="text/html")
    except OSError:
        logger.exception("Failed to read %s", target)
        return Response(SERVER_ERROR_BODY, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                        media_type="text/html")

    return Response(data, media_type=content_type_for(target))
