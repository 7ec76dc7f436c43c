"""Exception handlers for FastAPI applications.

Maps neo-catalog exceptions raised inside catalog resources to structured
JSON error responses with the proper status codes.
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.exceptions import (
    NeoCatalogError,
    create_error_response,
    get_http_status_code,
)

logger = logging.getLogger(__name__)


async def neo_catalog_exception_handler(request: Request, exc: NeoCatalogError) -> JSONResponse:
    """Convert a neo-catalog exception into an error response."""
    status_code = get_http_status_code(exc)

    if status_code >= 500:
        logger.error(
            f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}"
        )
    else:
        logger.info(
            f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}"
        )

    content = create_error_response(exc)
    content["error"]["path"] = request.url.path
    content["error"]["timestamp"] = datetime.now(timezone.utc).isoformat()
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """Register neo-catalog exception handlers on an application."""
    app.add_exception_handler(NeoCatalogError, neo_catalog_exception_handler)
