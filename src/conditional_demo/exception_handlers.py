"""Global exception handlers for the FastAPI application.

Route groups answer in plain text, so framework HTTP errors (404 for paths of
an inactive route group, 405 for unsupported methods) are rendered as plain
text as well.
"""

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Render an HTTP error as its plain-text detail."""
    logger.debug(f"{request.method} {request.url.path} -> {exc.status_code}")
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    logger.debug("Registered exception handlers")
