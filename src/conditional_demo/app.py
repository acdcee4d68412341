"""Main FastAPI application module.

The activation selector is resolved once, before any route is registered, and
at most one profile route group is included. Paths of the other group are
never registered and therefore answer 404.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from conditional_demo.api.typeone import router as typeone_router
from conditional_demo.api.typetwo import router as typetwo_router
from conditional_demo.constants import PROFILE_TYPEONE, PROFILE_TYPETWO
from conditional_demo.exception_handlers import register_exception_handlers
from conditional_demo.profile import parse_profile
from conditional_demo.settings import Settings, get_settings
from conditional_demo.utils.version import get_version


def list_routes(app: FastAPI) -> list[tuple[str, str, str]]:
    """Collect the API routes registered on the application.

    Args:
        app: The FastAPI application instance

    Returns:
        Sorted list of (method, path, group) tuples, where group is the
        router tag ("TypeOne", "TypeTwo").
    """
    # Included routers are not always flattened into app.routes, the OpenAPI paths are
    routes = []
    for path, operations in app.openapi().get("paths", {}).items():
        for method, operation in operations.items():
            tags = operation.get("tags") or [""]
            routes.append((method.upper(), path, str(tags[0])))
    return sorted(routes, key=lambda r: (r[1], r[0]))


def _log_server_endpoints_summary(app: FastAPI, settings: Settings) -> None:
    """Log the server URL, the registered endpoints and the active profile.

    Args:
        app: The FastAPI application instance
        settings: Application settings containing host and port
    """
    server_url = f"http://{settings.host}:{settings.port}"
    logger.info(f"Server running at: {server_url}")

    logger.info("Available endpoints:")
    for method, path, group in list_routes(app):
        logger.info(f"   {method} {server_url}{path} ({group})")

    active_profile = app.state.active_profile
    if active_profile is None:
        logger.warning("No profile active, profile route groups are not registered")
    else:
        logger.info(f"Active profile: {active_profile}")


@asynccontextmanager
async def app_lifespan(_app: FastAPI):
    """Handle startup and shutdown events for the application."""
    _log_server_endpoints_summary(_app, _app.state.settings)

    yield

    logger.info("Server shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application for the given settings.

    Args:
        settings: Settings to use. Defaults to the cached ``get_settings()``.

    Returns:
        FastAPI application with the route group of the active profile, if any.
    """
    settings = settings or get_settings()

    # Resolve the selector before registering any route
    active_profile = parse_profile(settings.profile)

    app = FastAPI(
        lifespan=app_lifespan,
        title="Conditional demo server",
        description="Profile-conditional route registration demo",
        version=get_version().version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings  # type: ignore[attr-defined]
    app.state.active_profile = active_profile  # type: ignore[attr-defined]

    register_exception_handlers(app)

    # Profile-based endpoints
    if active_profile == PROFILE_TYPEONE:
        app.include_router(typeone_router, prefix="/typeone")
    elif active_profile == PROFILE_TYPETWO:
        app.include_router(typetwo_router, prefix="/typetwo")

    logger.debug(f"Application created (profile: {active_profile or 'none'})")
    return app
