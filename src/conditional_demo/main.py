"""Main entry point for the conditional demo server using Typer and Pydantic Settings."""

import os

import typer
import uvicorn
from loguru import logger
from rich.console import Console
from rich.table import Table

from conditional_demo.logging import setup_logging
from conditional_demo.settings import Settings, get_settings

app = typer.Typer(
    name="conditional-demo",
    help="Profile-conditional HTTP front end",
    no_args_is_help=True,
)

console = Console()


HOST_OPTION = typer.Option(
    None,
    help="Host to bind the server to (overrides CONDITIONAL_DEMO_HOST)",
    metavar="<server>",
)  # fmt: skip
PORT_OPTION = typer.Option(
    None,
    help="Port to bind the server to (overrides CONDITIONAL_DEMO_PORT)",
    metavar="<port>",
)  # fmt: skip
RELOAD_OPTION = typer.Option(
    None,
    help="Enable/disable auto-reload (overrides CONDITIONAL_DEMO_RELOAD)",
)  # fmt: skip
LOG_LEVEL_OPTION = typer.Option(
    None,
    help="Log level (overrides CONDITIONAL_DEMO_LOG_LEVEL)",
    metavar="<level>",
    case_sensitive=False,
)  # fmt: skip
PROFILE_OPTION = typer.Option(
    None,
    "-p",
    "--profile",
    help="Active profile: typeone or typetwo (overrides CONDITIONAL_DEMO_PROFILE). Omit for none.",
    metavar="<profile>",
)  # fmt: skip


def _update_settings(
    host: str | None,
    port: int | None,
    log_level: str | None,
    reload: bool | None,
    profile: str | None,
) -> Settings:
    """Update the cached settings with CLI overrides.

    Args:
        host: Host override
        port: Port override
        log_level: Log level override
        reload: Reload override
        profile: Activation selector override

    Returns:
        The updated settings instance.
    """
    settings = get_settings()

    if host is not None:
        settings.host = host
    if port is not None:
        settings.port = port
    if log_level is not None:
        settings.log_level = log_level
    if reload is not None:
        settings.reload = reload
    if profile is not None:
        settings.profile = profile

    return settings


def _export_settings(settings: Settings) -> None:
    """Export the effective settings for the reloader, which builds the app in a fresh process.

    Args:
        settings: Settings including CLI overrides
    """
    os.environ["CONDITIONAL_DEMO_HOST"] = settings.host
    os.environ["CONDITIONAL_DEMO_PORT"] = str(settings.port)
    os.environ["CONDITIONAL_DEMO_LOG_LEVEL"] = settings.log_level
    if settings.profile is not None:
        os.environ["CONDITIONAL_DEMO_PROFILE"] = settings.profile


@app.command()
def run(
    host: str = HOST_OPTION,
    port: int = PORT_OPTION,
    log_level: str = LOG_LEVEL_OPTION,
    reload: bool = RELOAD_OPTION,
    profile: str = PROFILE_OPTION,
) -> None:
    """Run the server."""
    settings = _update_settings(host, port, log_level, reload, profile)

    setup_logging(settings.log_level)

    logger.info(f"Starting server on {settings.host}:{settings.port}")
    logger.info(f"Profile: {settings.profile or 'none'}")
    logger.info(f"Reload: {settings.reload}")

    if settings.reload:
        _export_settings(settings)
        uvicorn.run(
            "conditional_demo.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            reload=True,
            log_level=settings.log_level.lower(),
        )
    else:
        from conditional_demo.app import create_app

        uvicorn.run(
            create_app(settings),
            host=settings.host,
            port=settings.port,
            reload=False,
            log_level=settings.log_level.lower(),
        )


@app.command()
def routes(
    log_level: str = LOG_LEVEL_OPTION,
    profile: str = PROFILE_OPTION,
) -> None:
    """Show the routes the server would expose, without starting it."""
    settings = _update_settings(None, None, log_level, None, profile)

    setup_logging(settings.log_level)

    from conditional_demo.app import create_app, list_routes

    fastapi_app = create_app(settings)
    active_profile = fastapi_app.state.active_profile

    table = Table(title=f"Routes (profile: {active_profile or 'none'})")
    table.add_column("Method")
    table.add_column("Path")
    table.add_column("Group")
    for method, path, group in list_routes(fastapi_app):
        table.add_row(method, path, group)

    console.print(table)


if __name__ == "__main__":
    app()
