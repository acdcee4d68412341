"""Version utility module."""

from importlib.metadata import PackageNotFoundError, version

from loguru import logger
from pydantic import BaseModel

DISTRIBUTION_NAME = "conditional-demo"
DEV_VERSION = "0.1.0-dev"


class VersionInfo(BaseModel):
    """Version information model."""

    name: str
    version: str
    is_installed: bool = True


def get_version() -> VersionInfo:
    """Get the installed distribution version with a fallback for development.

    Returns:
        VersionInfo model. ``is_installed`` is False when the distribution
        metadata is unavailable (e.g. running from a plain source checkout).
    """
    try:
        dist_version = version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        logger.warning(f"Distribution '{DISTRIBUTION_NAME}' not installed, using default version")
        return VersionInfo(name=DISTRIBUTION_NAME, version=DEV_VERSION, is_installed=False)

    logger.trace(f"Resolved version {dist_version}")
    return VersionInfo(name=DISTRIBUTION_NAME, version=dist_version)
