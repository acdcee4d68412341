"""Utility functions for the conditional demo server."""

from conditional_demo.utils.version import VersionInfo, get_version

__all__ = ["VersionInfo", "get_version"]
