"""Activation selector parsing.

The selector names the single route group that is registered for the
lifetime of the process.
"""

from loguru import logger

from conditional_demo.constants import KNOWN_PROFILES


def parse_profile(config: str | None) -> str | None:
    """Resolve the raw selector into an active profile name.

    Args:
        config: Profile name (case-insensitive, surrounding whitespace ignored),
            None, or empty string.

    Returns:
        The recognized profile name in lowercase, or None when no route group
        should be active.

    Examples:
        >>> parse_profile("typeone")
        'typeone'
        >>> parse_profile(" TypeTwo ")
        'typetwo'
        >>> parse_profile(None) is None
        True
        >>> parse_profile("typethree") is None
        True
    """
    if not config or not config.strip():
        return None

    profile = config.strip().lower()
    if profile not in KNOWN_PROFILES:
        logger.warning(f"Unrecognized profile '{config}' (known: {', '.join(sorted(KNOWN_PROFILES))}), no route group active")
        return None

    return profile


__all__ = ["parse_profile"]
