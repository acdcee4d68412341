"""Global constants for the conditional demo server.

Profile names select which route group is registered at startup.
"""

# Profile names for conditional route registration
PROFILE_TYPEONE = "typeone"
PROFILE_TYPETWO = "typetwo"

KNOWN_PROFILES = frozenset({PROFILE_TYPEONE, PROFILE_TYPETWO})
