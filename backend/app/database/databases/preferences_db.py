"""
Preferences store layout.
Connection profiles and UI preferences kept in Redis.
"""

KEY_PREFIX = "aerospike_console"


class Keys:
    """Redis keys used by the preferences store."""
    PROFILES = f"{KEY_PREFIX}:connection_profiles"  # hash: profile id -> JSON blob
    ACTIVE_PROFILE_ID = f"{KEY_PREFIX}:active_profile_id"  # string
    PREFERENCES = f"{KEY_PREFIX}:preferences"  # hash: preference name -> value


class Preferences:
    """Known UI preference names."""
    THEME = "theme"
    EDITOR_WIDTH = "editor_width"

    ALL = (THEME, EDITOR_WIDTH)
