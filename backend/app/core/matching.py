"""
Key pattern matching used by record search.
"""
from app.models.record import MatchType


def key_matches(key: str, pattern: str, match_type: MatchType | str) -> bool:
    """
    Check a record key against a search pattern.

    Comparison is case-sensitive and done on the string form of the key.

    Args:
        key: Record key as a string
        pattern: Search pattern
        match_type: EXACT, PREFIX, SUFFIX or CONTAINS

    Returns:
        True if the key matches
    """
    match_type = MatchType(match_type)
    if match_type == MatchType.EXACT:
        return key == pattern
    if match_type == MatchType.PREFIX:
        return key.startswith(pattern)
    if match_type == MatchType.SUFFIX:
        return key.endswith(pattern)
    return pattern in key
