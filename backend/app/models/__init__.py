"""
Pydantic models for store entities and saved profiles.
"""
from app.models.record import Record, MatchType, KeyType
from app.models.cluster import NodeInfo, ConnectionInfo, NamespaceInfo, SetInfo
from app.models.profile import ConnectionProfile

__all__ = [
    "Record",
    "MatchType",
    "KeyType",
    "NodeInfo",
    "ConnectionInfo",
    "NamespaceInfo",
    "SetInfo",
    "ConnectionProfile",
]
