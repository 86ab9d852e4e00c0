"""
Request and response schemas for API endpoints.
"""
from app.schemas.connection import ConnectRequest
from app.schemas.record import RecordWrite, SearchRequest, DeleteResponse
from app.schemas.namespace import NamespaceStats
from app.schemas.profile import (
    ProfileCreate,
    ProfileUpdate,
    ActiveProfile,
    PreferenceValue,
    PreferenceUpdate,
)

__all__ = [
    # Connection
    "ConnectRequest",
    # Records
    "RecordWrite",
    "SearchRequest",
    "DeleteResponse",
    # Namespaces
    "NamespaceStats",
    # Profiles
    "ProfileCreate",
    "ProfileUpdate",
    "ActiveProfile",
    "PreferenceValue",
    "PreferenceUpdate",
]
