"""
Service layer for business logic.
"""
from app.services.cluster_service import ClusterService
from app.services.record_service import RecordService
from app.services.profile_service import ProfileService

__all__ = [
    "ClusterService",
    "RecordService",
    "ProfileService",
]
