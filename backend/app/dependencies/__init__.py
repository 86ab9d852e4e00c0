"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.services import (
    get_cluster_service,
    get_record_service,
    get_profile_service,
)

__all__ = [
    "get_cluster_service",
    "get_record_service",
    "get_profile_service",
]
