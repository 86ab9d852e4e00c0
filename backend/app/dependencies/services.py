"""
Service dependencies for route injection.
"""
from app.config import get_settings
from app.database.connections import get_cluster_client, get_redis_client
from app.services.cluster_service import ClusterService
from app.services.profile_service import ProfileService
from app.services.record_service import RecordService


async def get_cluster_service() -> ClusterService:
    """Dependency to get ClusterService instance."""
    cluster = await get_cluster_client()
    return ClusterService(cluster, get_settings())


async def get_record_service() -> RecordService:
    """Dependency to get RecordService instance."""
    cluster = await get_cluster_client()
    return RecordService(cluster, get_settings())


async def get_profile_service() -> ProfileService:
    """Dependency to get ProfileService instance."""
    redis = await get_redis_client()
    return ProfileService(redis)
