"""
Connection management for the Aerospike cluster and Redis.
"""
from redis.asyncio import Redis
from typing import Optional

from app.config import get_settings
from app.database.cluster import ClusterClient

# Global connection instances
_cluster_client: Optional[ClusterClient] = None
_redis_client: Optional[Redis] = None


async def get_cluster_client() -> ClusterClient:
    """Get or create the cluster client holder (not connected until /connect)."""
    global _cluster_client
    if _cluster_client is None:
        settings = get_settings()
        _cluster_client = ClusterClient(timeout_ms=settings.aerospike_timeout_ms)
    return _cluster_client


async def get_redis_client() -> Redis:
    """Get or create Redis client."""
    global _redis_client
    if _redis_client is None:
        settings = get_settings()
        _redis_client = Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            decode_responses=True,
        )
    return _redis_client


async def close_connections():
    """Close all connections."""
    global _cluster_client, _redis_client

    if _cluster_client is not None:
        _cluster_client.close()
        _cluster_client = None

    if _redis_client is not None:
        await _redis_client.close()
        _redis_client = None
