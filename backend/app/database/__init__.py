"""
Database module - Aerospike cluster client, Redis connection and key layout.
"""
from app.database.connections import (
    get_cluster_client,
    get_redis_client,
    close_connections,
)
from app.database.cluster import ClusterClient
from app.database.databases import preferences_db

__all__ = [
    "get_cluster_client",
    "get_redis_client",
    "close_connections",
    "ClusterClient",
    "preferences_db",
]
