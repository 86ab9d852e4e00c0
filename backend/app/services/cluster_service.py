"""
Cluster service for connection management and namespace/set browsing.
"""
import logging

from fastapi.concurrency import run_in_threadpool

from app.config import Settings
from app.core.exceptions import ClusterConnectionError
from app.database.cluster import ClusterClient
from app.models.cluster import ConnectionInfo, NamespaceInfo, SetInfo
from app.schemas.connection import ConnectRequest
from app.schemas.namespace import NamespaceStats

logger = logging.getLogger(__name__)


class ClusterService:
    """Service for cluster connection and metadata operations."""

    def __init__(self, cluster: ClusterClient, settings: Settings):
        """Initialize with the shared cluster client and settings."""
        self.cluster = cluster
        self.settings = settings

    # ==================== Connection ====================

    async def connect(self, request: ConnectRequest) -> ConnectionInfo:
        """
        Connect to a cluster, replacing any current connection.

        A failed connect is reported in the returned ConnectionInfo rather
        than raised, so the UI can show it next to the connection form.
        """
        host = request.host or self.settings.aerospike_host
        port = request.port or self.settings.aerospike_port
        try:
            return await run_in_threadpool(
                self.cluster.connect, host, port, request.username, request.password
            )
        except ClusterConnectionError as e:
            return ConnectionInfo(connected=False, message=e.message)

    async def disconnect(self) -> None:
        """Close the current connection (no-op when not connected)."""
        await run_in_threadpool(self.cluster.close)

    async def get_connection_info(self) -> ConnectionInfo:
        """Describe the current connection."""
        return await run_in_threadpool(self.cluster.connection_info)

    # ==================== Namespaces & Sets ====================

    async def list_namespaces(self) -> list[NamespaceInfo]:
        """List namespaces."""
        return await run_in_threadpool(self.cluster.namespaces)

    async def list_sets(self, namespace: str) -> list[SetInfo]:
        """List sets of a namespace."""
        return await run_in_threadpool(self.cluster.sets, namespace)

    async def get_namespace_stats(self, namespace: str) -> NamespaceStats:
        """Aggregate set statistics for a namespace."""
        sets = await self.list_sets(namespace)
        return NamespaceStats(
            namespace=namespace,
            total_sets=len(sets),
            total_records=sum(s.object_count for s in sets),
            total_memory_bytes=sum(s.memory_data_bytes for s in sets),
            total_device_bytes=sum(s.device_data_bytes for s in sets),
            sets=sorted(sets, key=lambda s: s.object_count, reverse=True),
        )
