"""
Record service for scanning, searching and editing records.
"""
import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from app.config import Settings
from app.database.cluster import ClusterClient
from app.models.record import KeyType, Record
from app.schemas.record import RecordWrite, SearchRequest

logger = logging.getLogger(__name__)


class RecordService:
    """Service for record operations against the connected cluster."""

    def __init__(self, cluster: ClusterClient, settings: Settings):
        """Initialize with the shared cluster client and settings."""
        self.cluster = cluster
        self.settings = settings

    async def scan(
        self,
        namespace: str,
        set_name: str,
        max_records: Optional[int] = None,
    ) -> list[Record]:
        """
        Scan a set.

        Args:
            namespace: Namespace to scan
            set_name: Set to scan
            max_records: Record cap; None uses the configured default, 0 means no cap

        Returns:
            Records in scan order
        """
        if max_records is None:
            max_records = self.settings.scan_max_records
        records = await run_in_threadpool(self.cluster.scan, namespace, set_name, max_records)
        logger.info(f"Scanned {len(records)} records from {namespace}.{set_name}")
        return records

    async def search(self, request: SearchRequest) -> list[Record]:
        """
        Search a set by key pattern.

        Scans up to ``max_results * search_scan_multiplier`` records and
        returns at most ``max_results`` matches.
        """
        max_results = request.max_results or self.settings.search_max_results
        scan_limit = max_results * self.settings.search_scan_multiplier
        records = await run_in_threadpool(
            self.cluster.search,
            request.namespace,
            request.set_name,
            request.pattern,
            request.match_type,
            max_results,
            scan_limit,
        )
        logger.info(
            f"Search {request.match_type.value} '{request.pattern}' in "
            f"{request.namespace}.{request.set_name}: {len(records)} matches"
        )
        return records

    async def get_record(
        self,
        namespace: str,
        set_name: str,
        key: str,
        key_type: KeyType = KeyType.STRING,
    ) -> Record:
        """Get one record (raises RecordNotFoundError)."""
        return await run_in_threadpool(self.cluster.get, namespace, set_name, key, key_type)

    async def put_record(self, request: RecordWrite) -> Record:
        """Upsert a record and return the stored version."""
        return await run_in_threadpool(
            self.cluster.put,
            request.namespace,
            request.set_name,
            request.key,
            request.bins,
            request.ttl,
            request.key_type,
        )

    async def delete_record(
        self,
        namespace: str,
        set_name: str,
        key: str,
        key_type: KeyType = KeyType.STRING,
    ) -> bool:
        """Delete a record; False when it did not exist."""
        deleted = await run_in_threadpool(self.cluster.delete, namespace, set_name, key, key_type)
        if deleted:
            logger.info(f"Deleted record {namespace}.{set_name}.{key}")
        return deleted
