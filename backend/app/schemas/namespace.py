"""
Namespace statistics schema.
"""
from pydantic import BaseModel, Field

from app.models.cluster import SetInfo


class NamespaceStats(BaseModel):
    """Aggregated set statistics for one namespace."""
    namespace: str
    total_sets: int = Field(..., description="Number of sets")
    total_records: int = Field(..., description="Sum of set object counts")
    total_memory_bytes: int = Field(..., description="Sum of set memory data bytes")
    total_device_bytes: int = Field(..., description="Sum of set device data bytes")
    sets: list[SetInfo] = Field(..., description="Sets sorted by object count, largest first")
