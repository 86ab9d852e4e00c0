"""
Cluster, namespace and set models.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field


class NodeInfo(BaseModel):
    """A cluster node as reported by the client."""
    name: str = Field(..., description="Node name")
    address: str = Field(..., description="host:port")
    active: bool = Field(default=True)


class ConnectionInfo(BaseModel):
    """Connection status returned by connect and cluster-info."""
    connected: bool = Field(..., description="Whether a cluster connection is open")
    cluster_name: Optional[str] = Field(None, description="Cluster name (first node name)")
    nodes: list[NodeInfo] = Field(default_factory=list)
    message: Optional[str] = Field(None, description="Human-readable status message")


class NamespaceInfo(BaseModel):
    """A namespace and its headline statistics."""
    name: str
    master_objects: int = 0
    replication_factor: Optional[int] = None
    storage_engine: Optional[str] = None
    config: dict[str, Any] = Field(default_factory=dict, description="Raw info key/values")


class SetInfo(BaseModel):
    """A set within a namespace."""
    namespace: str
    set_name: str
    object_count: int = 0
    memory_data_bytes: int = 0
    device_data_bytes: int = 0
