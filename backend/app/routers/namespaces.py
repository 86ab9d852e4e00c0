"""
Namespaces router for namespace and set browsing.
"""
from fastapi import APIRouter, Depends

from app.dependencies.services import get_cluster_service
from app.models.cluster import NamespaceInfo, SetInfo
from app.schemas.namespace import NamespaceStats
from app.services.cluster_service import ClusterService

router = APIRouter(prefix="/api/namespaces", tags=["Namespaces"])


@router.get(
    "",
    response_model=list[NamespaceInfo],
    summary="List namespaces",
)
async def list_namespaces(
    cluster_service: ClusterService = Depends(get_cluster_service),
):
    """List namespaces of the connected cluster."""
    return await cluster_service.list_namespaces()


@router.get(
    "/{namespace}/sets",
    response_model=list[SetInfo],
    summary="List sets",
)
async def list_sets(
    namespace: str,
    cluster_service: ClusterService = Depends(get_cluster_service),
):
    """List sets of a namespace with object counts and data sizes."""
    return await cluster_service.list_sets(namespace)


@router.get(
    "/{namespace}/stats",
    response_model=NamespaceStats,
    summary="Namespace statistics",
)
async def get_namespace_stats(
    namespace: str,
    cluster_service: ClusterService = Depends(get_cluster_service),
):
    """
    Totals across the sets of a namespace.

    Sets are returned largest first (by object count).
    """
    return await cluster_service.get_namespace_stats(namespace)
