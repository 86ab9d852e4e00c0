"""
Connection router for connecting to and disconnecting from a cluster.
"""
from fastapi import APIRouter, Depends, status

from app.dependencies.services import get_cluster_service
from app.models.cluster import ConnectionInfo
from app.schemas.connection import ConnectRequest
from app.services.cluster_service import ClusterService

router = APIRouter(prefix="/api", tags=["Connection"])


@router.post(
    "/connect",
    response_model=ConnectionInfo,
    summary="Connect to a cluster",
)
async def connect(
    body: ConnectRequest,
    cluster_service: ClusterService = Depends(get_cluster_service),
):
    """
    Connect to an Aerospike cluster.

    - **host**: Seed host (defaults to the configured host)
    - **port**: Seed port (defaults to the configured port)
    - **username** / **password**: Optional credentials

    Any existing connection is closed first. A failed connection returns
    `connected: false` with the failure in `message`.
    """
    return await cluster_service.connect(body)


@router.post(
    "/disconnect",
    status_code=status.HTTP_200_OK,
    summary="Disconnect from the cluster",
)
async def disconnect(
    cluster_service: ClusterService = Depends(get_cluster_service),
):
    """Close the current cluster connection."""
    await cluster_service.disconnect()
    return {"connected": False}


@router.get(
    "/cluster-info",
    response_model=ConnectionInfo,
    summary="Current connection status",
)
async def get_cluster_info(
    cluster_service: ClusterService = Depends(get_cluster_service),
):
    """Connection status with cluster name and nodes."""
    return await cluster_service.get_connection_info()
