"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, status

from app.database.connections import get_cluster_client, get_redis_client

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check():
    """
    Readiness check that verifies backing stores.
    The cluster is reported but only counts as unhealthy on errors,
    since the console starts disconnected.
    """
    checks = {
        "api": "healthy",
        "aerospike": "unknown",
        "redis": "unknown",
    }

    # Check Aerospike
    try:
        cluster = await get_cluster_client()
        checks["aerospike"] = "healthy" if cluster.is_connected else "disconnected"
    except Exception as e:
        checks["aerospike"] = f"unhealthy: {str(e)}"

    # Check Redis
    try:
        redis = await get_redis_client()
        await redis.ping()
        checks["redis"] = "healthy"
    except Exception as e:
        checks["redis"] = f"unhealthy: {str(e)}"

    # Overall status
    all_healthy = all(
        v in ("healthy", "disconnected") for v in checks.values()
    )

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
