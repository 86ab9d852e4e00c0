"""
Aerospike Console Backend - FastAPI Application

A thin HTTP layer over the Aerospike client for browsing and editing records.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.core.exceptions import StoreError
from app.database.connections import close_connections
from app.routers import connection, health, namespaces, profiles, records

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Configure logging

    Shutdown:
    - Close the cluster and Redis connections
    """
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting up Aerospike Console Backend...")

    yield

    # Shutdown
    logger.info("Shutting down Aerospike Console Backend...")
    await close_connections()
    logger.info("Connections closed")


# Create FastAPI application
app = FastAPI(
    title="Aerospike Console API",
    description="""
## Aerospike Console API

Browse and edit the records of an Aerospike cluster.

### Features
- **Connection**: Connect to a cluster and inspect its nodes
- **Namespaces**: List namespaces, sets and per-set statistics
- **Records**: Scan, search by key, read, upsert and delete records
- **Profiles**: Saved connection profiles and UI preferences

### Errors
Failures are returned as `{"detail": "<message>"}`. Operations that need a
cluster return 409 until `POST /api/connect` succeeds.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    """Return store failures as a single detail message."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Include routers
app.include_router(health.router)
app.include_router(connection.router)
app.include_router(namespaces.router)
app.include_router(records.router)
app.include_router(profiles.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Aerospike Console API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
