"""
Records router for scanning, searching and editing records.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.dependencies.services import get_record_service
from app.models.record import KeyType, Record
from app.schemas.record import DeleteResponse, RecordWrite, SearchRequest
from app.services.record_service import RecordService

router = APIRouter(prefix="/api/records", tags=["Records"])


@router.get(
    "/scan",
    response_model=list[Record],
    summary="Scan a set",
)
async def scan_records(
    namespace: str = Query(..., min_length=1, description="Namespace"),
    set_name: str = Query(..., min_length=1, description="Set"),
    max_records: Optional[int] = Query(
        None, ge=0, le=100000, description="Record cap (default from settings, 0 = no cap)"
    ),
    record_service: RecordService = Depends(get_record_service),
):
    """Scan up to `max_records` records of a set."""
    return await record_service.scan(namespace, set_name, max_records)


@router.post(
    "/search",
    response_model=list[Record],
    summary="Search a set by key",
)
async def search_records(
    body: SearchRequest,
    record_service: RecordService = Depends(get_record_service),
):
    """
    Search records whose key matches a pattern.

    - **pattern**: Compared against the string form of each key
    - **match_type**: EXACT, PREFIX, SUFFIX or CONTAINS
    - **max_results**: Maximum matches (default from settings)
    """
    return await record_service.search(body)


@router.get(
    "/{namespace}/{set_name}/{key}",
    response_model=Record,
    summary="Get a record",
)
async def get_record(
    namespace: str,
    set_name: str,
    key: str,
    key_type: KeyType = Query(KeyType.STRING, description="Native key type"),
    record_service: RecordService = Depends(get_record_service),
):
    """Get one record by key. Returns 404 when it does not exist."""
    return await record_service.get_record(namespace, set_name, key, key_type)


@router.post(
    "",
    response_model=Record,
    summary="Create or update a record",
)
async def put_record(
    body: RecordWrite,
    record_service: RecordService = Depends(get_record_service),
):
    """
    Upsert a record.

    - **ttl**: omit to keep the namespace default, or give an explicit value
      (-1 never expires)
    """
    return await record_service.put_record(body)


@router.delete(
    "/{namespace}/{set_name}/{key}",
    response_model=DeleteResponse,
    summary="Delete a record",
)
async def delete_record(
    namespace: str,
    set_name: str,
    key: str,
    key_type: KeyType = Query(KeyType.STRING, description="Native key type"),
    record_service: RecordService = Depends(get_record_service),
):
    """Delete a record. `deleted` is false when the record did not exist."""
    deleted = await record_service.delete_record(namespace, set_name, key, key_type)
    return DeleteResponse(deleted=deleted)
