"""
Record request/response schemas.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from app.models.record import KeyType, MatchType


class RecordWrite(BaseModel):
    """Upsert a record."""
    namespace: str = Field(..., min_length=1, description="Target namespace")
    set_name: str = Field(..., min_length=1, description="Target set")
    key: str = Field(..., min_length=1, description="Primary key as a string")
    key_type: KeyType = Field(default=KeyType.STRING, description="Native key type")
    bins: dict[str, Any] = Field(..., description="Bin name -> value (at least one)")
    ttl: Optional[int] = Field(None, description="Explicit TTL override; None keeps the store default")

    @field_validator("bins")
    @classmethod
    def bins_not_empty(cls, v: dict[str, Any]) -> dict[str, Any]:
        if not v:
            raise ValueError("At least one bin is required")
        return v


class SearchRequest(BaseModel):
    """Key-pattern search over a set."""
    namespace: str = Field(..., min_length=1)
    set_name: str = Field(..., min_length=1)
    pattern: str = Field(..., description="Pattern compared against record keys")
    match_type: MatchType = Field(default=MatchType.EXACT)
    max_results: Optional[int] = Field(None, ge=1, le=10000, description="Maximum matches returned")


class DeleteResponse(BaseModel):
    """Result of a delete."""
    deleted: bool = Field(..., description="False when the record did not exist")
