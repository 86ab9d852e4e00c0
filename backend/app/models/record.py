"""
Record model for Aerospike records.
"""
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class MatchType(str, Enum):
    """How a search pattern is compared against record keys."""
    EXACT = "EXACT"
    PREFIX = "PREFIX"
    SUFFIX = "SUFFIX"
    CONTAINS = "CONTAINS"


class KeyType(str, Enum):
    """Native type of a record's primary key."""
    STRING = "string"
    INTEGER = "integer"
    BYTES = "bytes"
    DIGEST = "digest"  # no user key stored, addressed by digest (hex)


class Record(BaseModel):
    """
    One record of a set.

    The key is always carried as a string; ``key_type`` tells the store how to
    turn it back into the native key.
    """
    namespace: str = Field(..., description="Owning namespace")
    set_name: Optional[str] = Field(None, description="Owning set (None for records outside a set)")
    key: str = Field(..., description="Primary key rendered as a string")
    key_type: KeyType = Field(default=KeyType.STRING, description="Native key type")
    bins: dict[str, Any] = Field(default_factory=dict, description="Bin name -> value")
    ttl: Optional[int] = Field(None, description="Seconds to live (None = store default)")
    generation: Optional[int] = Field(None, description="Write generation counter")
    expiration: Optional[str] = Field(
        None, description="ISO expiration timestamp, None when the record never expires"
    )

    class Config:
        use_enum_values = True
