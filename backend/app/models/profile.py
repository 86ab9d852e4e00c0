"""
Connection profile model for the preferences store.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class ConnectionProfile(BaseModel):
    """
    Saved connection parameters, stored as a JSON blob in Redis.
    """
    id: str = Field(..., description="Profile identifier")
    name: str = Field(..., description="Display name")
    host: str = Field(..., description="Seed host")
    port: int = Field(..., description="Seed port")
    username: Optional[str] = Field(None)
    password: Optional[str] = Field(None)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When this profile was saved"
    )
