"""
Connection request schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field


class ConnectRequest(BaseModel):
    """Connect to a cluster. Host and port fall back to configured defaults."""
    host: Optional[str] = Field(None, description="Seed host")
    port: Optional[int] = Field(None, ge=1, le=65535, description="Seed port")
    username: Optional[str] = Field(None, description="Username (security-enabled clusters)")
    password: Optional[str] = Field(None, description="Password (security-enabled clusters)")
