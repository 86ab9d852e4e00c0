"""
Connection profile and UI preference schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field


class ProfileCreate(BaseModel):
    """Save a new connection profile."""
    name: str = Field(..., min_length=1, max_length=100)
    host: str = Field(..., min_length=1)
    port: int = Field(3000, ge=1, le=65535)
    username: Optional[str] = None
    password: Optional[str] = None


class ProfileUpdate(BaseModel):
    """Partial profile update."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    host: Optional[str] = Field(None, min_length=1)
    port: Optional[int] = Field(None, ge=1, le=65535)
    username: Optional[str] = None
    password: Optional[str] = None


class ActiveProfile(BaseModel):
    """Active profile pointer."""
    profile_id: Optional[str] = Field(None, description="Active profile id, None when unset")


class PreferenceValue(BaseModel):
    """A single UI preference scalar."""
    name: str
    value: Optional[str] = None


class PreferenceUpdate(BaseModel):
    """Set a preference; a null value removes it."""
    value: Optional[str] = Field(None, max_length=200)
