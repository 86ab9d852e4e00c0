"""
Profile service for saved connection profiles and UI preferences.

Everything lives in Redis as small blobs:
- profiles: hash of profile id -> profile JSON
- active profile id: plain string key
- preferences: hash of preference name -> value
"""
import logging
from typing import Optional
from uuid import uuid4

from redis.asyncio import Redis

from app.database.databases.preferences_db import Keys
from app.models.profile import ConnectionProfile
from app.schemas.profile import ProfileCreate, ProfileUpdate

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for connection profiles and preferences."""

    def __init__(self, redis: Redis):
        """Initialize with a Redis client (decode_responses=True)."""
        self.redis = redis

    # ==================== Profiles ====================

    async def list_profiles(self) -> list[ConnectionProfile]:
        """List saved profiles, oldest first."""
        raw = await self.redis.hgetall(Keys.PROFILES)
        profiles = [ConnectionProfile.model_validate_json(blob) for blob in raw.values()]
        return sorted(profiles, key=lambda p: p.created_at)

    async def get_profile(self, profile_id: str) -> Optional[ConnectionProfile]:
        """Get a profile by id."""
        blob = await self.redis.hget(Keys.PROFILES, profile_id)
        if blob is None:
            return None
        return ConnectionProfile.model_validate_json(blob)

    async def create_profile(self, request: ProfileCreate) -> ConnectionProfile:
        """Save a new profile."""
        profile = ConnectionProfile(id=uuid4().hex, **request.model_dump())
        await self.redis.hset(Keys.PROFILES, profile.id, profile.model_dump_json())
        logger.info(f"Saved connection profile '{profile.name}' ({profile.host}:{profile.port})")
        return profile

    async def update_profile(
        self, profile_id: str, request: ProfileUpdate
    ) -> Optional[ConnectionProfile]:
        """Apply a partial update to a profile."""
        profile = await self.get_profile(profile_id)
        if profile is None:
            return None

        updates = request.model_dump(exclude_unset=True)
        if not updates:
            return profile

        profile = profile.model_copy(update=updates)
        await self.redis.hset(Keys.PROFILES, profile.id, profile.model_dump_json())
        return profile

    async def delete_profile(self, profile_id: str) -> bool:
        """Delete a profile; clears the active pointer if it pointed at it."""
        removed = await self.redis.hdel(Keys.PROFILES, profile_id)
        if not removed:
            return False

        if await self.get_active_profile_id() == profile_id:
            await self.redis.delete(Keys.ACTIVE_PROFILE_ID)
        return True

    # ==================== Active profile ====================

    async def get_active_profile_id(self) -> Optional[str]:
        """Get the active profile id, None when unset."""
        return await self.redis.get(Keys.ACTIVE_PROFILE_ID)

    async def set_active_profile_id(self, profile_id: Optional[str]) -> bool:
        """
        Point the active profile at an existing profile, or clear it with None.

        Returns:
            False if the profile does not exist
        """
        if profile_id is None:
            await self.redis.delete(Keys.ACTIVE_PROFILE_ID)
            return True

        if not await self.redis.hexists(Keys.PROFILES, profile_id):
            return False

        await self.redis.set(Keys.ACTIVE_PROFILE_ID, profile_id)
        return True

    # ==================== Preferences ====================

    async def get_preferences(self) -> dict[str, str]:
        """All stored preferences."""
        return await self.redis.hgetall(Keys.PREFERENCES)

    async def get_preference(self, name: str) -> Optional[str]:
        """One preference value, None when unset."""
        return await self.redis.hget(Keys.PREFERENCES, name)

    async def set_preference(self, name: str, value: Optional[str]) -> None:
        """Store a preference; None removes it."""
        if value is None:
            await self.redis.hdel(Keys.PREFERENCES, name)
        else:
            await self.redis.hset(Keys.PREFERENCES, name, value)
