"""
Profiles router for saved connection profiles and UI preferences.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from app.database.databases.preferences_db import Preferences
from app.dependencies.services import get_profile_service
from app.models.profile import ConnectionProfile
from app.schemas.profile import (
    ActiveProfile,
    PreferenceUpdate,
    PreferenceValue,
    ProfileCreate,
    ProfileUpdate,
)
from app.services.profile_service import ProfileService

router = APIRouter(prefix="/api", tags=["Profiles"])


def _check_preference_name(name: str) -> None:
    if name not in Preferences.ALL:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown preference: {name}",
        )


# ==================== Profiles ====================

@router.get(
    "/profiles",
    response_model=list[ConnectionProfile],
    summary="List saved profiles",
)
async def list_profiles(
    profile_service: ProfileService = Depends(get_profile_service),
):
    """List saved connection profiles, oldest first."""
    return await profile_service.list_profiles()


@router.post(
    "/profiles",
    response_model=ConnectionProfile,
    status_code=status.HTTP_201_CREATED,
    summary="Save a profile",
)
async def create_profile(
    body: ProfileCreate,
    profile_service: ProfileService = Depends(get_profile_service),
):
    """
    Save a new connection profile.

    - **name**: Display name
    - **host** / **port**: Seed node
    - **username** / **password**: Optional credentials
    """
    return await profile_service.create_profile(body)


@router.get(
    "/profiles/active",
    response_model=ActiveProfile,
    summary="Get the active profile",
)
async def get_active_profile(
    profile_service: ProfileService = Depends(get_profile_service),
):
    """Id of the active profile, null when none is selected."""
    profile_id = await profile_service.get_active_profile_id()
    return ActiveProfile(profile_id=profile_id)


@router.put(
    "/profiles/active",
    response_model=ActiveProfile,
    summary="Set the active profile",
)
async def set_active_profile(
    body: ActiveProfile,
    profile_service: ProfileService = Depends(get_profile_service),
):
    """Select a saved profile as active, or clear the selection with null."""
    if not await profile_service.set_active_profile_id(body.profile_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )
    return body


@router.get(
    "/profiles/{profile_id}",
    response_model=ConnectionProfile,
    summary="Get a profile",
)
async def get_profile(
    profile_id: str,
    profile_service: ProfileService = Depends(get_profile_service),
):
    """Get a saved profile by id."""
    profile = await profile_service.get_profile(profile_id)
    if not profile:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )
    return profile


@router.patch(
    "/profiles/{profile_id}",
    response_model=ConnectionProfile,
    summary="Update a profile",
)
async def update_profile(
    profile_id: str,
    body: ProfileUpdate,
    profile_service: ProfileService = Depends(get_profile_service),
):
    """Update fields of a saved profile. Only the given fields change."""
    profile = await profile_service.update_profile(profile_id, body)
    if not profile:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )
    return profile


@router.delete(
    "/profiles/{profile_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a profile",
)
async def delete_profile(
    profile_id: str,
    profile_service: ProfileService = Depends(get_profile_service),
):
    """Delete a saved profile. Clears the active selection if it pointed here."""
    if not await profile_service.delete_profile(profile_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )


# ==================== Preferences ====================

@router.get(
    "/preferences",
    response_model=dict[str, str],
    summary="Get all preferences",
)
async def get_preferences(
    profile_service: ProfileService = Depends(get_profile_service),
):
    """All stored UI preferences."""
    return await profile_service.get_preferences()


@router.get(
    "/preferences/{name}",
    response_model=PreferenceValue,
    summary="Get a preference",
)
async def get_preference(
    name: str,
    profile_service: ProfileService = Depends(get_profile_service),
):
    """One preference (`theme` or `editor_width`). Null when unset."""
    _check_preference_name(name)
    value = await profile_service.get_preference(name)
    return PreferenceValue(name=name, value=value)


@router.put(
    "/preferences/{name}",
    response_model=PreferenceValue,
    summary="Set a preference",
)
async def set_preference(
    name: str,
    body: PreferenceUpdate,
    profile_service: ProfileService = Depends(get_profile_service),
):
    """Store a preference. A null value removes it."""
    _check_preference_name(name)
    await profile_service.set_preference(name, body.value)
    return PreferenceValue(name=name, value=body.value)
