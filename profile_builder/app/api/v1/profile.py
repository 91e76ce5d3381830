"""
Profile endpoints - the root record, its composite view, completion and preview
"""
from fastapi import APIRouter, Depends, HTTPException, status

from profile_builder.app.core.dependencies import get_storage
from profile_builder.app.core.logging_config import get_logger
from profile_builder.app.db.storage import ProfileStorage
from profile_builder.app.models import Profile
from profile_builder.app.schemas.profile import (
    CompleteProfile,
    ProfileCompletion,
    ProfileCreate,
    ProfilePreview,
    ProfileUpdate,
)
from profile_builder.app.services.completion import calculate_completion
from profile_builder.app.services.profile_service import ProfileService

logger = get_logger("api.profile")
router = APIRouter(prefix="/profile", tags=["profile"])


def _not_found(profile_id: int) -> HTTPException:
    logger.info("Profile not found id=%s", profile_id)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")


@router.get("/{profile_id}", response_model=Profile)
def get_profile(profile_id: int, storage: ProfileStorage = Depends(get_storage)):
    profile = storage.profiles.get(profile_id)
    if profile is None:
        raise _not_found(profile_id)
    return profile


@router.post("", response_model=Profile, status_code=status.HTTP_201_CREATED)
def create_profile(payload: ProfileCreate, storage: ProfileStorage = Depends(get_storage)):
    profile = storage.profiles.create(payload.model_dump())
    logger.info("Profile created id=%s", profile.id)
    return profile


@router.put("/{profile_id}", response_model=Profile)
def update_profile(
    profile_id: int,
    payload: ProfileUpdate,
    storage: ProfileStorage = Depends(get_storage),
):
    """Partial update: only fields present in the body are changed. updatedAt is always refreshed."""
    profile = storage.profiles.update(profile_id, payload.model_dump(exclude_unset=True))
    if profile is None:
        raise _not_found(profile_id)
    logger.info("Profile updated id=%s fields=%s", profile_id, sorted(payload.model_fields_set))
    return profile


@router.get("/{profile_id}/complete", response_model=CompleteProfile)
def get_complete_profile(profile_id: int, storage: ProfileStorage = Depends(get_storage)):
    """Profile with all child collections. No partial aggregate when the profile is missing."""
    complete = ProfileService.get_complete_profile(storage, profile_id)
    if complete is None:
        raise _not_found(profile_id)
    return complete


@router.get("/{profile_id}/completion", response_model=ProfileCompletion)
def get_profile_completion(profile_id: int, storage: ProfileStorage = Depends(get_storage)):
    complete = ProfileService.get_complete_profile(storage, profile_id)
    if complete is None:
        raise _not_found(profile_id)
    return calculate_completion(complete)


@router.get("/{profile_id}/preview", response_model=ProfilePreview)
def get_profile_preview(profile_id: int, storage: ProfileStorage = Depends(get_storage)):
    """Composite profile, completion, skills grouped by category and the shareable URL."""
    preview = ProfileService.get_preview(storage, profile_id)
    if preview is None:
        raise _not_found(profile_id)
    return preview
