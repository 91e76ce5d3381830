"""
Form options - known values for the profile editor's select inputs
"""
from fastapi import APIRouter

from profile_builder.app.core.config import (
    ALLOWED_RESUME_EXTENSIONS,
    LINK_PLATFORMS,
    SKILL_CATEGORIES,
    SKILL_LEVELS,
    settings,
)

router = APIRouter(tags=["options"])


@router.get("/options")
def get_options() -> dict:
    return {
        "skillLevels": list(SKILL_LEVELS),
        "skillCategories": list(SKILL_CATEGORIES),
        "linkPlatforms": list(LINK_PLATFORMS),
        "resumeExtensions": list(ALLOWED_RESUME_EXTENSIONS),
        "maxResumeBytes": settings.max_resume_bytes,
        "strictChoices": settings.strict_choices,
    }
