"""
Profile service - composite profile assembly and preview data
"""
from profile_builder.app.core.config import settings
from profile_builder.app.db.storage import ProfileStorage
from profile_builder.app.models import Skill
from profile_builder.app.schemas.profile import CompleteProfile, ProfilePreview
from profile_builder.app.services.completion import calculate_completion


def group_skills_by_category(skills: list[Skill]) -> dict[str, list[Skill]]:
    """Group skills under their category, keeping first-seen category order."""
    grouped: dict[str, list[Skill]] = {}
    for skill in skills:
        grouped.setdefault(skill.category, []).append(skill)
    return grouped


def build_public_url(profile_id: int) -> str:
    return f"{settings.public_base_url.rstrip('/')}/public/profile/{profile_id}"


class ProfileService:
    @staticmethod
    def get_complete_profile(storage: ProfileStorage, profile_id: int) -> CompleteProfile | None:
        """
        Profile plus all child collections, or None when the profile does not exist.

        The seven child reads are independent; a write landing between two of them
        shows up in some collections and not others. Acceptable for preview reads.
        """
        profile = storage.profiles.get(profile_id)
        if profile is None:
            return None
        children = {
            key: store.list_by_profile(profile_id)
            for key, store in storage.child_stores().items()
        }
        return CompleteProfile(profile=profile, **children)

    @staticmethod
    def get_preview(storage: ProfileStorage, profile_id: int) -> ProfilePreview | None:
        complete = ProfileService.get_complete_profile(storage, profile_id)
        if complete is None:
            return None
        return ProfilePreview(
            profile=complete,
            completion=calculate_completion(complete),
            skillsByCategory=group_skills_by_category(complete.skills),
            publicUrl=build_public_url(profile_id),
        )
