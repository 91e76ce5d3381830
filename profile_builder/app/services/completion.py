"""
Profile completion - how many of the eight tracked sections have content.
"""
from profile_builder.app.core.config import PROFILE_SECTIONS
from profile_builder.app.schemas.profile import CompleteProfile, ProfileCompletion, SectionStatus


def percentage(completed: int, total: int) -> int:
    """Integer percentage, rounding halves up (1/8 -> 13, 3/8 -> 38)."""
    if total <= 0:
        return 0
    return (completed * 100 * 2 + total) // (total * 2)


def section_flags(complete_profile: CompleteProfile | None) -> list[bool]:
    """Completion flag per section, in PROFILE_SECTIONS order."""
    if complete_profile is None:
        return [False] * len(PROFILE_SECTIONS)
    p = complete_profile
    return [
        bool(p.profile.fullName) and bool(p.profile.email),
        len(p.education) > 0,
        len(p.skills) > 0,
        len(p.experience) > 0,
        len(p.projects) > 0,
        len(p.certifications) > 0,
        len(p.externalLinks) > 0,
        len(p.resumeFiles) > 0,
    ]


def calculate_completion(complete_profile: CompleteProfile | None) -> ProfileCompletion:
    """Pure function of the aggregate. A missing profile scores 0/8, 0%."""
    flags = section_flags(complete_profile)
    completed = sum(flags)
    total = len(PROFILE_SECTIONS)
    return ProfileCompletion(
        completedSections=completed,
        totalSections=total,
        completionPercentage=percentage(completed, total),
        sections=[SectionStatus(name=name, completed=done) for name, done in zip(PROFILE_SECTIONS, flags)],
    )
