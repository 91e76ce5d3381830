"""
ProfileStorage - the process-lifetime store object holding every entity kind.
Built once by create_app() and handed to handlers through the get_storage dependency.
"""
from profile_builder.app.core.logging_config import get_logger
from profile_builder.app.db.store import EntityStore
from profile_builder.app.models import (
    Certification,
    Education,
    Experience,
    ExternalLink,
    Profile,
    Project,
    ResumeFile,
    Skill,
)

logger = get_logger("db.storage")

DEFAULT_PROFILE = {
    "fullName": "",
    "email": "",
    "phone": "",
    "location": "",
    "title": "",
    "summary": "",
    "profilePhoto": "",
    "publicUrl": "",
}


class ProfileStorage:
    """In-memory storage. Nothing survives a restart."""

    def __init__(self, seed_default_profile: bool = False) -> None:
        self.profiles: EntityStore[Profile] = EntityStore(
            Profile,
            stamp_on_create=("createdAt", "updatedAt"),
            stamp_on_update=("updatedAt",),
        )
        self.education: EntityStore[Education] = EntityStore(Education)
        self.skills: EntityStore[Skill] = EntityStore(Skill)
        self.experience: EntityStore[Experience] = EntityStore(Experience)
        self.projects: EntityStore[Project] = EntityStore(Project)
        self.certifications: EntityStore[Certification] = EntityStore(Certification)
        self.external_links: EntityStore[ExternalLink] = EntityStore(ExternalLink)
        self.resume_files: EntityStore[ResumeFile] = EntityStore(ResumeFile, stamp_on_create=("uploadedAt",))

        if seed_default_profile:
            profile = self.profiles.create(DEFAULT_PROFILE)
            logger.info("Seeded default profile id=%s", profile.id)

    def child_stores(self) -> dict[str, EntityStore]:
        """Child stores keyed by their CompleteProfile attribute name."""
        return {
            "education": self.education,
            "skills": self.skills,
            "experience": self.experience,
            "projects": self.projects,
            "certifications": self.certifications,
            "externalLinks": self.external_links,
            "resumeFiles": self.resume_files,
        }
