from profile_builder.app.models.profile import Profile
from profile_builder.app.models.education import Education
from profile_builder.app.models.skill import Skill
from profile_builder.app.models.experience import Experience
from profile_builder.app.models.project import Project
from profile_builder.app.models.certification import Certification
from profile_builder.app.models.external_link import ExternalLink
from profile_builder.app.models.resume_file import ResumeFile
