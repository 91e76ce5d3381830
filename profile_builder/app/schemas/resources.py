"""
Create/update payloads for the profile's child resources.

Create payloads carry profileId plus the kind's required fields. Update payloads are
partial: every field is optional, and required fields may be omitted but not nulled.
"""
from typing import List, Optional

from pydantic import BaseModel, field_validator

from profile_builder.app.schemas.validators import http_url, not_null, null_as_false, optional_http_url


# --- Education ---
class EducationCreate(BaseModel):
    profileId: int
    institution: str
    degree: str
    fieldOfStudy: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    isCurrentlyStudying: bool = False
    description: Optional[str] = None

    model_config = {"extra": "ignore"}

    default_flag = field_validator("isCurrentlyStudying", mode="before")(null_as_false)


class EducationUpdate(BaseModel):
    profileId: Optional[int] = None
    institution: Optional[str] = None
    degree: Optional[str] = None
    fieldOfStudy: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    isCurrentlyStudying: Optional[bool] = None
    description: Optional[str] = None

    model_config = {"extra": "ignore"}

    check_required = field_validator("profileId", "institution", "degree", "isCurrentlyStudying")(not_null)


# --- Skills ---
class SkillCreate(BaseModel):
    profileId: int
    name: str
    category: str
    level: Optional[str] = None

    model_config = {"extra": "ignore"}


class SkillUpdate(BaseModel):
    profileId: Optional[int] = None
    name: Optional[str] = None
    category: Optional[str] = None
    level: Optional[str] = None

    model_config = {"extra": "ignore"}

    check_required = field_validator("profileId", "name", "category")(not_null)


# --- Experience ---
class ExperienceCreate(BaseModel):
    profileId: int
    jobTitle: str
    company: str
    location: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    isCurrentJob: bool = False
    description: Optional[str] = None

    model_config = {"extra": "ignore"}

    default_flag = field_validator("isCurrentJob", mode="before")(null_as_false)


class ExperienceUpdate(BaseModel):
    profileId: Optional[int] = None
    jobTitle: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    isCurrentJob: Optional[bool] = None
    description: Optional[str] = None

    model_config = {"extra": "ignore"}

    check_required = field_validator("profileId", "jobTitle", "company", "isCurrentJob")(not_null)


# --- Projects ---
class ProjectCreate(BaseModel):
    profileId: int
    title: str
    description: Optional[str] = None
    technologies: Optional[List[str]] = None
    projectUrl: Optional[str] = None
    repositoryUrl: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None

    model_config = {"extra": "ignore"}

    check_urls = field_validator("projectUrl", "repositoryUrl")(optional_http_url)


class ProjectUpdate(BaseModel):
    profileId: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    technologies: Optional[List[str]] = None
    projectUrl: Optional[str] = None
    repositoryUrl: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None

    model_config = {"extra": "ignore"}

    check_required = field_validator("profileId", "title")(not_null)
    check_urls = field_validator("projectUrl", "repositoryUrl")(optional_http_url)


# --- Certifications ---
class CertificationCreate(BaseModel):
    profileId: int
    name: str
    issuer: str
    issueDate: Optional[str] = None
    expiryDate: Optional[str] = None
    credentialId: Optional[str] = None
    credentialUrl: Optional[str] = None
    isBlockchainVerified: bool = False

    model_config = {"extra": "ignore"}

    default_flag = field_validator("isBlockchainVerified", mode="before")(null_as_false)
    check_credential_url = field_validator("credentialUrl")(optional_http_url)


class CertificationUpdate(BaseModel):
    profileId: Optional[int] = None
    name: Optional[str] = None
    issuer: Optional[str] = None
    issueDate: Optional[str] = None
    expiryDate: Optional[str] = None
    credentialId: Optional[str] = None
    credentialUrl: Optional[str] = None
    isBlockchainVerified: Optional[bool] = None

    model_config = {"extra": "ignore"}

    check_required = field_validator("profileId", "name", "issuer", "isBlockchainVerified")(not_null)
    check_credential_url = field_validator("credentialUrl")(optional_http_url)


# --- External links ---
class ExternalLinkCreate(BaseModel):
    profileId: int
    platform: str
    url: str
    displayText: Optional[str] = None

    model_config = {"extra": "ignore"}

    check_url = field_validator("url")(http_url)


class ExternalLinkUpdate(BaseModel):
    profileId: Optional[int] = None
    platform: Optional[str] = None
    url: Optional[str] = None
    displayText: Optional[str] = None

    model_config = {"extra": "ignore"}

    check_required = field_validator("profileId", "platform", "url")(not_null)
    check_url = field_validator("url")(http_url)
