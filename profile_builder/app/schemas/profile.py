"""
Profile Pydantic schemas - request payloads and composite read models
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

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
from profile_builder.app.schemas.validators import not_null, optional_http_url


class ProfileCreate(BaseModel):
    """Only fullName and email are required; empty strings are accepted."""
    fullName: str
    email: str
    phone: Optional[str] = None
    location: Optional[str] = None
    title: Optional[str] = None
    summary: Optional[str] = None
    profilePhoto: Optional[str] = None
    publicUrl: Optional[str] = None

    model_config = {"extra": "ignore"}

    check_public_url = field_validator("publicUrl")(optional_http_url)


class ProfileUpdate(BaseModel):
    fullName: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    title: Optional[str] = None
    summary: Optional[str] = None
    profilePhoto: Optional[str] = None
    publicUrl: Optional[str] = None

    model_config = {"extra": "ignore"}

    check_required = field_validator("fullName", "email")(not_null)
    check_public_url = field_validator("publicUrl")(optional_http_url)


class CompleteProfile(BaseModel):
    """Profile plus every child collection. Assembled on read, never stored."""
    profile: Profile
    education: List[Education] = Field(default_factory=list)
    skills: List[Skill] = Field(default_factory=list)
    experience: List[Experience] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    certifications: List[Certification] = Field(default_factory=list)
    externalLinks: List[ExternalLink] = Field(default_factory=list)
    resumeFiles: List[ResumeFile] = Field(default_factory=list)


class SectionStatus(BaseModel):
    name: str
    completed: bool


class ProfileCompletion(BaseModel):
    completedSections: int
    totalSections: int
    completionPercentage: int
    sections: List[SectionStatus] = Field(default_factory=list)


class ProfilePreview(BaseModel):
    """Everything the preview/share page renders."""
    profile: CompleteProfile
    completion: ProfileCompletion
    skillsByCategory: Dict[str, List[Skill]] = Field(default_factory=dict)
    publicUrl: str
