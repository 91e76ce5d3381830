"""
Child resource endpoints - one CRUD contract shared by education, skills, experience,
projects, certifications and external links.

    GET    /profile/{profile_id}/{path}  -> 200 list
    POST   /{path}                       -> 201 / 400
    PUT    /{path}/{id}                  -> 200 / 404 / 400
    DELETE /{path}/{id}                  -> 204 / 404
"""
from dataclasses import dataclass, field
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel

from profile_builder.app.core.config import LINK_PLATFORMS, SKILL_CATEGORIES, SKILL_LEVELS, settings
from profile_builder.app.core.dependencies import get_storage
from profile_builder.app.core.logging_config import get_logger
from profile_builder.app.db.storage import ProfileStorage
from profile_builder.app.db.store import EntityStore
from profile_builder.app.models import Certification, Education, Experience, ExternalLink, Project, Skill
from profile_builder.app.schemas.resources import (
    CertificationCreate,
    CertificationUpdate,
    EducationCreate,
    EducationUpdate,
    ExperienceCreate,
    ExperienceUpdate,
    ExternalLinkCreate,
    ExternalLinkUpdate,
    ProjectCreate,
    ProjectUpdate,
    SkillCreate,
    SkillUpdate,
)

logger = get_logger("api.resources")


@dataclass(frozen=True)
class ResourceKind:
    label: str  # used in messages: "Education not found"
    path: str  # URL segment
    store_attr: str  # ProfileStorage attribute
    record_model: type[BaseModel]
    create_model: type[BaseModel]
    update_model: type[BaseModel]
    # Open string fields checked against known values when settings.strict_choices is on
    choices: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def store(self, storage: ProfileStorage) -> EntityStore:
        return getattr(storage, self.store_attr)


RESOURCE_KINDS: tuple[ResourceKind, ...] = (
    ResourceKind("Education", "education", "education", Education, EducationCreate, EducationUpdate),
    ResourceKind(
        "Skill", "skills", "skills", Skill, SkillCreate, SkillUpdate,
        choices={"level": SKILL_LEVELS, "category": SKILL_CATEGORIES},
    ),
    ResourceKind("Experience", "experience", "experience", Experience, ExperienceCreate, ExperienceUpdate),
    ResourceKind("Project", "projects", "projects", Project, ProjectCreate, ProjectUpdate),
    ResourceKind(
        "Certification", "certifications", "certifications", Certification, CertificationCreate, CertificationUpdate,
    ),
    ResourceKind(
        "External link", "external-links", "external_links", ExternalLink, ExternalLinkCreate, ExternalLinkUpdate,
        choices={"platform": LINK_PLATFORMS},
    ),
)


def check_choices(kind: ResourceKind, data: dict[str, Any]) -> None:
    """Reject values outside the known option sets. No-op unless strict_choices is enabled."""
    if not settings.strict_choices:
        return
    errors = [
        {
            "loc": ("body", name),
            "msg": f"Value must be one of: {', '.join(allowed)}",
            "type": "choice",
        }
        for name, allowed in kind.choices.items()
        if data.get(name) is not None and data[name] not in allowed
    ]
    if errors:
        raise RequestValidationError(errors)


def build_resource_router(kind: ResourceKind) -> APIRouter:
    """Routes for one child kind. Validation happens here, before any store call."""
    router = APIRouter(tags=[kind.path])
    record_model = kind.record_model
    create_model = kind.create_model
    update_model = kind.update_model
    slug = kind.store_attr
    not_found = f"{kind.label} not found"

    @router.get(
        f"/profile/{{profile_id}}/{kind.path}",
        response_model=List[record_model],
        name=f"list_{slug}",
    )
    def list_resources(profile_id: int, storage: ProfileStorage = Depends(get_storage)):
        return kind.store(storage).list_by_profile(profile_id)

    @router.post(
        f"/{kind.path}",
        response_model=record_model,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{slug}",
    )
    def create_resource(payload: create_model, storage: ProfileStorage = Depends(get_storage)):
        data = payload.model_dump()
        check_choices(kind, data)
        record = kind.store(storage).create(data)
        logger.info("%s created id=%s profile_id=%s", kind.label, record.id, record.profileId)
        return record

    @router.put(
        f"/{kind.path}/{{item_id}}",
        response_model=record_model,
        name=f"update_{slug}",
    )
    def update_resource(item_id: int, payload: update_model, storage: ProfileStorage = Depends(get_storage)):
        changes = payload.model_dump(exclude_unset=True)
        check_choices(kind, changes)
        record = kind.store(storage).update(item_id, changes)
        if record is None:
            logger.info("%s update - not found id=%s", kind.label, item_id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        logger.info("%s updated id=%s fields=%s", kind.label, item_id, sorted(changes))
        return record

    @router.delete(
        f"/{kind.path}/{{item_id}}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        name=f"delete_{slug}",
    )
    def delete_resource(item_id: int, storage: ProfileStorage = Depends(get_storage)):
        if not kind.store(storage).delete(item_id):
            logger.info("%s delete - not found id=%s", kind.label, item_id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        logger.info("%s deleted id=%s", kind.label, item_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


router = APIRouter()
for _kind in RESOURCE_KINDS:
    router.include_router(build_resource_router(_kind))
