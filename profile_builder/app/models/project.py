"""
Project record
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class Project(BaseModel):
    id: int
    profileId: int
    title: str
    description: Optional[str] = None
    technologies: Optional[List[str]] = None
    projectUrl: Optional[str] = None
    repositoryUrl: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None

    model_config = ConfigDict(frozen=True)
