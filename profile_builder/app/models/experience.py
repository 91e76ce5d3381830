"""
Experience record - one job held by the profile owner
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Experience(BaseModel):
    id: int
    profileId: int
    jobTitle: str
    company: str
    location: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    isCurrentJob: bool = False
    description: Optional[str] = None

    model_config = ConfigDict(frozen=True)
