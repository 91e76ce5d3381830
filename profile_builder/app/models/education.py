"""
Education record - one degree/programme owned by a profile
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Education(BaseModel):
    id: int
    profileId: int
    institution: str
    degree: str
    fieldOfStudy: Optional[str] = None
    startDate: Optional[str] = None  # free text, e.g. "Sep 2019"
    endDate: Optional[str] = None
    isCurrentlyStudying: bool = False
    description: Optional[str] = None

    model_config = ConfigDict(frozen=True)
