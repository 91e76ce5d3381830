"""
Skill record - grouped by free-text category for display
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Skill(BaseModel):
    id: int
    profileId: int
    name: str
    category: str  # Technical, Soft Skills, etc.
    level: Optional[str] = None  # Beginner, Intermediate, Advanced, Expert

    model_config = ConfigDict(frozen=True)
