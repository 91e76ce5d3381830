"""
Profile record - the root identity a user builds (name, contact, summary)
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Profile(BaseModel):
    id: int
    fullName: str
    email: str
    phone: Optional[str] = None
    location: Optional[str] = None
    title: Optional[str] = None
    summary: Optional[str] = None
    profilePhoto: Optional[str] = None
    publicUrl: Optional[str] = None
    createdAt: datetime
    updatedAt: datetime

    model_config = ConfigDict(frozen=True)
