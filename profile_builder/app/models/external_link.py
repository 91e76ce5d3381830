"""
ExternalLink record - LinkedIn, GitHub, portfolio, etc.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ExternalLink(BaseModel):
    id: int
    profileId: int
    platform: str
    url: str
    displayText: Optional[str] = None

    model_config = ConfigDict(frozen=True)
