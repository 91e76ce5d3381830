"""
ResumeFile - metadata for an uploaded resume. The bytes live in local/S3 storage under `filename`.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ResumeFile(BaseModel):
    id: int
    profileId: int
    filename: str  # generated storage name, e.g. "3f2a...c1.pdf"
    originalName: str
    fileSize: int
    mimeType: str
    uploadedAt: datetime
    parsedData: Optional[str] = None  # JSON string of parsed resume data
    parsingAccuracy: Optional[int] = None  # percentage

    model_config = ConfigDict(frozen=True)
