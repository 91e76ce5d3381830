"""
Certification record
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Certification(BaseModel):
    id: int
    profileId: int
    name: str
    issuer: str
    issueDate: Optional[str] = None
    expiryDate: Optional[str] = None
    credentialId: Optional[str] = None
    credentialUrl: Optional[str] = None
    isBlockchainVerified: bool = False

    model_config = ConfigDict(frozen=True)
