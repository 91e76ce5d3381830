"""
Dependency injection utilities
"""
from fastapi import Request

from profile_builder.app.db.storage import ProfileStorage
from profile_builder.app.services.file_storage import ResumeFileStorage


def get_storage(request: Request) -> ProfileStorage:
    """The ProfileStorage built at app creation."""
    return request.app.state.storage


def get_file_storage() -> ResumeFileStorage:
    """Resume byte storage per current settings (S3 or local upload_dir)."""
    return ResumeFileStorage()
