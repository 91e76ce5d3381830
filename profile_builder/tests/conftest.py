"""
Pytest fixtures for Profile Builder API tests.
Fresh in-memory storage per test, local resume storage in a temp dir, S3 disabled.
"""
import os
import tempfile

import pytest
from fastapi.testclient import TestClient

# Set before config loads: keep uploads out of the working tree and never touch S3
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="profile-builder-uploads-")
os.environ["AWS_ACCESS_KEY_ID"] = ""
os.environ["AWS_SECRET_ACCESS_KEY"] = ""

from profile_builder.main import app
from profile_builder.app.core.dependencies import get_file_storage, get_storage
from profile_builder.app.db.storage import ProfileStorage
from profile_builder.app.services.file_storage import ResumeFileStorage


@pytest.fixture
def storage():
    """Store object with the default empty profile (id 1), as at process start."""
    return ProfileStorage(seed_default_profile=True)


@pytest.fixture
def resume_dir(tmp_path):
    return tmp_path / "resumes"


@pytest.fixture
def file_storage(resume_dir):
    return ResumeFileStorage(upload_dir=resume_dir, use_s3=False)


@pytest.fixture
def client(storage, file_storage):
    """TestClient wired to this test's storage."""
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_file_storage] = lambda: file_storage
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def profile_id():
    """Id of the seeded default profile."""
    return 1
