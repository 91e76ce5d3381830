"""
Resume file storage - S3 when AWS credentials are configured, local upload_dir otherwise.
Only bytes live here; metadata is a ResumeFile record in ProfileStorage.
"""
import uuid
from pathlib import Path

from profile_builder.app.core.config import settings
from profile_builder.app.core.logging_config import get_logger
from profile_builder.app.services.s3_service import (
    build_key,
    delete_file_from_s3,
    s3_configured,
    upload_file_to_s3,
)

logger = get_logger("services.file_storage")


def generate_filename(suffix: str) -> str:
    return f"{uuid.uuid4().hex}{suffix}"


class ResumeFileStorage:
    """Writes and removes uploaded resume bytes."""

    def __init__(self, upload_dir: str | Path | None = None, use_s3: bool | None = None) -> None:
        self.upload_dir = Path(upload_dir or settings.upload_dir)
        self.use_s3 = s3_configured() if use_s3 is None else use_s3

    def save(self, contents: bytes, filename: str, profile_id: int, mime_type: str) -> None:
        """Store bytes under filename. delete() finds them again from (filename, profile_id)."""
        if self.use_s3:
            upload_file_to_s3(contents, filename, profile_id, mime_type)
            return
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        file_path = self.upload_dir / filename
        file_path.write_bytes(contents)
        logger.info("Stored resume locally profile_id=%s path=%s", profile_id, file_path)

    def delete(self, filename: str, profile_id: int) -> bool:
        """Remove stored bytes. True if deleted or already gone."""
        if self.use_s3:
            return delete_file_from_s3(build_key(profile_id, filename))
        # Only the final path component is honoured.
        file_path = self.upload_dir / Path(filename).name
        if not file_path.exists():
            return True
        try:
            file_path.unlink()
            logger.info("Deleted local resume file profile_id=%s path=%s", profile_id, file_path)
            return True
        except OSError as e:
            logger.warning("Failed to delete local resume file path=%s error=%s", file_path, e)
            return False
