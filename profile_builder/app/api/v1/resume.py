"""
Resume file endpoints - upload (PDF, DOC, DOCX), list and delete.
Bytes go to S3 or the local upload dir; the ResumeFile record holds the metadata.
"""
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from profile_builder.app.core.config import ALLOWED_RESUME_EXTENSIONS, RESUME_MIME_TYPES, settings
from profile_builder.app.core.dependencies import get_file_storage, get_storage
from profile_builder.app.core.logging_config import get_logger
from profile_builder.app.db.storage import ProfileStorage
from profile_builder.app.models import ResumeFile
from profile_builder.app.services.file_storage import ResumeFileStorage, generate_filename

logger = get_logger("api.resume")
router = APIRouter(tags=["resume"])


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


@router.get("/profile/{profile_id}/resume", response_model=List[ResumeFile])
def list_resume_files(profile_id: int, storage: ProfileStorage = Depends(get_storage)):
    return storage.resume_files.list_by_profile(profile_id)


@router.post("/profile/{profile_id}/resume", response_model=ResumeFile, status_code=status.HTTP_201_CREATED)
async def upload_resume(
    profile_id: int,
    resume: Optional[List[UploadFile]] = File(None),
    storage: ProfileStorage = Depends(get_storage),
    file_storage: ResumeFileStorage = Depends(get_file_storage),
):
    """
    Upload a single resume file in multipart field `resume`.

    Rejected with 400 before anything is written when no file or more than one file is
    sent, the extension is not PDF/DOC/DOCX, or the file exceeds max_resume_bytes.
    """
    files = resume or []
    if not files:
        raise _bad_request("No file uploaded")
    if len(files) > 1:
        logger.warning("Resume upload rejected - %d files profile_id=%s", len(files), profile_id)
        raise _bad_request("Only one file may be uploaded per request")
    upload = files[0]

    suffix = Path(upload.filename or "").suffix.lower()
    if suffix not in ALLOWED_RESUME_EXTENSIONS:
        logger.warning(
            "Resume upload rejected - invalid file type profile_id=%s filename=%s",
            profile_id,
            upload.filename,
        )
        raise _bad_request(
            f"Invalid file type. Allowed: {', '.join(ALLOWED_RESUME_EXTENSIONS)}"
        )

    # One byte past the ceiling is enough to detect oversize.
    contents = await upload.read(settings.max_resume_bytes + 1)
    if len(contents) > settings.max_resume_bytes:
        logger.warning(
            "Resume upload rejected - too large profile_id=%s filename=%s limit_bytes=%d",
            profile_id,
            upload.filename,
            settings.max_resume_bytes,
        )
        raise _bad_request(f"File too large. Maximum size is {settings.max_resume_bytes} bytes")

    filename = generate_filename(suffix)
    mime_type = upload.content_type or RESUME_MIME_TYPES.get(suffix, "application/octet-stream")

    try:
        await run_in_threadpool(file_storage.save, contents, filename, profile_id, mime_type)
    except Exception:
        logger.exception("Resume upload failed - storage error profile_id=%s filename=%s", profile_id, filename)
        raise HTTPException(status_code=500, detail="Failed to upload resume")

    # Bytes written above stay behind if this fails.
    record = storage.resume_files.create(
        {
            "profileId": profile_id,
            "filename": filename,
            "originalName": upload.filename,
            "fileSize": len(contents),
            "mimeType": mime_type,
            "parsedData": None,
            "parsingAccuracy": None,
        }
    )
    logger.info(
        "Resume uploaded id=%s profile_id=%s filename=%s size_bytes=%d",
        record.id,
        profile_id,
        filename,
        record.fileSize,
    )
    return record


@router.delete("/resume/{resume_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_resume(
    resume_id: int,
    storage: ProfileStorage = Depends(get_storage),
    file_storage: ResumeFileStorage = Depends(get_file_storage),
):
    """Delete the ResumeFile record, then its stored bytes (best effort)."""
    record = storage.resume_files.get(resume_id)
    if record is None or not storage.resume_files.delete(resume_id):
        logger.info("Resume delete - not found id=%s", resume_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resume file not found")
    try:
        file_storage.delete(record.filename, record.profileId)
    except Exception as e:
        logger.warning("Resume file removal failed id=%s filename=%s error=%s", resume_id, record.filename, e)
    logger.info("Resume deleted id=%s profile_id=%s", resume_id, record.profileId)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
