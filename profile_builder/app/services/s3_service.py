"""
S3 service for resume file storage.
Stores files under {s3_key_prefix}/{profile_id}/{filename}.
"""
import boto3
from botocore.exceptions import ClientError

from profile_builder.app.core.config import settings
from profile_builder.app.core.logging_config import get_logger

logger = get_logger("services.s3")


def s3_configured() -> bool:
    return bool(settings.aws_access_key_id and settings.aws_secret_access_key)


def _get_s3_client():
    """Get configured S3 client."""
    if not s3_configured():
        raise ValueError("AWS credentials not configured (AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY)")
    return boto3.client(
        "s3",
        aws_access_key_id=settings.aws_access_key_id,
        aws_secret_access_key=settings.aws_secret_access_key,
        region_name=settings.aws_region,
    )


def build_key(profile_id: int, file_name: str) -> str:
    return f"{settings.s3_key_prefix}/{profile_id}/{file_name}"


def upload_file_to_s3(
    file_buffer: bytes,
    file_name: str,
    profile_id: int,
    mime_type: str = "application/octet-stream",
) -> dict:
    """
    Upload file to S3 under {s3_key_prefix}/{profile_id}/{file_name}.

    Args:
        file_buffer: File content as bytes
        file_name: Generated storage name (e.g. uuid.pdf)
        profile_id: Owning profile, used for folder organization
        mime_type: Content type

    Returns:
        dict with key, url
    """
    key = build_key(profile_id, file_name)
    logger.info(
        "S3 upload started bucket=%s key=%s profile_id=%s size_bytes=%d",
        settings.aws_bucket_name,
        key,
        profile_id,
        len(file_buffer),
    )
    try:
        s3 = _get_s3_client()
        s3.put_object(
            Bucket=settings.aws_bucket_name,
            Key=key,
            Body=file_buffer,
            ContentType=mime_type,
        )
    except ClientError as e:
        code = e.response.get("Error", {}).get("Code", "")
        msg = e.response.get("Error", {}).get("Message", str(e))
        logger.error(
            "S3 upload failed bucket=%s key=%s profile_id=%s error_code=%s error_message=%s",
            settings.aws_bucket_name,
            key,
            profile_id,
            code,
            msg,
        )
        raise RuntimeError(f"S3 upload failed - {code}: {msg}") from e
    url = f"https://{settings.aws_bucket_name}.s3.{settings.aws_region}.amazonaws.com/{key}"
    logger.info("S3 upload success bucket=%s key=%s", settings.aws_bucket_name, key)
    return {"key": key, "url": url}


def delete_file_from_s3(key: str) -> bool:
    """Delete object from S3 by key. Returns True on success, False on missing/error."""
    if not s3_configured():
        return False
    try:
        s3 = _get_s3_client()
        s3.delete_object(Bucket=settings.aws_bucket_name, Key=key)
        logger.info("S3 delete success bucket=%s key=%s", settings.aws_bucket_name, key)
        return True
    except ClientError as e:
        logger.warning("S3 delete failed key=%s error=%s", key, e)
        return False
