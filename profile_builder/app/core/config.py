"""
Application configuration settings.
Loads from .env file first (overrides shell env for local dev), then pydantic reads from environment.
Production: set env vars in the platform (Docker, K8s, etc.); .env is optional.

All service configs and business constants are centralized here.
"""
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env path: profile_builder/.env (absolute path, works regardless of cwd)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = (_BASE_DIR / ".env").resolve()

if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=True)


class Settings(BaseSettings):
    """Application settings. Source: env vars (after dotenv load)."""

    # App
    app_name: str = "ProfileBuilder"
    app_version: str = "1.0.0"
    port: int = 5000

    # Storage
    seed_default_profile: bool = True

    # Upload & storage
    upload_dir: str = "uploads/resumes"
    max_resume_bytes: int = 5 * 1024 * 1024

    # Boundary validation of open string sets (skill level/category, link platform)
    strict_choices: bool = False

    # Sharing
    public_base_url: str = "http://localhost:5000"

    # AWS S3
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    aws_region: str = "us-east-1"
    aws_bucket_name: str = "profile-builder-resumes"
    s3_key_prefix: str = "resumes"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


# --- Constants (non-env, business config) ---

# Resume upload
ALLOWED_RESUME_EXTENSIONS: tuple[str, ...] = (".pdf", ".doc", ".docx")
RESUME_MIME_TYPES: dict[str, str] = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

# Form options
SKILL_LEVELS: tuple[str, ...] = ("Beginner", "Intermediate", "Advanced", "Expert")
SKILL_CATEGORIES: tuple[str, ...] = (
    "Technical",
    "Programming Languages",
    "Frameworks",
    "Tools",
    "Soft Skills",
    "Languages",
    "Other",
)
LINK_PLATFORMS: tuple[str, ...] = (
    "LinkedIn",
    "GitHub",
    "Portfolio Website",
    "Personal Website",
    "Twitter",
    "Instagram",
    "Facebook",
    "YouTube",
    "Behance",
    "Dribbble",
    "Stack Overflow",
    "Medium",
    "Dev.to",
    "Other",
)

# Completion sections, in display order
PROFILE_SECTIONS: tuple[str, ...] = (
    "Personal Information",
    "Education",
    "Skills",
    "Experience",
    "Projects",
    "Certifications",
    "External Links",
    "Resume",
)
