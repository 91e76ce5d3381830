"""
FastAPI application entry point
"""
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from profile_builder.app.api.v1 import options, profile, resources, resume
from profile_builder.app.core.config import settings
from profile_builder.app.core.logging_config import get_logger, setup_logging
from profile_builder.app.db.storage import ProfileStorage

logger = get_logger("main")


def _field_errors(exc: RequestValidationError) -> list[dict]:
    """Flatten pydantic errors to {field, message, type}; "body" is dropped from the path."""
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        errors.append({
            "field": ".".join(loc),
            "message": err.get("msg", ""),
            "type": err.get("type", ""),
        })
    return errors


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _field_errors(exc)
    logger.info("Invalid request %s %s errors=%s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid data", "errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def create_app(storage: ProfileStorage | None = None) -> FastAPI:
    """Build the app. The store object lives as long as the app does."""
    setup_logging()

    app = FastAPI(
        title="Profile Builder API",
        description="Build and share a structured resume-style profile",
        version=settings.app_version,
    )
    if storage is None:
        storage = ProfileStorage(seed_default_profile=settings.seed_default_profile)
    app.state.storage = storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Include routers
    app.include_router(profile.router, prefix="/api")
    app.include_router(resources.router, prefix="/api")
    app.include_router(resume.router, prefix="/api")
    app.include_router(options.router, prefix="/api")

    # Serve locally stored resumes (create dir if missing)
    upload_path = Path(settings.upload_dir)
    upload_path.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads/resumes", StaticFiles(directory=str(upload_path)), name="resumes")

    @app.get("/")
    def read_root():
        """Root endpoint"""
        return {"message": settings.app_name, "version": settings.app_version}

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}

    logger.info("%s %s ready", settings.app_name, settings.app_version)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
