# ============================================================================
# FILE: streamify/main.py
# ============================================================================
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException
from streamify.api.v1.router import api_router
from streamify.core.errors import ServiceError
from streamify.core.logging import setup_logging
from streamify.core.storage import UPLOAD_FOLDERS
from streamify.config import settings
from streamify.db.session import get_db, init_db
from streamify.schemas.common import ErrorEnvelope
from streamify.services.share_service import share_service
import logging
import os

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Create FastAPI app instance
app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Music streaming with a curated catalog, playlists, library and listening stats",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorEnvelope(error=message).model_dump(),
        headers=headers,
    )

@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return error_response(exc.status_code, exc.message)

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return error_response(422, message)

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, "Internal server error")

# Include API v1 router
app.include_router(api_router, prefix="/api/v1")

# Serve uploaded media at the URLs storage hands out (/songs/..., /users/...)
for folder in sorted({path.split("/")[0] for path in UPLOAD_FOLDERS.values()}):
    app.mount(
        f"/{folder}",
        StaticFiles(directory=os.path.join(settings.UPLOAD_DIR, folder), check_dir=False),
        name=f"media-{folder}",
    )

@app.on_event("startup")
async def startup_event():
    """Initialize services on startup"""
    logger.info(f"Starting {settings.APP_NAME} API")
    init_db()

@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info(f"Shutting down {settings.APP_NAME} API")

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

@app.get("/api/v1/site")
async def site_info():
    """Public site metadata used by the frontend head tags"""
    return {
        "success": True,
        "data": {
            "name": settings.APP_NAME,
            "url": settings.SITE_URL,
            "google_site_verification": settings.GOOGLE_SITE_VERIFICATION or None,
        },
    }

@app.get("/sitemap.xml")
async def sitemap(db: Session = Depends(get_db)):
    return Response(content=share_service.render_sitemap(db), media_type="application/xml")

@app.get("/")
async def root():
    return {"message": f"{settings.APP_NAME} API", "version": "1.0.0", "docs": "/docs"}
