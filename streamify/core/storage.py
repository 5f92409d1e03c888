# ============================================================================
# FILE: streamify/core/storage.py
# Validation and persistence of uploaded media under the public directory
# ============================================================================
from typing import Dict, Optional
from streamify.config import settings
from streamify.core.errors import BadRequestError, ServiceError
import errno
import logging
import os
import re
import time

logger = logging.getLogger(__name__)

VALID_IMAGE_TYPES = ["image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"]
VALID_IMAGE_EXTENSIONS = ["jpg", "jpeg", "png", "gif", "webp"]
VALID_AUDIO_EXTENSIONS = ["mp3", "wav", "ogg", "m4a", "aac", "flac", "mp4", "wma"]

# Upload kind -> folder under the public directory
UPLOAD_FOLDERS = {
    "image": "songs/images",
    "audio": "songs/files",
    "avatar": "users",
}

MB = 1024 * 1024


def _extension(filename: str) -> str:
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[-1].lower()


def safe_filename(filename: str) -> str:
    return re.sub(r"[^a-zA-Z0-9.-]", "_", filename)


def is_valid_image(filename: str, content_type: Optional[str], strict_mime: bool = True) -> bool:
    """
    Catalog images need a known image MIME type, or no MIME type and a known
    extension. Profile pictures (strict_mime=False) accept either.
    """
    ext = _extension(filename)
    if content_type in VALID_IMAGE_TYPES:
        return True
    if strict_mime and content_type:
        return False
    return ext in VALID_IMAGE_EXTENSIONS


def is_valid_audio(filename: str, content_type: Optional[str]) -> bool:
    content_type = content_type or ""
    if content_type.startswith("audio/") or content_type == "application/octet-stream":
        return True
    return _extension(filename) in VALID_AUDIO_EXTENSIONS


def max_size_mb(kind: str) -> int:
    if kind == "audio":
        return settings.MAX_AUDIO_SIZE_MB
    if kind == "avatar":
        return settings.MAX_AVATAR_SIZE_MB
    return settings.MAX_IMAGE_SIZE_MB


def validate_upload(kind: str, filename: str, content_type: Optional[str], size: int):
    """Raise BadRequestError when an upload of the given kind is not acceptable"""
    if kind == "audio":
        if not is_valid_audio(filename, content_type):
            raise BadRequestError(
                f"Invalid audio type. Allowed extensions: {', '.join(VALID_AUDIO_EXTENSIONS)}"
            )
    elif not is_valid_image(filename, content_type, strict_mime=(kind == "image")):
        raise BadRequestError(f"Invalid image type. Allowed: {', '.join(VALID_IMAGE_EXTENSIONS)}")

    limit = max_size_mb(kind)
    if size > limit * MB:
        if kind == "avatar":
            raise BadRequestError(f"File size too large. Max size: {limit}MB")
        raise BadRequestError(f"File size too large ({size / MB:.2f}MB). Max size: {limit}MB")

    if size == 0:
        raise BadRequestError("File is empty")


def _os_error_message(e: OSError) -> str:
    if e.errno == errno.ENOENT:
        return "Directory not found. Please check file permissions."
    if e.errno == errno.EACCES:
        return "Permission denied. Please check file permissions."
    if e.errno == errno.ENOSPC:
        return "No space left on device."
    return f"Failed to upload file: {e.strerror or e}"


def save_upload(kind: str, filename: str, content_type: Optional[str], content: bytes,
                prefix: Optional[str] = None) -> Dict[str, str]:
    """
    Validate and write an upload to the public directory.

    Returns:
        {"url": "/songs/images/<file>", "filename": "<file>", "path": "<abs path>"}
    """
    if kind not in UPLOAD_FOLDERS:
        raise BadRequestError("Type must be 'image' or 'audio'")
    if not filename:
        raise BadRequestError("No file provided")

    validate_upload(kind, filename, content_type, len(content))

    folder = UPLOAD_FOLDERS[kind]
    upload_dir = os.path.join(settings.UPLOAD_DIR, *folder.split("/"))
    stored_name = f"{int(time.time() * 1000)}_{safe_filename(filename)}"
    if prefix:
        stored_name = f"{prefix}_{stored_name}"
    path = os.path.join(upload_dir, stored_name)

    try:
        os.makedirs(upload_dir, exist_ok=True)
        with open(path, "wb") as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Error writing upload {path}: {e}")
        raise ServiceError(_os_error_message(e), status_code=500)

    logger.info(f"Stored {kind} upload ({len(content)} bytes) -> {path}")
    return {"url": f"/{folder}/{stored_name}", "filename": stored_name, "path": path}


def remove_upload(path: str):
    """Best-effort removal of a file written by save_upload"""
    try:
        os.remove(path)
    except OSError as e:
        logger.error(f"Error deleting upload {path}: {e}")
