# ============================================================================
# FILE: streamify/core/errors.py
# ============================================================================
from typing import Optional
from sqlalchemy.exc import IntegrityError
import logging

logger = logging.getLogger(__name__)

# SQLSTATE codes (PostgreSQL) and the message fragments SQLite uses instead
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
SQLITE_UNIQUE = "UNIQUE constraint failed"
SQLITE_FOREIGN_KEY = "FOREIGN KEY constraint failed"


class ServiceError(Exception):
    """User-facing failure raised by the service layer"""

    status_code = 400

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(ServiceError):
    status_code = 400


class PermissionDeniedError(ServiceError):
    status_code = 403


class NotFoundError(ServiceError):
    status_code = 404


class ConflictError(ServiceError):
    status_code = 409


def _error_code(exc: IntegrityError) -> Optional[str]:
    orig = exc.orig
    # psycopg2 exposes pgcode, psycopg 3 exposes sqlstate
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code:
        return code
    text = str(orig)
    if SQLITE_UNIQUE in text:
        return UNIQUE_VIOLATION
    if SQLITE_FOREIGN_KEY in text:
        return FOREIGN_KEY_VIOLATION
    return None


def is_unique_violation(exc: IntegrityError) -> bool:
    return _error_code(exc) == UNIQUE_VIOLATION


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    return _error_code(exc) == FOREIGN_KEY_VIOLATION


def translate_integrity_error(
    exc: IntegrityError,
    duplicate: Optional[str] = None,
    missing: Optional[str] = None,
    referenced: Optional[str] = None,
) -> ServiceError:
    """
    Map a constraint violation to a user-facing error.

    Args:
        duplicate: message for a unique-key violation (409)
        missing: message for a foreign key pointing at a missing row (404)
        referenced: message for deleting a row that is still referenced (409)

    Re-raises the original error when no message matches its code.
    """
    code = _error_code(exc)
    if code == UNIQUE_VIOLATION and duplicate:
        return ConflictError(duplicate)
    if code == FOREIGN_KEY_VIOLATION:
        if missing:
            return NotFoundError(missing)
        if referenced:
            return ConflictError(referenced)
    logger.error(f"Unhandled integrity error ({code}): {exc.orig}")
    raise exc
