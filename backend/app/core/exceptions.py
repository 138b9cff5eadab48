"""
Custom exception classes for unified error handling.
"""

from fastapi import HTTPException, status


class AppBaseError(Exception):
    """Base exception for all application errors."""
    def __init__(self, message: str, detail: str | None = None):
        self.message = message
        self.detail = detail
        super().__init__(message)


class InvalidInputError(AppBaseError):
    """Raised when a note is saved with a blank text/destination field."""
    def __init__(self, field: str = "text"):
        super().__init__(
            message=f"'{field}' must not be empty",
            detail="Enter some text before saving the note.",
        )
        self.field = field


class DuplicateNoteError(AppBaseError):
    """Raised when a note id is added to a store that has already seen it."""
    def __init__(self, note_id: str):
        super().__init__(
            message=f"Note id '{note_id}' already used",
            detail="Note ids are never reused, even after deletion.",
        )
        self.note_id = note_id


class UnknownGalleryError(AppBaseError):
    """Raised when a request targets a gallery that does not exist."""
    def __init__(self, gallery: str):
        super().__init__(
            message=f"Unknown gallery '{gallery}'",
            detail="Available galleries: general, fun, office, important, travel.",
        )
        self.gallery = gallery


# ── Utility: convert to HTTPException ────────────────────

def app_error_to_http(error: AppBaseError, status_code: int = status.HTTP_400_BAD_REQUEST) -> HTTPException:
    """Convert an AppBaseError to an HTTPException with consistent JSON body."""
    return HTTPException(
        status_code=status_code,
        detail={
            "error": error.message,
            "detail": error.detail,
            "type": type(error).__name__,
        },
    )
