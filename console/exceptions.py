"""Custom exception classes for the FileDesk console."""

from typing import Optional


class FileDeskError(Exception):
    """
    Base exception class for all console errors.

    The message is user-facing text and is shown as-is.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FileDeskError):
    """
    Raised when an operation is rejected locally, before any request is made
    (no file selected, local path missing).
    """
    pass


class ApiError(FileDeskError):
    """
    Raised when the backend answers with a non-2xx status.

    The message is the fixed text for the failed operation; the server body is
    kept only for diagnostics.
    """

    def __init__(self, status_code: int, message: str, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
