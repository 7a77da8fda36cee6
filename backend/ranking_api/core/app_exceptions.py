"""Application-specific exceptions for consistent error handling.

Three outcomes of a ranking request are errors from the caller's point of view and
each has its own class, so an absent user can never be mistaken for a failed store
call (and neither is ever turned into an empty result).
"""

from typing import Any

from fastapi import HTTPException, status


class AppError(HTTPException):
    """Application error with standardized error code."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: dict[str, Any] | list[Any] | None = None,
    ):
        """Initialize application error."""
        super().__init__(
            status_code=status_code,
            detail={
                "code": code,
                "message": message,
                "details": details,
            },
        )
        self.code = code
        self.message = message
        self.details = details


class BadRequestError(AppError):
    """Requested ranking window is out of range or longer than the allowed maximum."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        code: str = "RANKING_RANGE_TOO_LARGE",
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            code=code,
            message=message,
            details=details,
        )


class NotFoundError(AppError):
    """User has no recorded value for the requested metric."""

    def __init__(self, user: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            code="USER_NOT_FOUND",
            message=f"No ranking record for user {user!r}",
            details={"user": user},
        )


class UpstreamError(AppError):
    """A ranking store operation failed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code="UPSTREAM_ERROR",
            message=message,
            details=details,
        )

