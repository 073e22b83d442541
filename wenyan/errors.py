"""Error codes and error handling utilities for WenYan."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for WenYan operations."""

    # File system errors
    FILE_NOT_FOUND = auto()
    FILE_ACCESS_DENIED = auto()
    FILE_TOO_LARGE = auto()
    PATH_INVALID = auto()

    # Bundled resource errors
    RESOURCE_MISSING = auto()
    RESOURCE_UNREADABLE = auto()

    # Theme errors
    THEME_NOT_FOUND = auto()
    THEME_INVALID = auto()

    # Configuration errors
    CONFIG_PERMISSION_DENIED = auto()

    # Operation errors
    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.FILE_NOT_FOUND: "The file was not found. It may have been moved or deleted.",
    ErrorCode.FILE_ACCESS_DENIED: "Access denied. Check file permissions.",
    ErrorCode.FILE_TOO_LARGE: "The file is too large to be used as a stylesheet.",
    ErrorCode.PATH_INVALID: "The specified path is invalid or inaccessible.",

    ErrorCode.RESOURCE_MISSING: "Required resource is missing",
    ErrorCode.RESOURCE_UNREADABLE: "A bundled resource could not be read. Reinstall the application.",

    ErrorCode.THEME_NOT_FOUND: "The selected theme no longer exists. The default theme will be used.",
    ErrorCode.THEME_INVALID: "The theme is invalid and cannot be used.",

    ErrorCode.CONFIG_PERMISSION_DENIED: "Cannot save configuration. Check folder permissions.",

    ErrorCode.OPERATION_FAILED: "Operation failed. See details for more information.",
}


@dataclass
class WenYanError(Exception):
    """Base exception for WenYan with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


class ThemeValidationError(ValueError):
    """Raised when a custom theme package fails validation."""


def classify_exception(exc: Exception, path: Path | None = None) -> WenYanError:
    """Classify a generic exception into a WenYanError with appropriate code."""
    if isinstance(exc, WenYanError):
        return exc
    exc_name = type(exc).__name__
    exc_str = str(exc).lower()

    if isinstance(exc, ThemeValidationError):
        return WenYanError(ErrorCode.THEME_INVALID, message=str(exc), path=path)
    if isinstance(exc, FileNotFoundError) or "no such file" in exc_str:
        return WenYanError(ErrorCode.FILE_NOT_FOUND, path=path, details={"original": exc_str})
    if isinstance(exc, PermissionError) or "permission denied" in exc_str:
        return WenYanError(ErrorCode.FILE_ACCESS_DENIED, path=path, details={"original": exc_str})
    if isinstance(exc, UnicodeDecodeError):
        return WenYanError(
            ErrorCode.PATH_INVALID,
            message="The file is not valid UTF-8 text.",
            path=path,
            details={"original": exc_str},
        )

    return WenYanError(
        ErrorCode.OPERATION_FAILED,
        message=f"{exc_name}: {exc}",
        path=path,
        details={"original": exc_str},
    )


def format_error_for_user(error: WenYanError | Exception) -> str:
    """Format an error for display to the user with actionable suggestions."""
    if isinstance(error, WenYanError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n\n{error.suggestion}")
        if error.path:
            parts.append(f"\n\nFile: {error.path.name}")
        return "".join(parts)

    classified = classify_exception(error)
    return format_error_for_user(classified)
