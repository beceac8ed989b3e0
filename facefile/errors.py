"""Error codes and error handling utilities for FaceFile."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for FaceFile operations."""

    # Template errors
    TEMPLATE_INVALID = auto()

    # File system errors
    FILE_NOT_FOUND = auto()
    FILE_ACCESS_DENIED = auto()
    DISK_FULL = auto()
    PATH_INVALID = auto()

    # Save errors
    SAVE_FAILED = auto()
    LOAD_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.TEMPLATE_INVALID: "The faces file template does not produce a usable path.",

    ErrorCode.FILE_NOT_FOUND: "The file was not found. It may have been moved or deleted.",
    ErrorCode.FILE_ACCESS_DENIED: "Access denied. Check file permissions or if the file is read-only.",
    ErrorCode.DISK_FULL: "The destination disk is full. Free up space and try again.",
    ErrorCode.PATH_INVALID: "The specified path is invalid or inaccessible.",

    ErrorCode.SAVE_FAILED: "Saving customizations failed. See details for more information.",
    ErrorCode.LOAD_FAILED: "Loading the faces file failed. See details for more information.",
}


@dataclass
class FaceFileError(Exception):
    """Base exception for FaceFile with error code and context."""

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
        """Convert to dictionary for logging or CLI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


@dataclass
class InvalidTemplate(FaceFileError):
    """Raised when a resolved faces path is not usable as a file path."""

    code: ErrorCode = ErrorCode.TEMPLATE_INVALID


def classify_exception(
    exc: Exception,
    path: Path | None = None,
    *,
    default: ErrorCode = ErrorCode.SAVE_FAILED,
) -> FaceFileError:
    """Classify a generic exception into a FaceFileError with appropriate code."""
    if isinstance(exc, FaceFileError):
        return exc
    exc_name = type(exc).__name__
    exc_str = str(exc).lower()

    if "FileNotFoundError" in exc_name or "no such file" in exc_str:
        return FaceFileError(ErrorCode.FILE_NOT_FOUND, path=path, details={"original": exc_str})
    if "PermissionError" in exc_name or "access is denied" in exc_str or "permission denied" in exc_str:
        return FaceFileError(ErrorCode.FILE_ACCESS_DENIED, path=path, details={"original": exc_str})
    if "disk full" in exc_str or "no space left" in exc_str:
        return FaceFileError(ErrorCode.DISK_FULL, path=path, details={"original": exc_str})
    if "IsADirectoryError" in exc_name or "NotADirectoryError" in exc_name:
        return FaceFileError(ErrorCode.PATH_INVALID, path=path, details={"original": exc_str})

    return FaceFileError(
        default,
        message=f"{exc_name}: {exc}",
        path=path,
        details={"original": exc_str},
    )


def format_error_for_user(error: FaceFileError | Exception) -> str:
    """Format an error for display to the user with actionable suggestions."""
    if isinstance(error, FaceFileError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n\n{error.suggestion}")
        if error.path:
            parts.append(f"\n\nFile: {error.path}")
        return "".join(parts)

    classified = classify_exception(error)
    return format_error_for_user(classified)
