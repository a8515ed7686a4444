"""Error definitions and handling for the gitpatch parser."""

from typing import Any, Dict, Optional


class GitPatchError(Exception):
    """Base exception for gitpatch errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with code, message, and optional details."""
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        result = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class PatchInputTypeError(GitPatchError, TypeError):
    """The parser was called with something other than a string."""

    def __init__(self, received: Any):
        received_type = type(received).__name__
        super().__init__(
            code="INVALID_INPUT_TYPE",
            message=f"Expected patch to be a string, got {received_type}",
            details={"received_type": received_type},
        )


class InputTooLargeError(GitPatchError):
    """Patch text exceeds the configured size limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(
            code="INPUT_TOO_LARGE",
            message=f"Patch input is {size} bytes, limit is {limit} bytes",
            details={"size_bytes": size, "limit_bytes": limit},
        )


class PatchReadError(GitPatchError):
    """Patch input could not be read or decoded."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            code="INPUT_READ_FAILED",
            message=f"Failed to read patch input: {reason}",
            details={"source": source, "reason": reason},
        )


class GitVersionUnsupportedError(GitPatchError):
    """Git version is not supported."""

    def __init__(self, detected_version: str, required_version: str = "2.0"):
        super().__init__(
            code="GIT_VERSION_UNSUPPORTED",
            message=f"Git version {detected_version} is not supported. "
            f"Minimum required: {required_version}",
            details={
                "detected_version": detected_version,
                "required_version": required_version,
            },
        )


class GitCommandError(GitPatchError):
    """A git invocation exited with an error."""

    def __init__(self, command: str, reason: str):
        super().__init__(
            code="GIT_COMMAND_FAILED",
            message=f"git {command} failed: {reason}",
            details={"command": command, "reason": reason},
        )


class GitTimeoutError(GitPatchError):
    """A git invocation timed out."""

    def __init__(self, command: str, timeout_seconds: int):
        super().__init__(
            code="GIT_TIMEOUT",
            message=f"Timeout during git {command} after {timeout_seconds}s",
            details={"command": command, "timeout_seconds": timeout_seconds},
        )
