"""
slackhook error types: one per failure kind surfaced by the builder and client.
"""

from typing import Any, Optional


class SlackHookError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class InvalidInputError(SlackHookError):
    """Raised when a builder receives something that is neither the entity nor a mapping."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("invalid_input", message, details)


class SubmissionError(SlackHookError):
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
        code: str = "submission_failure",
    ):
        super().__init__(code, message, details)
        self.status_code = status_code


class SerializationError(SubmissionError):
    """The payload could not be JSON-encoded; nothing was sent."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, details=details, code="serialization_failure")
