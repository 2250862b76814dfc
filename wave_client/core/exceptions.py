"""Custom exceptions for the WAVE client."""

from typing import Optional, Any, Dict


class WaveException(Exception):
    """Base exception for all WAVE client errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ============================================================================
# Argument Errors
# ============================================================================


class InvalidArgumentError(WaveException):
    """A required input was missing or empty."""

    def __init__(self, argument: str, message: Optional[str] = None):
        super().__init__(message or f"{argument} is required", {"argument": argument})
        self.argument = argument


# ============================================================================
# Remote Errors
# ============================================================================


class RemoteRejectionError(WaveException):
    """The API answered but reported ``success: false``."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message, {"code": code} if code else None)
        self.code = code

    def __str__(self) -> str:
        return self.message


class TransportFailureError(WaveException):
    """Connection error, timeout or non-2xx response."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Any = None,
        code: Optional[str] = None,
    ):
        super().__init__(
            message,
            {"status_code": status_code, "code": code} if status_code or code else None,
        )
        self.status_code = status_code
        self.response = response
        self.code = code


class InvalidResponseError(WaveException):
    """A 2xx response whose body is not a JSON object."""

    def __init__(self, message: str = "Invalid response format", raw_response: Any = None):
        super().__init__(
            message,
            {"raw_response_preview": str(raw_response)[:500] if raw_response is not None else None},
        )
        self.raw_response = raw_response


# ============================================================================
# Exposure Errors
# ============================================================================


class ExposureError(WaveException):
    """The local listener or its public tunnel could not be set up."""

    pass
