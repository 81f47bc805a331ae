"""Custom exceptions for the live timing client."""

from __future__ import annotations


class ACTimingError(Exception):
    """Base exception for all live timing errors."""


class ACTimingConnectionError(ACTimingError):
    """Raised when the timing server or roster host cannot be reached."""


class ACTimingTimeoutError(ACTimingError):
    """Raised when a request times out."""


class ACTimingAPIError(ACTimingError):
    """Raised when a remote endpoint returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class ACTimingValidationError(ACTimingError):
    """Raised when a telemetry payload fails model validation."""
