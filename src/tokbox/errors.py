"""Errors raised by the session client."""

from __future__ import annotations


class TokboxError(RuntimeError):
    """Base class for failures talking to the OpenTok REST API."""


class TransportError(TokboxError):
    """Raised when the request never produced an HTTP response."""


class RemoteRejectionError(TokboxError):
    """Raised when the service answers with a non-200 status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"tokbox returned error code: {status_code}")


class DecodeError(TokboxError):
    """Raised when the response body is not a JSON array of sessions."""


class EmptyResponseError(TokboxError):
    """Raised when the service returns an empty session array."""


class SigningError(TokboxError):
    """Raised when an authentication token cannot be produced."""


__all__ = [
    "DecodeError",
    "EmptyResponseError",
    "RemoteRejectionError",
    "SigningError",
    "TokboxError",
    "TransportError",
]
