"""Client for creating OpenTok video sessions over the REST API."""

from tokbox.client import Tokbox
from tokbox.domain.session import ArchiveMode, CreateSessionRequest, MediaMode, Role, Session
from tokbox.errors import (
    DecodeError,
    EmptyResponseError,
    RemoteRejectionError,
    SigningError,
    TokboxError,
    TransportError,
)

__all__ = [
    "ArchiveMode",
    "CreateSessionRequest",
    "DecodeError",
    "EmptyResponseError",
    "MediaMode",
    "RemoteRejectionError",
    "Role",
    "Session",
    "SigningError",
    "Tokbox",
    "TokboxError",
    "TransportError",
]
