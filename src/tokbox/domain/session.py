"""Session creation inputs and the session descriptor returned by the service."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from tokbox.durations import HOURS_24
from tokbox.errors import SigningError

if TYPE_CHECKING:
    from tokbox.client import Tokbox


class MediaMode(str, Enum):
    """How media streams travel between session participants."""

    ROUTED = "disabled"
    """Streams go through the OpenTok Media Router."""

    RELAYED = "enabled"
    """Streams go directly between clients, falling back to TURN relays."""


class ArchiveMode(str, Enum):
    """Whether the session is recorded automatically."""

    MANUAL = "manual"
    ALWAYS = "always"


class Role(str, Enum):
    """Capabilities granted to a client joining a session."""

    SUBSCRIBER = "subscriber"
    PUBLISHER = "publisher"
    MODERATOR = "moderator"


@dataclass(frozen=True, slots=True)
class CreateSessionRequest:
    """Optional knobs for a new session; unset fields use the service defaults.

    Values are not validated here. Plain strings are forwarded as-is and the
    service decides whether they are acceptable.
    """

    location: str | None = None
    media_mode: MediaMode | str | None = None
    archive_mode: ArchiveMode | str | None = None

    @property
    def resolved_media_mode(self) -> str:
        return _wire_value(self.media_mode) if self.media_mode else MediaMode.RELAYED.value


@dataclass(frozen=True, slots=True)
class Session:
    """A session created by the OpenTok REST API."""

    session_id: str
    project_id: str | None = None
    partner_id: str | None = None
    create_dt: str | None = None
    media_server_url: str | None = None
    session_status: str | None = None
    tokbox: Tokbox | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.session_id:
            raise ValueError("session_id must not be empty")

    def token(
        self,
        role: Role | str = Role.PUBLISHER,
        *,
        expire_in: int = HOURS_24,
        connection_data: str | None = None,
        initial_layout_classes: Sequence[str] | str = (),
    ) -> str:
        """Mint a client token for joining this session.

        Uses the credentials of the client that created the session.
        """
        if self.tokbox is None:
            raise SigningError("session has no client credentials to sign with")
        return self.tokbox.generate_token(
            self.session_id,
            role,
            expire_in=expire_in,
            connection_data=connection_data,
            initial_layout_classes=initial_layout_classes,
        )


def _wire_value(value: Enum | str) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def encode_session_form(request: CreateSessionRequest) -> dict[str, str]:
    """Return the form fields for a ``/session/create`` call."""
    params: dict[str, str] = {}
    if request.location:
        params["location"] = request.location
    params["p2p.preference"] = request.resolved_media_mode
    if request.archive_mode:
        params["archiveMode"] = _wire_value(request.archive_mode)
    return params


__all__ = [
    "ArchiveMode",
    "CreateSessionRequest",
    "MediaMode",
    "Role",
    "Session",
    "encode_session_form",
]
