"""Decoding of ``/session/create`` response bodies."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from tokbox.domain.session import Session
from tokbox.errors import DecodeError, EmptyResponseError


class _SessionPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    session_id: str = Field(
        min_length=1,
        validation_alias=AliasChoices("session_id", "sessionId"),
    )
    project_id: str | None = Field(default=None, validation_alias=AliasChoices("project_id", "projectId"))
    partner_id: str | None = Field(default=None, validation_alias=AliasChoices("partner_id", "partnerId"))
    create_dt: str | None = Field(default=None, validation_alias=AliasChoices("create_dt", "createDt"))
    media_server_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("media_server_url", "mediaServerUrl"),
    )
    session_status: str | None = Field(
        default=None,
        validation_alias=AliasChoices("session_status", "sessionStatus"),
    )


_SESSIONS_ADAPTER = TypeAdapter(list[_SessionPayload])


def parse_sessions(body: bytes | str) -> list[Session]:
    """Decode a JSON array of session descriptors."""
    try:
        parsed = _SESSIONS_ADAPTER.validate_json(body)
    except ValidationError as exc:
        raise DecodeError(f"could not decode session response: {exc}") from exc
    return [
        Session(
            session_id=item.session_id,
            project_id=item.project_id,
            partner_id=item.partner_id,
            create_dt=item.create_dt,
            media_server_url=item.media_server_url,
            session_status=item.session_status,
        )
        for item in parsed
    ]


def parse_first_session(body: bytes | str) -> Session:
    """Return the first session of the response, which is the one just created."""
    sessions = parse_sessions(body)
    if not sessions:
        raise EmptyResponseError("tokbox did not return a session")
    return sessions[0]


__all__ = ["parse_first_session", "parse_sessions"]
