from __future__ import annotations

import json

import pytest

from tokbox.errors import DecodeError, EmptyResponseError
from tokbox.parsers import parse_first_session, parse_sessions


def test_parse_sessions_reads_service_fields() -> None:
    body = json.dumps(
        [
            {
                "session_id": "1_MX40NTY3ODkwMX4",
                "project_id": 45678901,
                "partner_id": 45678901,
                "create_dt": "Mon Oct 12 09:00:00 PDT 2026",
                "session_status": None,
                "media_server_url": "",
                "properties": {"ignored": True},
            }
        ]
    )

    (session,) = parse_sessions(body)

    assert session.session_id == "1_MX40NTY3ODkwMX4"
    assert session.project_id == "45678901"
    assert session.create_dt == "Mon Oct 12 09:00:00 PDT 2026"
    assert session.session_status is None
    assert session.tokbox is None


def test_parse_first_session_accepts_camel_case_identifier() -> None:
    session = parse_first_session(b'[{"sessionId":"abc123"},{"sessionId":"def456"}]')

    assert session.session_id == "abc123"


def test_parse_first_session_raises_on_empty_array() -> None:
    with pytest.raises(EmptyResponseError):
        parse_first_session(b"[]")


@pytest.mark.parametrize("body", [b"", b"not json", b"{}", b'[{"sessionId": ""}]', b"[1]"])
def test_parse_sessions_raises_decode_error(body: bytes) -> None:
    with pytest.raises(DecodeError):
        parse_sessions(body)
