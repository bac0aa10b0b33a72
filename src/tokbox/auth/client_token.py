"""Client tokens handed to end-user devices joining a session."""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
import time
from collections.abc import Callable, Sequence
from urllib.parse import urlencode

from tokbox.domain.session import Role
from tokbox.durations import DAYS_30, HOURS_24
from tokbox.errors import SigningError

TOKEN_SENTINEL = "T1=="
MAX_CONNECTION_DATA_LENGTH = 1000


def generate_client_token(
    *,
    api_key: str,
    partner_secret: str,
    session_id: str,
    role: Role | str,
    expire_in: int = HOURS_24,
    connection_data: str | None = None,
    initial_layout_classes: Sequence[str] | str = (),
    clock: Callable[[], float] = time.time,
) -> str:
    """Return a ``T1==`` token signed with HMAC-SHA1 over the token data string."""
    if not session_id:
        raise ValueError("session_id must not be empty")
    try:
        role = Role(role)
    except ValueError as exc:
        raise ValueError(f"unknown role: {role!r}") from exc
    if expire_in <= 0:
        raise ValueError("expire_in must be positive")
    if expire_in > DAYS_30:
        raise ValueError("expire_in must not exceed 30 days")
    if connection_data is not None and len(connection_data) > MAX_CONNECTION_DATA_LENGTH:
        raise ValueError(f"connection_data must not exceed {MAX_CONNECTION_DATA_LENGTH} characters")
    if not partner_secret:
        raise SigningError("partner secret must not be empty")

    now = int(clock())
    fields: list[tuple[str, str]] = [
        ("session_id", session_id),
        ("create_time", str(now)),
        ("role", role.value),
        ("nonce", str(secrets.randbelow(1_000_000))),
        ("expire_time", str(now + expire_in)),
    ]
    if connection_data:
        fields.append(("connection_data", connection_data))
    if isinstance(initial_layout_classes, str):
        initial_layout_classes = [initial_layout_classes]
    if initial_layout_classes:
        fields.append(("initial_layout_class_list", " ".join(initial_layout_classes)))
    data_string = urlencode(fields)

    signature = hmac.new(
        partner_secret.encode("utf-8"),
        data_string.encode("utf-8"),
        hashlib.sha1,
    ).hexdigest()
    decoded = f"partner_id={api_key}&sig={signature}:{data_string}"
    return TOKEN_SENTINEL + base64.b64encode(decoded.encode("utf-8")).decode("ascii")


__all__ = ["MAX_CONNECTION_DATA_LENGTH", "TOKEN_SENTINEL", "generate_client_token"]
