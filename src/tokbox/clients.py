"""Client defaults (base URL, paths, auth header) for the OpenTok REST API."""

from __future__ import annotations

from dataclasses import dataclass

from tokbox.durations import MINUTES_5


@dataclass(frozen=True, slots=True)
class TokboxDefaults:
    base_url: str = "https://api.opentok.com"
    session_create_path: str = "/session/create"
    auth_header: str = "X-OPENTOK-AUTH"
    # The REST API rejects project tokens whose exp - iat exceeds five minutes.
    max_auth_token_lifetime_seconds: int = MINUTES_5
    auth_token_lifetime_seconds: int = MINUTES_5


# Instances
TOKBOX = TokboxDefaults()

DEFAULT_AUTH_TOKEN_LIFETIME_SECONDS = TOKBOX.auth_token_lifetime_seconds

__all__ = [
    "DEFAULT_AUTH_TOKEN_LIFETIME_SECONDS",
    "TOKBOX",
    "TokboxDefaults",
]
