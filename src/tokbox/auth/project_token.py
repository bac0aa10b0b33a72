"""Project tokens (JWT) authenticating REST calls to the OpenTok API.

A fresh token is minted for every request. Issued-at and expiry are taken from
the clock at signing time so a token is never reused or cached.
"""

from __future__ import annotations

import time
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import jwt

from tokbox.clients import DEFAULT_AUTH_TOKEN_LIFETIME_SECONDS
from tokbox.errors import SigningError

JWT_ALGORITHM = "HS256"
TOKEN_PURPOSE = "project"


@dataclass(frozen=True, slots=True)
class ProjectTokenSigner:
    api_key: str
    partner_secret: str = field(repr=False)
    lifetime_seconds: int = DEFAULT_AUTH_TOKEN_LIFETIME_SECONDS
    clock: Callable[[], float] = field(default=time.time, repr=False, compare=False)

    def claims(self) -> dict[str, Any]:
        """Return the claim set for a token issued now."""
        if self.lifetime_seconds <= 0:
            raise SigningError("project token lifetime must be positive")
        issued_at = int(self.clock())
        return {
            "ist": TOKEN_PURPOSE,
            "iss": self.api_key,
            "iat": issued_at,
            "exp": issued_at + self.lifetime_seconds,
            "jti": str(uuid.uuid4()),
        }

    def sign(self) -> str:
        if not self.partner_secret:
            raise SigningError("partner secret must not be empty")
        claims = self.claims()
        try:
            return jwt.encode(claims, self.partner_secret, algorithm=JWT_ALGORITHM)
        except jwt.PyJWTError as exc:
            raise SigningError(f"could not sign project token: {exc}") from exc


__all__ = ["JWT_ALGORITHM", "TOKEN_PURPOSE", "ProjectTokenSigner"]
