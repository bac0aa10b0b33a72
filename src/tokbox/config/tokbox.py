"""Environment-backed credentials for applications embedding the client."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tokbox.client import Tokbox
from tokbox.clients import DEFAULT_AUTH_TOKEN_LIFETIME_SECONDS


class TokboxSettings(BaseSettings):
    """API key, partner secret and optional endpoint override for OpenTok."""

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_key: str = Field(alias="TOKBOX_API_KEY", min_length=1)
    partner_secret: str = Field(alias="TOKBOX_PARTNER_SECRET", min_length=1)
    base_url: str | None = Field(default=None, alias="TOKBOX_BASE_URL")
    auth_token_lifetime_seconds: int = Field(
        default=DEFAULT_AUTH_TOKEN_LIFETIME_SECONDS,
        alias="TOKBOX_AUTH_TOKEN_LIFETIME_SECONDS",
        gt=0,
    )

    def client(self) -> Tokbox:
        return Tokbox(
            api_key=self.api_key,
            partner_secret=self.partner_secret,
            base_url=self.base_url or None,
            auth_token_lifetime_seconds=self.auth_token_lifetime_seconds,
        )


__all__ = ["TokboxSettings"]
