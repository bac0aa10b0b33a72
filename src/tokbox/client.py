"""OpenTok REST client: creates sessions with a per-request signed project token."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from contextlib import AbstractContextManager
from dataclasses import dataclass, field, replace

import httpx
from opentelemetry import trace
from opentelemetry.trace import Span, SpanKind

from tokbox.auth.client_token import generate_client_token
from tokbox.auth.project_token import ProjectTokenSigner
from tokbox.clients import DEFAULT_AUTH_TOKEN_LIFETIME_SECONDS, TOKBOX
from tokbox.domain.session import CreateSessionRequest, Role, Session, encode_session_form
from tokbox.durations import HOURS_24
from tokbox.errors import RemoteRejectionError, TokboxError, TransportError
from tokbox.parsers import parse_first_session

logger = logging.getLogger("tokbox.client")
auth_logger = logging.getLogger("tokbox.auth")


@dataclass(frozen=True)
class Tokbox:
    """Credentials and endpoint for the OpenTok REST API.

    Instances are immutable and may be shared between threads and tasks. Every
    call builds its own HTTP client, so nothing is retained between calls.
    """

    api_key: str
    partner_secret: str = field(repr=False)
    base_url: str | None = None
    auth_token_lifetime_seconds: int = DEFAULT_AUTH_TOKEN_LIFETIME_SECONDS
    transport: httpx.BaseTransport | None = field(default=None, repr=False, compare=False)
    async_transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValueError("tokbox api_key must not be empty")
        if self.auth_token_lifetime_seconds > TOKBOX.max_auth_token_lifetime_seconds:
            auth_logger.warning(
                "project token lifetime exceeds the service maximum",
                extra={
                    "data": {
                        "lifetime_seconds": self.auth_token_lifetime_seconds,
                        "max_lifetime_seconds": TOKBOX.max_auth_token_lifetime_seconds,
                    }
                },
            )

    @property
    def endpoint(self) -> str:
        if not self.base_url:
            return TOKBOX.base_url
        return self.base_url.rstrip("/")

    def project_token(self) -> str:
        """Return a freshly signed project token for a single request."""
        signer = ProjectTokenSigner(
            api_key=self.api_key,
            partner_secret=self.partner_secret,
            lifetime_seconds=self.auth_token_lifetime_seconds,
        )
        return signer.sign()

    def create_session(
        self,
        request: CreateSessionRequest | None = None,
        *,
        timeout: float | None = None,
    ) -> Session:
        """Create a session, or raise a ``TokboxError``.

        ``timeout`` applies per phase (connect, write, read, pool acquisition),
        in seconds; it is not a deadline for the whole call. ``None`` waits until
        the server answers or the connection fails.
        """
        url = f"{self.endpoint}{TOKBOX.session_create_path}"
        form = encode_session_form(request or CreateSessionRequest())
        with _session_span(url) as span:
            headers = self._request_headers()
            start = time.perf_counter()
            try:
                with httpx.Client(timeout=httpx.Timeout(timeout), transport=self.transport) as client:
                    response = client.post(url, data=form, headers=headers)
            except httpx.HTTPError as exc:
                span.set_attributes({"tokbox.error": type(exc).__name__})
                raise TransportError(f"tokbox request failed: POST {url}: {exc}") from exc
            return self._session_from_response(response, span, url=url, start=start)

    async def create_session_async(
        self,
        request: CreateSessionRequest | None = None,
        *,
        timeout: float | None = None,
    ) -> Session:
        """Async twin of ``create_session``; cancelling the awaiting task aborts the request."""
        url = f"{self.endpoint}{TOKBOX.session_create_path}"
        form = encode_session_form(request or CreateSessionRequest())
        with _session_span(url) as span:
            headers = self._request_headers()
            start = time.perf_counter()
            try:
                async with httpx.AsyncClient(
                    timeout=httpx.Timeout(timeout),
                    transport=self.async_transport,
                ) as client:
                    response = await client.post(url, data=form, headers=headers)
            except httpx.HTTPError as exc:
                span.set_attributes({"tokbox.error": type(exc).__name__})
                raise TransportError(f"tokbox request failed: POST {url}: {exc}") from exc
            return self._session_from_response(response, span, url=url, start=start)

    def generate_token(
        self,
        session_id: str,
        role: Role | str = Role.PUBLISHER,
        *,
        expire_in: int = HOURS_24,
        connection_data: str | None = None,
        initial_layout_classes: Sequence[str] | str = (),
    ) -> str:
        """Mint a client token for an existing session id."""
        return generate_client_token(
            api_key=self.api_key,
            partner_secret=self.partner_secret,
            session_id=session_id,
            role=role,
            expire_in=expire_in,
            connection_data=connection_data,
            initial_layout_classes=initial_layout_classes,
        )

    def _request_headers(self) -> dict[str, str]:
        return {
            TOKBOX.auth_header: self.project_token(),
            "Accept": "application/json",
        }

    def _session_from_response(
        self,
        response: httpx.Response,
        span: Span,
        *,
        url: str,
        start: float,
    ) -> Session:
        span.set_attributes({"http.status_code": response.status_code})
        if response.status_code != httpx.codes.OK:
            span.set_attributes({"tokbox.error": f"http_{response.status_code}"})
            raise RemoteRejectionError(response.status_code)
        try:
            session = parse_first_session(response.content)
        except TokboxError as exc:
            span.set_attributes({"tokbox.error": type(exc).__name__})
            raise
        logger.debug(
            "tokbox.session.create.complete",
            extra={
                "data": {
                    "url": url,
                    "status_code": response.status_code,
                    "session_id": session.session_id,
                    "latency_ms": round((time.perf_counter() - start) * 1000, 2),
                }
            },
        )
        return replace(session, tokbox=self)


def _session_span(url: str) -> AbstractContextManager[Span]:
    tracer = trace.get_tracer("tokbox.client")
    return tracer.start_as_current_span(
        "tokbox.session.create",
        kind=SpanKind.CLIENT,
        attributes={"http.method": "POST", "http.url": url},
    )


__all__ = ["Tokbox"]
