"""Production collaborators for the request pipeline.

This module provides:

* **HttpxTransport** -- :class:`~fcm_rest.core.interfaces.Transport`
  backed by a shared :class:`httpx.AsyncClient`.
* **GoogleAuthTokenProvider** --
  :class:`~fcm_rest.core.interfaces.TokenProvider` backed by google-auth
  Application Default Credentials.

Both are safe for concurrent use by many in-flight requests.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from types import TracebackType
from typing import Any

import google.auth
import httpx
from google.auth.credentials import Credentials
from google.auth.transport.requests import Request as GoogleAuthRequest

from fcm_rest.core.config import DEFAULT_SCOPES

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# HttpxTransport
# ---------------------------------------------------------------------------


class HttpxResponse:
    """Adapts a streamed :class:`httpx.Response` to ``TransportResponse``."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    async def read(self) -> bytes:
        return await self._response.aread()

    async def aclose(self) -> None:
        await self._response.aclose()


class HttpxTransport:
    """HTTP transport over a single shared :class:`httpx.AsyncClient`.

    Parameters
    ----------
    client:
        An existing client to use.  When omitted, a client is created and
        owned by the transport (closed by :meth:`aclose`).
    timeout:
        Timeout in seconds for clients created by the transport.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = 30.0,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes,
    ) -> HttpxResponse:
        request = self._client.build_request(method, url, headers=headers, content=body)
        response = await self._client.send(request, stream=True)
        return HttpxResponse(response)

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


# ---------------------------------------------------------------------------
# GoogleAuthTokenProvider
# ---------------------------------------------------------------------------


class GoogleAuthTokenProvider:
    """Bearer tokens from google-auth credentials.

    Credentials are discovered with :func:`google.auth.default` unless
    given explicitly.  ``refresh`` is a blocking call, so it runs in a
    worker thread; an :class:`asyncio.Lock` ensures concurrent callers
    trigger at most one refresh, and a still-valid token is reused.
    """

    def __init__(
        self,
        credentials: Credentials | None = None,
        *,
        scopes: Sequence[str] = DEFAULT_SCOPES,
    ) -> None:
        self._scopes = list(scopes)
        self._credentials = credentials
        self._lock = asyncio.Lock()

    @property
    def credentials(self) -> Credentials | None:
        return self._credentials

    async def acquire_bearer_token(self) -> str:
        async with self._lock:
            if self._credentials is None:
                self._credentials = await asyncio.to_thread(self._load_default)
            credentials = self._credentials
            if not credentials.valid:
                logger.debug("Refreshing Google credentials")
                await asyncio.to_thread(credentials.refresh, GoogleAuthRequest())
            token: Any = credentials.token
        if not token:
            raise RuntimeError("Google credentials did not yield an access token")
        return str(token)

    def _load_default(self) -> Credentials:
        credentials, project_id = google.auth.default(scopes=self._scopes)
        logger.debug("Loaded default Google credentials (project=%s)", project_id)
        return credentials


__all__ = ["GoogleAuthTokenProvider", "HttpxResponse", "HttpxTransport"]
