"""fcm-rest collaborator interfaces and in-memory implementations.

The request pipeline depends on two external capabilities, defined here
as structural interfaces (``typing.Protocol``):

* :class:`TokenProvider` -- produces an OAuth2 bearer token.
* :class:`Transport` -- sends one HTTP request and returns a
  :class:`TransportResponse`.

Production implementations live in :mod:`fcm_rest.wire.http`.  The
lightweight in-memory implementations below are intended for tests and
local development; they record every call so that assertions can be
made on what the pipeline sent.

Every Protocol class is decorated with ``@runtime_checkable`` so that
``isinstance`` checks work at run-time in addition to static analysis.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import httpx

# ===================================================================
# Protocol (interface) definitions
# ===================================================================


@runtime_checkable
class TokenProvider(Protocol):
    """Source of OAuth2 bearer tokens.

    Called once per pipeline execution.  Any caching or refresh policy
    belongs to the implementation.  Implementations MUST be safe for
    concurrent use.
    """

    async def acquire_bearer_token(self) -> str:
        """Return a bearer token (without the ``Bearer`` prefix)."""
        ...


@runtime_checkable
class TransportResponse(Protocol):
    """The status, headers, and lazily-read body of an HTTP response."""

    @property
    def status_code(self) -> int:
        ...

    @property
    def headers(self) -> Mapping[str, str]:
        """Response headers; lookups MUST be case-insensitive."""
        ...

    async def read(self) -> bytes:
        """Read the full response body."""
        ...

    async def aclose(self) -> None:
        """Release the underlying connection."""
        ...


@runtime_checkable
class Transport(Protocol):
    """Sends one HTTP request.  Implementations MUST be safe for concurrent use."""

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes,
    ) -> TransportResponse:
        """Send the request; raise on connection, TLS or timeout failures."""
        ...


# ===================================================================
# In-memory implementations (testing / development)
# ===================================================================


class StaticTokenProvider:
    """Token provider that always returns the same token.

    Pass ``error`` to simulate a credential failure: it is raised on
    every call instead.
    """

    def __init__(self, token: str = "test-token", *, error: Exception | None = None) -> None:
        self._token = token
        self._error = error
        self.calls = 0

    async def acquire_bearer_token(self) -> str:
        self.calls += 1
        if self._error is not None:
            raise self._error
        return self._token


@dataclass
class CannedResponse:
    """A prepared response returned by :class:`InMemoryTransport`.

    If ``body`` is an exception it is raised from :meth:`read`, which
    simulates a body that cannot be read.
    """

    status_code: int = 200
    body: bytes | Exception = b"{}"
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    closed: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.headers, httpx.Headers):
            self.headers = httpx.Headers(self.headers)

    async def read(self) -> bytes:
        if isinstance(self.body, Exception):
            raise self.body
        return self.body

    async def aclose(self) -> None:
        self.closed = True


@dataclass(frozen=True)
class RecordedRequest:
    """A request captured by :class:`InMemoryTransport`."""

    method: str
    url: str
    headers: httpx.Headers
    body: bytes


class InMemoryTransport:
    """Transport that replays canned responses and records requests.

    Responses are returned in the order they were queued; when only one
    remains it is reused for every later request.  Queue an exception to
    simulate a transport failure.
    """

    def __init__(self, *responses: CannedResponse | Exception) -> None:
        self._responses: list[CannedResponse | Exception] = list(responses) or [CannedResponse()]
        self.requests: list[RecordedRequest] = []

    def queue(self, response: CannedResponse | Exception) -> None:
        """Append *response* to the replay queue (test helper)."""
        self._responses.append(response)

    @property
    def last_request(self) -> RecordedRequest:
        return self.requests[-1]

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes,
    ) -> CannedResponse:
        self.requests.append(
            RecordedRequest(method=method, url=url, headers=httpx.Headers(headers), body=body)
        )
        response = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if isinstance(response, Exception):
            raise response
        return response


__all__ = [
    "CannedResponse",
    "InMemoryTransport",
    "RecordedRequest",
    "StaticTokenProvider",
    "TokenProvider",
    "Transport",
    "TransportResponse",
]
