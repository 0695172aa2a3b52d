"""Authenticated JSON request pipeline shared by every Google REST endpoint.

Every endpoint in fcm-rest is one call to :meth:`RequestPipeline.execute`
with a choice of payload type, response type and domain error type.  No
endpoint re-implements any of the steps below.

Pipeline
--------

1. **Authenticate** -- obtain a bearer token from the
   :class:`~fcm_rest.core.interfaces.TokenProvider`.  Any failure becomes
   :class:`~fcm_rest.core.errors.RPCUnauthorized`.
2. **Encode** -- serialise the payload (if any) to JSON bytes.  An encode
   failure is a programming error and propagates unchanged.
3. **Build** -- assemble URL and headers (``Content-Type``, ``Accept``,
   ``Authorization``, ``Content-Length`` and caller extras).  Invalid
   input becomes :class:`~fcm_rest.core.errors.BuildRequestFailure`.
4. **Send** -- dispatch through the
   :class:`~fcm_rest.core.interfaces.Transport`.  Any failure becomes
   :class:`~fcm_rest.core.errors.HttpRequestFailure`.
5. **Classify** -- map the status code onto the ``RPCError`` taxonomy, or
   decode a 200 body into the response type (:func:`classify_response`).
6. **Convert** -- raise the caller's domain error, built with
   ``error_type.from_rpc_error``.

Lower-level failures are never swallowed: the domain error is raised
from the ``RPCError``, which is itself raised from the original
exception, so the full chain is available through ``__cause__``.

The pipeline holds no mutable state and may be shared by any number of
concurrent executions.  It does not retry, time out, or cache tokens.
"""
from __future__ import annotations

import functools
import logging
from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import to_json

from fcm_rest.core.errors import (
    BuildRequestFailure,
    DecodeFailure,
    DeserializeFailure,
    DomainError,
    HttpRequestFailure,
    InternalServerError,
    InvalidRequest,
    RPCError,
    RPCUnauthorized,
    UnknownStatus,
)
from fcm_rest.core.interfaces import TokenProvider, Transport, TransportResponse
from fcm_rest.wire.encoding import WireModel

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE: str = "application/json"

Header = tuple[str, str]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@functools.lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def encode_payload(payload: Any) -> bytes:
    """Serialise *payload* to compact JSON bytes.

    ``None`` means "no body" and yields ``b""``.
    """
    if payload is None:
        return b""
    if isinstance(payload, WireModel):
        return payload.to_wire_json()
    if isinstance(payload, BaseModel):
        return payload.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
    return to_json(payload)


def parse_retry_after(headers: Mapping[str, str]) -> timedelta | None:
    """Return the ``Retry-After`` delay if it is a whole number of seconds.

    HTTP-date values and malformed values yield ``None``.
    """
    raw = headers.get("retry-after")
    if raw is None:
        return None
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()):
        return None
    return timedelta(seconds=int(raw))


async def classify_response(response: TransportResponse, response_type: Any) -> Any:
    """Decode a successful response or raise the matching :class:`RPCError`.

    ========================  =========================================
    Status                    Outcome
    ========================  =========================================
    200                       body decoded into *response_type*
    401                       :class:`RPCUnauthorized`
    400                       :class:`InvalidRequest` with the body text
    other 4xx                 :class:`InvalidRequest` without details
    5xx                       :class:`InternalServerError`
    anything else             :class:`UnknownStatus`
    ========================  =========================================
    """
    status = response.status_code

    if status == 200:
        body = await _read_body(response)
        try:
            return _adapter(response_type).validate_json(body)
        except ValidationError as exc:
            source = body.decode("utf-8", errors="replace")
            raise DeserializeFailure(str(exc), source) from exc

    if status == 401:
        raise RPCUnauthorized("unable to access firebase resource")

    if status == 400:
        body = await _read_body(response)
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError:
            text = ""
        raise InvalidRequest(text or None)

    if 400 <= status < 500:
        raise InvalidRequest()

    if 500 <= status < 600:
        raise InternalServerError(parse_retry_after(response.headers))

    raise UnknownStatus(status)


async def _read_body(response: TransportResponse) -> bytes:
    try:
        return await response.read()
    except Exception as exc:
        raise DecodeFailure() from exc


# ---------------------------------------------------------------------------
# RequestPipeline
# ---------------------------------------------------------------------------


class RequestPipeline:
    """Generic authenticated-request pipeline.

    Parameters
    ----------
    token_provider:
        Source of bearer tokens; called once per :meth:`execute`.
    transport:
        HTTP transport used to send requests.
    """

    def __init__(self, token_provider: TokenProvider, transport: Transport) -> None:
        self._token_provider = token_provider
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    async def execute(
        self,
        method: str,
        endpoint: str,
        payload: Any = None,
        *,
        response_type: Any,
        error_type: type[DomainError],
        extra_headers: Iterable[Header] = (),
    ) -> Any:
        """Send one authenticated JSON request and decode the response.

        Parameters
        ----------
        method:
            HTTP method, e.g. ``"POST"``.
        endpoint:
            Absolute URL of the endpoint.
        payload:
            Request body model or JSON-compatible value; ``None`` sends an
            empty body.
        response_type:
            Type the 200 response body is validated into (any type
            accepted by :class:`pydantic.TypeAdapter`).
        error_type:
            Domain error family; every failure is raised as
            ``error_type.from_rpc_error(rpc_error)``.
        extra_headers:
            Additional ``(name, value)`` headers.

        Raises
        ------
        FCMRestError
            The domain error built by *error_type*, chained from the
            underlying :class:`RPCError`.
        """
        try:
            return await self._execute(method, endpoint, payload, response_type, extra_headers)
        except RPCError as rpc_error:
            logger.warning(
                "%s %s failed: %s (%s)",
                method,
                endpoint,
                rpc_error.code,
                rpc_error.message,
            )
            raise error_type.from_rpc_error(rpc_error) from rpc_error

    async def _execute(
        self,
        method: str,
        endpoint: str,
        payload: Any,
        response_type: Any,
        extra_headers: Iterable[Header],
    ) -> Any:
        try:
            token = await self._token_provider.acquire_bearer_token()
        except Exception as exc:
            raise RPCUnauthorized("unable to get header token") from exc

        body = encode_payload(payload)
        url, headers = self._build_request(endpoint, token, body, extra_headers)

        logger.debug("%s %s (%d bytes)", method, url, len(body))
        try:
            response = await self._transport.send(method, url, headers, body)
        except Exception as exc:
            raise HttpRequestFailure(f"unable to process http request: {exc!r}") from exc

        try:
            logger.debug("%s %s -> %d", method, url, response.status_code)
            return await classify_response(response, response_type)
        finally:
            await response.aclose()

    @staticmethod
    def _build_request(
        endpoint: str,
        token: str,
        body: bytes,
        extra_headers: Iterable[Header],
    ) -> tuple[str, httpx.Headers]:
        try:
            url = httpx.URL(endpoint)
            if not url.is_absolute_url:
                raise ValueError(f"endpoint is not an absolute URL: {endpoint!r}")
            headers = httpx.Headers(
                {
                    "Content-Type": JSON_CONTENT_TYPE,
                    "Accept": JSON_CONTENT_TYPE,
                    "Authorization": f"Bearer {token}",
                    "Content-Length": str(len(body)),
                }
            )
            for name, value in extra_headers:
                headers[name] = value
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise BuildRequestFailure(repr(exc)) from exc
        return str(url), headers


__all__ = [
    "JSON_CONTENT_TYPE",
    "RequestPipeline",
    "classify_response",
    "encode_payload",
    "parse_retry_after",
]
